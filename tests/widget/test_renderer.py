"""Unit tests for src/widget/renderer.py"""

import re

import pytest

from src.chess.position import Position
from src.widget.layout import compute_layout
from src.widget.options import DisplayOptions
from src.widget.renderer import (
    HEADER_SIZE,
    SquareColors,
    make,
    render_html,
    table_size,
)
from src.widget.sprites import SpriteResolver

RESOLVER = SpriteResolver("/static/")


def _count(html: str, css_class: str) -> int:
    return len(re.findall(f'class="ChessWidget-{css_class}"', html))


def test_structure_with_coordinates(starting_position: Position) -> None:
    html = render_html(compute_layout(starting_position, DisplayOptions()), RESOLVER)
    assert html.startswith('<div class="ChessWidget"><div class="ChessWidget-table">')
    assert _count(html, "row") == 9
    assert _count(html, "row-header") == 8
    assert _count(html, "cell") == 64
    assert _count(html, "fake-cell") == 8
    assert _count(html, "corner-header") == 1
    assert _count(html, "column-header") == 8
    assert _count(html, "fake-header") == 1


def test_structure_without_coordinates(starting_position: Position) -> None:
    html = render_html(
        compute_layout(starting_position, DisplayOptions(show_coordinates=False)),
        RESOLVER,
    )
    assert _count(html, "row") == 8
    assert _count(html, "row-header") == 0
    assert _count(html, "column-header") == 0
    assert _count(html, "cell") == 64


def test_first_cell(starting_position: Position) -> None:
    html = render_html(compute_layout(starting_position, DisplayOptions()), RESOLVER)
    assert (
        '<div class="ChessWidget-row"><div class="ChessWidget-row-header">8</div>'
        '<div class="ChessWidget-cell" style="background-color: #f0dec7;">'
        '<img src="/static/sprite/32/br.png" /></div>'
    ) in html


def test_turn_flag(starting_position: Position) -> None:
    html = render_html(
        compute_layout(starting_position, DisplayOptions(square_size=48)), RESOLVER
    )
    assert html.count("/static/sprite/48/white.png") == 1
    assert "black.png" not in html
    assert (
        '<div class="ChessWidget-fake-cell"><img src="/static/sprite/48/white.png" /></div>'
        in html
    )


def test_custom_colors(empty_position: Position) -> None:
    html = render_html(
        compute_layout(empty_position, DisplayOptions()),
        RESOLVER,
        SquareColors(light="white", dark="black"),
    )
    assert html.count("background-color: white;") == 32
    assert html.count("background-color: black;") == 32


def test_column_header_order(empty_position: Position) -> None:
    html = render_html(compute_layout(empty_position, DisplayOptions(flip=True)), RESOLVER)
    labels = re.findall(r'class="ChessWidget-column-header">(\w)<', html)
    assert labels == list("hgfedcba")


@pytest.mark.parametrize(
    "options, expected",
    [
        (DisplayOptions(), (9 * 32 + HEADER_SIZE, 8 * 32 + HEADER_SIZE)),
        (DisplayOptions(square_size=64, show_coordinates=False), (9 * 64, 8 * 64)),
    ],
)
def test_table_size(options: DisplayOptions, expected: tuple[int, int]) -> None:
    assert table_size(options) == expected


def test_make_from_string() -> None:
    html = make("start", {"flip": True, "square_size": 24}, RESOLVER)
    assert "/static/sprite/24/wr.png" in html
    # flipped: first row is the first rank, starting with h1
    assert html.index(">1<") < html.index(">8<")


def test_make_invalid_position_gives_empty_board() -> None:
    html = make("this is no position", resolver=RESOLVER)
    assert html.count("/static/sprite/32/clear.png") == 64


def test_make_with_position_and_options(starting_position: Position) -> None:
    assert make(starting_position, DisplayOptions(), RESOLVER) == render_html(
        compute_layout(starting_position, DisplayOptions()), RESOLVER
    )
