"""Unit tests for src/chess/fen.py"""

import pytest

from src.chess.fen import (
    EMPTY_FEN,
    STARTING_FEN,
    FENState,
    InvalidFENError,
    is_valid_board,
    is_valid_castling_rights,
    is_valid_color_code,
    is_valid_en_passant,
    is_valid_fen,
    is_valid_square,
)
from src.chess.square import Square
from src.core.shared_types import Color


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_FEN,
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1 b kq - 3 9",
        EMPTY_FEN,
        "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2",
    ],
)
def test_fen_parsing_roundtrip(fen: str) -> None:
    """Create a FENState from FEN, convert back to FEN to check the fields are parsed in the right order"""
    state = FENState.from_fen(fen)
    assert state.to_fen() == fen


@pytest.mark.parametrize("color_str, color", [("w", Color.WHITE), ("b", Color.BLACK)])
def test_color_to_move(color_str: str, color: Color) -> None:
    fen = f"{'/'.join(['8'] * 8)} {color_str} - - 0 1"
    state = FENState.from_fen(fen)
    assert state.color_to_move == color


@pytest.mark.parametrize(
    "en_passant_algebraic, expected_square",
    [("-", None), ("e3", Square.from_algebraic("e3"))],
)
def test_en_passant_square(en_passant_algebraic: str, expected_square: Square) -> None:
    fen = f"{'/'.join(['8'] * 8)} w - {en_passant_algebraic} 0 1"
    state = FENState.from_fen(fen)
    assert state.en_passant_square == expected_square


def test_extra_whitespace_between_fields() -> None:
    state = FENState.from_fen("8/8/8/8/8/8/8/8  b   -  -  0  1")
    assert state.color_to_move == Color.BLACK
    assert state.to_fen() == "8/8/8/8/8/8/8/8 b - - 0 1"


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0",  # only 5 fields
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",  # 7 fields
        "8/8/8/8/8/8/9/8 w - - 0 1",  # rank with 9 files
        "8/8/8/8/8/8/8 w - - 0 1",  # 7 ranks
        "8/8/8/8/8/8/8/7x w - - 0 1",  # unknown piece letter
        "8/8/8/8/8/8/8/8 x - - 0 1",  # unknown color
        "8/8/8/8/8/8/8/8 w QK - 0 1",  # castling rights in the wrong order
        "8/8/8/8/8/8/8/8 w - z9 0 1",  # en passant square off the board
        "8/8/8/8/8/8/8/8 w - - -1 1",  # negative counter
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    assert not is_valid_fen(invalid_fen)
    with pytest.raises(InvalidFENError):
        FENState.from_fen(invalid_fen)


@pytest.mark.parametrize(
    "board, expected",
    [
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", True),
        ("8/8/8/8/8/8/8/8", True),
        ("4k3/8/8/8/8/8/8/4K3", True),
        ("4k3/8/8/8/8/8/8/4K2", False),
        ("4k3/8/8/8/8/8/8/4K4", False),
        ("8/8/8/8/8/8/8/8/8", False),
    ],
)
def test_is_valid_board(board: str, expected: bool) -> None:
    assert is_valid_board(board) == expected


@pytest.mark.parametrize(
    "castling, expected",
    [
        ("-", True),
        ("KQkq", True),
        ("Kq", True),
        ("k", True),
        ("", False),
        ("KK", False),
        ("qk", False),
        ("KQkq-", False),
    ],
)
def test_is_valid_castling_rights(castling: str, expected: bool) -> None:
    assert is_valid_castling_rights(castling) == expected


def test_is_valid_color_code() -> None:
    assert is_valid_color_code("w")
    assert is_valid_color_code("b")
    assert not is_valid_color_code("white")


@pytest.mark.parametrize(
    "square, expected",
    [("a1", True), ("h8", True), ("i1", False), ("a9", False), ("a", False), ("ax", False)],
)
def test_is_valid_square(square: str, expected: bool) -> None:
    assert is_valid_square(square) == expected
    assert is_valid_en_passant(square) == expected
