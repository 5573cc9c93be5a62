"""
HTML output for a BoardLayout.

The markup is a table made of divs (class names prefixed with 'ChessWidget-'), with the piece sprites as images:

    ChessWidget
      ChessWidget-table
        ChessWidget-row (x8): [row-header] cell (x8) fake-cell (holds the turn marker)
        ChessWidget-row:      corner-header column-header (x8) fake-header   (only with coordinates)
"""

from dataclasses import dataclass
from html import escape
from typing import Any, Mapping, Optional

from src.chess.position import Position, parse_or_empty
from src.core.shared_types import Shade
from src.widget.layout import BoardLayout, ColumnHeaderRow, RowLayout, compute_layout
from src.widget.options import DisplayOptions
from src.widget.sprites import SpriteResolver

# width of the row header column / height of the column header row, in pixels (see the stylesheet)
HEADER_SIZE = 16


@dataclass(frozen=True)
class SquareColors:
    light: str = "#f0dec7"
    dark: str = "#b5876b"

    def for_shade(self, shade: Shade) -> str:
        return self.light if shade == Shade.LIGHT else self.dark


def _div(css_class: str, content: str = "", style: Optional[str] = None) -> str:
    style_attr = f' style="{escape(style)}"' if style else ""
    return f'<div class="ChessWidget-{css_class}"{style_attr}>{content}</div>'


def _img(src: str) -> str:
    return f'<img src="{escape(src)}" />'


def _render_row(
    row: RowLayout, square_size: int, resolver: SpriteResolver, colors: SquareColors
) -> str:
    parts: list[str] = []

    # If visible, the row coordinates are shown in the left-most column.
    if row.label is not None:
        parts.append(_div("row-header", escape(row.label)))

    for cell in row.cells:
        parts.append(
            _div(
                "cell",
                _img(resolver.resolve(cell.sprite_key, square_size)),
                style=f"background-color: {colors.for_shade(cell.shade)};",
            )
        )

    # "fake" cell at the end of the row: this last column contains the turn flag
    flag = ""
    if row.turn_marker is not None:
        flag = _img(resolver.turn_flag(row.turn_marker.color, square_size))
    parts.append(_div("fake-cell", flag))
    return _div("row", "".join(parts))


def _render_column_header(header: ColumnHeaderRow) -> str:
    parts = [_div("corner-header")]
    parts.extend(_div("column-header", escape(label)) for label in header.labels)
    # empty cell below the "fake" cell column
    parts.append(_div("fake-header"))
    return _div("row", "".join(parts))


def render_html(
    layout: BoardLayout,
    resolver: SpriteResolver,
    colors: Optional[SquareColors] = None,
) -> str:
    """HTML markup of a diagram"""
    if colors is None:
        colors = SquareColors()

    rows = [
        _render_row(row, layout.square_size, resolver, colors) for row in layout.rows
    ]
    if layout.column_header is not None:
        rows.append(_render_column_header(layout.column_header))
    return f'<div class="ChessWidget">{_div("table", "".join(rows))}</div>'


def table_size(options: DisplayOptions) -> tuple[int, int]:
    """Size (width, height) in pixels of the table rendered with the given options."""
    # 8 squares + the turn marker column
    width = 9 * options.square_size
    height = 8 * options.square_size
    if options.show_coordinates:
        width += HEADER_SIZE
        height += HEADER_SIZE
    return width, height


def make(
    position: Position | str,
    options: Optional[Mapping[str, Any] | DisplayOptions] = None,
    resolver: Optional[SpriteResolver] = None,
    colors: Optional[SquareColors] = None,
) -> str:
    """
    One-shot diagram: position (or FEN / alias string) + options -> HTML.

    A string that cannot be parsed as a position gives an empty board.
    """
    if isinstance(position, str):
        position = parse_or_empty(position)
    if not isinstance(options, DisplayOptions):
        options = DisplayOptions.from_mapping(options)
    if resolver is None:
        resolver = SpriteResolver()
    return render_html(compute_layout(position, options), resolver, colors)
