"""
Renderer independent description of a chess diagram.

`compute_layout` turns a position + display options into rows of cells, labels and the turn marker.
Renderers (HTML, terminal, ...) only walk the resulting structure, they never look at the position again.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.pieces import Piece
from src.chess.position import Position
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square
from src.core.shared_types import Color, Shade
from src.widget.options import DisplayOptions

# sprite key of a square without a piece
EMPTY_SPRITE_KEY = "clear"

# the turn marker sits next to the home rank of the side to move
HOME_RANKS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: BOARD_DIMENSIONS[1]}


@dataclass(frozen=True)
class CellLayout:
    square: str
    shade: Shade
    piece: Optional[Piece]
    sprite_key: str


@dataclass(frozen=True)
class TurnMarker:
    color: Color

    @property
    def sprite_key(self) -> str:
        return str(self.color)


@dataclass(frozen=True)
class RowLayout:
    rank: int
    label: Optional[str]
    cells: tuple[CellLayout, ...]
    turn_marker: Optional[TurnMarker]


@dataclass(frozen=True)
class ColumnHeaderRow:
    """File letters below the board. The renderer adds an empty corner cell before them and an empty cell after them (below the turn marker column)."""

    labels: tuple[str, ...]


@dataclass(frozen=True)
class BoardLayout:
    rows: tuple[RowLayout, ...]
    column_header: Optional[ColumnHeaderRow]
    square_size: int
    flip: bool

    @property
    def row_labels(self) -> list[Optional[str]]:
        return [row.label for row in self.rows]

    def cells(self) -> list[CellLayout]:
        """All cells, in drawing order"""
        return [cell for row in self.rows for cell in row.cells]

    def turn_marker_row(self) -> Optional[RowLayout]:
        return next((row for row in self.rows if row.turn_marker is not None), None)


def _rank_order(flip: bool) -> list[int]:
    ranks = list(range(BOARD_DIMENSIONS[1], 0, -1))
    return ranks[::-1] if flip else ranks


def _file_order(flip: bool) -> list[int]:
    files = list(range(1, BOARD_DIMENSIONS[0] + 1))
    return files[::-1] if flip else files


def _cell(position: Position, square: Square) -> CellLayout:
    piece = position.piece_at(square)
    return CellLayout(
        square=square.to_algebraic(),
        shade=square.shade,
        piece=piece,
        sprite_key=piece.sprite_key if piece is not None else EMPTY_SPRITE_KEY,
    )


def compute_layout(position: Position, options: DisplayOptions) -> BoardLayout:
    """
    Compute rows (top to bottom) and cells (left to right) of the diagram.

    * not flipped: ranks 8..1 and files a..h; flipped: ranks 1..8 and files h..a
    * shade and row label depend on the absolute square / rank, never on the drawing order
    * the turn marker goes on rank 1 (white to move) or rank 8 (black to move)
    """
    files = _file_order(options.flip)

    rows: list[RowLayout] = []
    for rank in _rank_order(options.flip):
        cells = tuple(_cell(position, Square(file, rank)) for file in files)
        turn_marker = (
            TurnMarker(position.color_to_move)
            if HOME_RANKS[position.color_to_move] == rank
            else None
        )
        rows.append(
            RowLayout(
                rank=rank,
                label=str(rank) if options.show_coordinates else None,
                cells=cells,
                turn_marker=turn_marker,
            )
        )

    column_header = (
        ColumnHeaderRow(tuple(FILE_NAMES[file - 1] for file in files))
        if options.show_coordinates
        else None
    )
    return BoardLayout(
        rows=tuple(rows),
        column_header=column_header,
        square_size=options.square_size,
        flip=options.flip,
    )
