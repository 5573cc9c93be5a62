"""
The position to draw: piece placement + the side to move.

`parse` is strict and raises on anything it cannot read. `parse_or_empty` is what a widget wants:
a diagram with a typo in its FEN shows an empty board instead of breaking the page.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.board import Board
from src.chess.fen import EMPTY_FEN, STARTING_FEN, FENState
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

_log = logging.getLogger(__name__)

FEN_ALIASES: dict[str, str] = {
    "start": STARTING_FEN,
    "empty": EMPTY_FEN,
}


@dataclass(frozen=True)
class Position:
    board: Board
    color_to_move: Color
    fen: str

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        state = FENState.from_fen(fen)
        return cls(Board.from_fen(state.board), state.color_to_move, state.to_fen())

    @classmethod
    def empty(cls) -> Self:
        return cls.from_fen(EMPTY_FEN)

    def piece_at(self, square: str | Square) -> Optional[Piece]:
        """Occupant of a square given as Square or in algebraic notation ('e4'). None for an empty square."""
        if isinstance(square, str):
            square = Square.from_algebraic(square)
        return self.board.piece(square)


def resolve_alias(description: str) -> str:
    """Trim the description and replace 'start' / 'empty' by the corresponding FEN."""
    description = description.strip()
    return FEN_ALIASES.get(description, description)


def parse(description: str) -> Position:
    """Read a FEN string or one of the aliases. Raises InvalidFENError on malformed input."""
    return Position.from_fen(resolve_alias(description))


def parse_or_empty(description: str) -> Position:
    """Best effort version of `parse`: malformed input gives the empty board (white to move)."""
    try:
        return parse(description)
    except InvalidFENError:
        _log.warning("Could not parse position %r, drawing an empty board.", description)
        return Position.empty()
