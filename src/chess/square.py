"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.shared_types import Shade

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_NAMES: tuple[str, ...] = tuple(ascii_lowercase[: BOARD_DIMENSIONS[0]])


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        file = ord(sq[0]) - ord("a") + 1
        rank = int(sq[1:])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    @property
    def shade(self) -> Shade:
        """a1 is dark. Only depends on the square itself, so never on how the board is drawn."""
        if (self.file - 1 + self.rank - 1) % 2 == 0:
            return Shade.DARK
        return Shade.LIGHT
