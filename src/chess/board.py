"""Piece placement: which piece (if any) stands on each of the 64 squares"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square


@dataclass(frozen=True)
class Board:
    # only occupied squares are stored, every other square on the board is empty
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the first field of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with the rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.

        Expects a board field that passed `is_valid_board`.
        """
        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_str.split("/")):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character.isalpha():
                    position[Square(file, rank)] = Piece.from_fen(character)
                    file += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
        return cls(position)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)
