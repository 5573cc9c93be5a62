"""
Syntax checks for FEN strings and the parsed FEN fields.

Only the format gets validated here (8 ranks of 8 squares, known piece letters, etc.).
Whether the position could occur in a real game is not our business: we only draw it.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import CODE_TO_COLOR, COLOR_CODES, FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"

# order in which castling rights are written: white king side, white queen side, black king side, black queen side
CASTLING_ORDER = "KQkq"
NUM_FEN_FIELDS = 6


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string follows proper FEN notation.
    """
    # there should be 6 (whitespace separated) parts to the string
    parts = fen.split()
    if len(parts) != NUM_FEN_FIELDS:
        return False

    board, color, castling, en_passant, half_move_counter, full_move_counter = parts
    return (
        is_valid_board(board)
        and is_valid_color_code(color)
        and is_valid_castling_rights(castling)
        and is_valid_en_passant(en_passant)
        and is_valid_move_counter(half_move_counter)
        and is_valid_move_counter(full_move_counter)
    )


def is_valid_board(board: str) -> bool:
    """Only check the part of the FEN encoding for the piece placement."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = board.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            if character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                return False

        # a digit like '9' would silently create a 9-file rank
        if file_count != num_files:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in CODE_TO_COLOR


def is_valid_castling_rights(castling: str) -> bool:
    """Either '-' or a non-empty subsequence of 'KQkq' (order matters, no duplicates)."""
    if castling == "-":
        return True
    remaining = iter(CASTLING_ORDER)
    # consuming the iterator enforces the order
    return len(castling) > 0 and all(char in remaining for char in castling)


def is_valid_en_passant(en_passant: str) -> bool:
    """Valid en passant square encoding should be a square that exists on the board or a '-'"""
    return (en_passant == "-") or is_valid_square(en_passant)


def is_valid_square(square: str) -> bool:
    """Valid square should be a letter for the file + a number for the rank"""
    if len(square) < 2:
        return False

    file_char, rank_char = square[0], square[1:]
    if file_char not in FILE_NAMES:
        return False

    if not rank_char.isdigit():
        return False

    return 1 <= int(rank_char) <= BOARD_DIMENSIONS[1]


def is_valid_move_counter(counter: str) -> bool:
    return counter.isdigit()


@dataclass(frozen=True)
class FENState:
    """
    Data that can be constructed from a FEN string.
    ----

    <piece placement> <active color> <castling rights> <en passant square> <half move clock> <full move number>

    ex) The standard starting position has a FEN
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
    i.e. it is white to move, all castling options available, no en passant square, no half moves and we are in the first turn.

    For drawing a diagram only the piece placement and the active color matter, the other fields are kept so the
    position can be written back out unchanged.
    """

    board: str
    color_to_move: Color
    castling_rights: str
    en_passant_square: Optional[Square]
    half_move_clock: int
    num_turns: int

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen!r}")

        (
            board,
            active_color,
            castling_rights,
            en_passant_algebraic,
            half_move_clock,
            num_turns,
        ) = fen.split()

        en_passant_square = (
            Square.from_algebraic(en_passant_algebraic)
            if en_passant_algebraic != "-"
            else None
        )
        return cls(
            board,
            CODE_TO_COLOR[active_color],
            castling_rights,
            en_passant_square,
            int(half_move_clock),
            int(num_turns),
        )

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        en_passant_algebraic = (
            self.en_passant_square.to_algebraic()
            if self.en_passant_square is not None
            else "-"
        )
        return " ".join(
            [
                self.board,
                COLOR_CODES[self.color_to_move],
                self.castling_rights,
                en_passant_algebraic,
                str(self.half_move_clock),
                str(self.num_turns),
            ]
        )
