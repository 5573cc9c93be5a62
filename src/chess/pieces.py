"""Defines the chess pieces and the short codes used for FEN and for the sprite file names"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

COLOR_CODES: dict[Color, str] = {Color.WHITE: "w", Color.BLACK: "b"}

CODE_TO_COLOR: dict[str, Color] = {value: key for key, value in COLOR_CODES.items()}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    @property
    def sprite_key(self) -> str:
        """Color code + piece code, e.g. 'wk' for the white king or 'bn' for a black knight."""
        return f"{COLOR_CODES[self.color]}{PIECE_TO_FEN[self.type]}"
