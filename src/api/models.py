"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Shade
from src.widget.layout import BoardLayout, CellLayout, RowLayout
from src.widget.square_size import validate_square_size


# --- REQUEST MODELS ---
class RenderBoardRequest(BaseModel):
    """Position + display options. Options left to None take the stored defaults."""

    position: str = "start"
    flip: Optional[bool] = None
    square_size: Optional[int] = None
    show_coordinates: Optional[bool] = None

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("Position must not be empty.")
        return value

    @field_validator("square_size", mode="before")
    @classmethod
    def sanitize_square_size(cls, value: Any) -> Optional[int]:
        if value is None:
            return value
        return validate_square_size(value)


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    color: Color
    type: PieceType


class CellResponse(BaseModel):
    square: str
    shade: Shade
    piece: Optional[PieceResponse]
    sprite_key: str
    sprite_url: str


class RowResponse(BaseModel):
    rank: int
    label: Optional[str]
    cells: list[CellResponse]
    turn_marker: Optional[Color]


class BoardLayoutResponse(BaseModel):
    fen: str
    flip: bool
    square_size: int
    rows: list[RowResponse]
    column_labels: Optional[list[str]]

    @classmethod
    def from_layout(
        cls, fen: str, layout: BoardLayout, sprite_urls: dict[str, str]
    ) -> Self:
        """`sprite_urls` maps every sprite key used in the layout to its URL."""

        def _cell(cell: CellLayout) -> CellResponse:
            piece = (
                PieceResponse(color=cell.piece.color, type=cell.piece.type)
                if cell.piece is not None
                else None
            )
            return CellResponse(
                square=cell.square,
                shade=cell.shade,
                piece=piece,
                sprite_key=cell.sprite_key,
                sprite_url=sprite_urls[cell.sprite_key],
            )

        def _row(row: RowLayout) -> RowResponse:
            return RowResponse(
                rank=row.rank,
                label=row.label,
                cells=[_cell(cell) for cell in row.cells],
                turn_marker=row.turn_marker.color if row.turn_marker else None,
            )

        return cls(
            fen=fen,
            flip=layout.flip,
            square_size=layout.square_size,
            rows=[_row(row) for row in layout.rows],
            column_labels=(
                list(layout.column_header.labels) if layout.column_header else None
            ),
        )
