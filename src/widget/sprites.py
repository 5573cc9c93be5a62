"""Where the piece images live: <base url>sprite/<square size>/<sprite key>.png"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Color
from src.widget.layout import EMPTY_SPRITE_KEY
from src.widget.square_size import validate_square_size


@dataclass(frozen=True)
class SpriteResolver:
    base_url: str = ""

    def __post_init__(self) -> None:
        if self.base_url and not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", f"{self.base_url}/")

    def folder(self, square_size: int) -> str:
        """URL of the folder with the sprites of a given size (with trailing '/')"""
        return f"{self.base_url}sprite/{validate_square_size(square_size)}/"

    def resolve(self, sprite_key: Optional[str], square_size: int) -> str:
        """URL of a piece sprite. None is the transparent image used for empty squares."""
        return f"{self.folder(square_size)}{sprite_key or EMPTY_SPRITE_KEY}.png"

    def turn_flag(self, color: Optional[Color], square_size: int) -> str:
        """URL of the image marking the side to move (transparent image for None)."""
        name = str(color) if color is not None else EMPTY_SPRITE_KEY
        return f"{self.folder(square_size)}{name}.png"
