"""Display options understood by the layout computation"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Self

from src.widget.square_size import DEFAULT_SQUARE_SIZE, validate_square_size

# keys used in option mappings (widget options, request parameters, ...)
FLIP = "flip"
SQUARE_SIZE = "square_size"
SHOW_COORDINATES = "show_coordinates"

DISPLAY_OPTION_KEYS = (FLIP, SQUARE_SIZE, SHOW_COORDINATES)


@dataclass(frozen=True)
class DisplayOptions:
    flip: bool = False
    square_size: int = DEFAULT_SQUARE_SIZE
    show_coordinates: bool = True

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to store the sanitized value
        object.__setattr__(self, "square_size", validate_square_size(self.square_size))

    @classmethod
    def from_mapping(
        cls, raw: Optional[Mapping[str, Any]], defaults: Optional[Self] = None
    ) -> Self:
        """
        Read options from a loosely typed mapping.

        Missing keys (or None values) take the value from `defaults`, booleans are read by truthiness.
        Keys that are not display options are ignored.
        """
        base = defaults if defaults is not None else cls()
        if not raw:
            return base

        overrides: dict[str, Any] = {}
        if raw.get(FLIP) is not None:
            overrides[FLIP] = bool(raw[FLIP])
        if raw.get(SQUARE_SIZE) is not None:
            overrides[SQUARE_SIZE] = validate_square_size(raw[SQUARE_SIZE])
        if raw.get(SHOW_COORDINATES) is not None:
            overrides[SHOW_COORDINATES] = bool(raw[SHOW_COORDINATES])
        return replace(base, **overrides)
