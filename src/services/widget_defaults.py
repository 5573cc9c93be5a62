"""
Default display options stored in the settings store.

Loaded once at startup, the resulting DisplayOptions get passed to whoever renders boards.
"""

import logging
from typing import Optional

from src.db.repository import SettingsStore
from src.widget.options import DisplayOptions
from src.widget.square_size import DEFAULT_SQUARE_SIZE, validate_square_size

_log = logging.getLogger(__name__)

SQUARE_SIZE_OPTION = "chesswidget_squareSize"
SHOW_COORDINATES_OPTION = "chesswidget_showCoordinates"

DEFAULT_SHOW_COORDINATES = True


def validate_stored_square_size(value: Optional[str]) -> Optional[int]:
    """Stored value must be an integer. None if missing or unreadable, the sanitized size otherwise."""
    if value is None:
        return None
    try:
        return validate_square_size(int(value.strip()))
    except ValueError:
        return None


def validate_boolean_from_int(value: Optional[str]) -> Optional[bool]:
    """Booleans are stored as '0' / '1'. None for anything else."""
    if value is None:
        return None
    match value.strip():
        case "0":
            return False
        case "1":
            return True
        case _:
            return None


def load_widget_defaults(store: SettingsStore) -> DisplayOptions:
    """Read the stored defaults, falling back to the built-in ones for missing or invalid values."""
    square_size = validate_stored_square_size(store.get_option(SQUARE_SIZE_OPTION))
    show_coordinates = validate_boolean_from_int(
        store.get_option(SHOW_COORDINATES_OPTION)
    )
    defaults = DisplayOptions(
        square_size=DEFAULT_SQUARE_SIZE if square_size is None else square_size,
        show_coordinates=(
            DEFAULT_SHOW_COORDINATES if show_coordinates is None else show_coordinates
        ),
    )
    _log.debug("Loaded chessboard defaults: %s", defaults)
    return defaults
