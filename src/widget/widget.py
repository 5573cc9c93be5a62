"""
Stateful chessboard widget.

Holds the options of one diagram on a page and keeps its HTML in sync with them. All the drawing logic lives in
`compute_layout` / `render_html`; the widget only stores options and recomputes everything after each change.
"""

import logging
from typing import Any, Optional

from src.chess.fen import EMPTY_FEN
from src.chess.position import Position, parse_or_empty
from src.core.exceptions import UnknownOptionError
from src.widget.layout import BoardLayout, compute_layout
from src.widget.options import FLIP, SHOW_COORDINATES, SQUARE_SIZE, DisplayOptions
from src.widget.renderer import SquareColors, render_html, table_size
from src.widget.sprites import SpriteResolver
from src.widget.square_size import fit_square_size, validate_square_size

_log = logging.getLogger(__name__)

POSITION = "position"
WIDGET_OPTION_KEYS = (POSITION, FLIP, SQUARE_SIZE, SHOW_COORDINATES)


class ChessboardWidget:
    """A diagram whose options can change after creation (position, flip, square size, coordinates)."""

    def __init__(
        self,
        position: str = EMPTY_FEN,
        defaults: Optional[DisplayOptions] = None,
        resolver: Optional[SpriteResolver] = None,
        colors: Optional[SquareColors] = None,
        **options: Any,
    ) -> None:
        defaults = defaults if defaults is not None else DisplayOptions()
        self.resolver = resolver if resolver is not None else SpriteResolver()
        self.colors = colors if colors is not None else SquareColors()
        self._options: dict[str, Any] = {
            POSITION: position.strip(),
            FLIP: defaults.flip,
            SQUARE_SIZE: defaults.square_size,
            SHOW_COORDINATES: defaults.show_coordinates,
        }
        self._position: Optional[Position] = None
        self._html = ""
        self.created = False
        for key, value in options.items():
            self._store_option(key, value)

    # -- lifecycle --
    def create(self) -> str:
        """Activate the widget and render it for the first time."""
        self.created = True
        return self.refresh()

    def destroy(self) -> None:
        """Remove the markup. Options are kept, `create` can be called again."""
        self.created = False
        self._html = ""

    # -- options --
    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    def option(self, key: str) -> Any:
        if key not in WIDGET_OPTION_KEYS:
            raise UnknownOptionError(f"Unknown chessboard option: {key!r}")
        return self._options[key]

    def set_option(self, key: str, value: Any) -> None:
        """Change one option and re-render (if the widget has been created)."""
        self._store_option(key, value)
        if self.created:
            self.refresh()

    def _store_option(self, key: str, value: Any) -> None:
        if key == POSITION:
            value = str(value).strip()
            # the position needs to be re-parsed
            self._position = None
        elif key == SQUARE_SIZE:
            value = validate_square_size(value)
        elif key in (FLIP, SHOW_COORDINATES):
            value = bool(value)
        else:
            raise UnknownOptionError(f"Unknown chessboard option: {key!r}")
        self._options[key] = value

    @property
    def display_options(self) -> DisplayOptions:
        return DisplayOptions(
            flip=self._options[FLIP],
            square_size=self._options[SQUARE_SIZE],
            show_coordinates=self._options[SHOW_COORDINATES],
        )

    # -- rendering --
    @property
    def position(self) -> Position:
        if self._position is None:
            self._position = parse_or_empty(self._options[POSITION])
        return self._position

    @property
    def html(self) -> str:
        """Markup of the last render (empty before `create` / after `destroy`)."""
        return self._html

    def layout(self) -> BoardLayout:
        return compute_layout(self.position, self.display_options)

    def refresh(self) -> str:
        """Recompute the diagram from scratch."""
        self._html = render_html(self.layout(), self.resolver, self.colors)
        _log.debug("Rendered chessboard with options %s", self._options)
        return self._html

    def fit_in(self, width: float, height: float) -> None:
        """Resize the squares so that the diagram fits in a box of size `width` x `height`."""
        current = self._options[SQUARE_SIZE]
        table_width, table_height = table_size(self.display_options)
        new_size = fit_square_size(current, table_width, table_height, width, height)
        if new_size != current:
            self._options[SQUARE_SIZE] = new_size
            if self.created:
                self.refresh()
