"""Orchestration from API request to position parsing, layout computation and rendering."""

from src.api.models import BoardLayoutResponse, RenderBoardRequest
from src.chess.position import Position, parse
from src.widget.layout import BoardLayout, compute_layout
from src.widget.options import DisplayOptions
from src.widget.renderer import SquareColors, render_html
from src.widget.sprites import SpriteResolver


class ChessboardService:
    """Render boards using the defaults loaded at startup."""

    def __init__(
        self,
        defaults: DisplayOptions,
        resolver: SpriteResolver,
        colors: SquareColors | None = None,
    ) -> None:
        self.defaults = defaults
        self.resolver = resolver
        self.colors = colors if colors is not None else SquareColors()

    def display_options(self, request: RenderBoardRequest) -> DisplayOptions:
        """Options given in the request take precedence over the defaults."""
        return DisplayOptions.from_mapping(
            request.model_dump(exclude={"position"}), defaults=self.defaults
        )

    def layout(self, request: RenderBoardRequest) -> BoardLayoutResponse:
        """Layout as JSON-able data (with sprite URLs resolved)."""
        position, layout = self._compute(request)
        sprite_urls = {
            cell.sprite_key: self.resolver.resolve(cell.sprite_key, layout.square_size)
            for cell in layout.cells()
        }
        return BoardLayoutResponse.from_layout(position.fen, layout, sprite_urls)

    def render(self, request: RenderBoardRequest) -> str:
        """HTML markup of the requested board."""
        _, layout = self._compute(request)
        return render_html(layout, self.resolver, self.colors)

    # -- Internal helpers --
    def _compute(self, request: RenderBoardRequest) -> tuple[Position, BoardLayout]:
        # raises InvalidFENError for malformed positions
        position = parse(request.position)
        return position, compute_layout(position, self.display_options(request))
