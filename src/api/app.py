"""
FastAPI application serving chessboard diagrams.

GET /board         -> HTML markup of the diagram
GET /board/layout  -> same diagram as JSON (rows, cells, labels, sprite URLs)

Stored defaults are read once when the app gets created; requests never touch the database.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from src.api.models import BoardLayoutResponse, RenderBoardRequest
from src.core.config import AppConfig
from src.core.exceptions import ChessWidgetError
from src.core.logging_config import configure_logging
from src.db.database import create_session_factory, get_db
from src.db.sql_repository import SQLSettingsStore
from src.services.chessboard_service import ChessboardService
from src.services.widget_defaults import load_widget_defaults
from src.widget.sprites import SpriteResolver

_log = logging.getLogger(__name__)


def build_service(config: AppConfig) -> ChessboardService:
    """Load the stored defaults and wire up the service."""
    session_factory = create_session_factory(config.database_url)
    sessions = get_db(session_factory)
    try:
        defaults = load_widget_defaults(SQLSettingsStore(next(sessions)))
    finally:
        sessions.close()
    return ChessboardService(defaults, SpriteResolver(config.asset_base_url))


def create_app(
    config: Optional[AppConfig] = None, service: Optional[ChessboardService] = None
) -> FastAPI:
    config = config if config is not None else AppConfig.from_env()
    configure_logging(config.log_level)
    if service is None:
        service = build_service(config)
    _log.info("Chessboard defaults: %s", service.defaults)

    app = FastAPI(title="Chess widget")
    app.state.service = service

    @app.exception_handler(ChessWidgetError)
    def handle_widget_error(request: Request, error: ChessWidgetError) -> JSONResponse:
        _log.info("Rejected %s: %s", request.url.path, error)
        return JSONResponse(status_code=400, content={"detail": str(error)})

    @app.get("/board", response_class=HTMLResponse)
    def render_board(
        position: str = "start",
        flip: Optional[bool] = None,
        square_size: Optional[str] = None,
        show_coordinates: Optional[bool] = None,
    ) -> str:
        request = RenderBoardRequest(
            position=position,
            flip=flip,
            square_size=square_size,
            show_coordinates=show_coordinates,
        )
        return app.state.service.render(request)

    @app.get("/board/layout", response_model=BoardLayoutResponse)
    def board_layout(
        position: str = "start",
        flip: Optional[bool] = None,
        square_size: Optional[str] = None,
        show_coordinates: Optional[bool] = None,
    ) -> BoardLayoutResponse:
        request = RenderBoardRequest(
            position=position,
            flip=flip,
            square_size=square_size,
            show_coordinates=show_coordinates,
        )
        return app.state.service.layout(request)

    return app
