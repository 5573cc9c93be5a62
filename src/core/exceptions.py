"""Exceptions raised across layers. Everything derives from ChessWidgetError so adapters can catch one type."""


class ChessWidgetError(Exception):
    """Base class for errors raised by this package."""


class InvalidFENError(ChessWidgetError):
    """String could not be interpreted as a FEN position (or one of the aliases)."""


class InvalidRequestError(ChessWidgetError):
    """Request model failed validation."""


class UnknownOptionError(ChessWidgetError):
    """Widget option name is not recognized."""


class SettingsError(ChessWidgetError):
    """Settings store could not be read or written."""
