"""Logging setup. Modules only create their own logger with `logging.getLogger(__name__)`; handlers are installed here."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_level: str = "INFO") -> None:
    """Install a single console handler on the root logger (replacing any previous ones)."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # avoid duplicated output when the app gets created more than once (tests, reloads)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # SQLAlchemy is chatty at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
