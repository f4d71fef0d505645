"""Thin static facade over the standard :mod:`logging` module.

Every module of the code-base logs through :class:`Logger` so that call sites stay
short (``Logger.warning(f"...")``) and tests can patch a single well-known target.
"""

import logging
from typing import Final

SUCCESS_LEVEL: Final[int] = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class Logger:
    """Static logging helpers bound to the ``working_days`` logger."""

    _LOGGER_NAME: Final[str] = "working_days"
    _FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(message)s"
    _SEPARATOR: Final[str] = "-" * 60

    _logger = logging.getLogger(_LOGGER_NAME)

    @staticmethod
    def configure(level: int = logging.INFO) -> None:
        """Attach a stream handler once and set the threshold level."""
        if not Logger._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(Logger._FORMAT))
            Logger._logger.addHandler(handler)
        Logger._logger.setLevel(level)

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._logger.debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._logger.info(message)

    @staticmethod
    def success(message: str) -> None:
        """Log a completed step."""
        Logger._logger.log(SUCCESS_LEVEL, message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning."""
        Logger._logger.warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error."""
        Logger._logger.error(message)

    @staticmethod
    def separator() -> None:
        """Log a visual separator line."""
        Logger._logger.info(Logger._SEPARATOR)
