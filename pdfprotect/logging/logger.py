import logging
import sys
from typing import TextIO


class Log:
    """Process-wide logger; keyword context is appended as key=value pairs."""

    _logger: logging.Logger = logging.getLogger("pdfprotect")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler (stderr by default)."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @staticmethod
    def _with_context(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        parts = ", ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{parts}]"

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls._with_context(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(cls._with_context(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls._with_context(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(cls._with_context(message, context))
