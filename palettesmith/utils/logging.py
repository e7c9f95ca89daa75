"""
Palettesmith Structured Logging
Centralized logging configuration using loguru.

Every record carries a palette context (`palette_id`, `harmony`) so a
generation can be followed from the builder's retry loop to the session
that stored it. Records logged outside a palette show "-" for both.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from palettesmith.config import config

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level} | "
    "{extra[palette_id]} {extra[harmony]} | {message} | {extra}"
)

# Values shown when a record was not logged through a palette context
UNBOUND = "-"


def configure_logging(level: Optional[str] = None) -> None:
    """Install the palette-aware stderr handler in place of loguru's default."""
    logger.remove()
    logger.configure(extra={"palette_id": UNBOUND, "harmony": UNBOUND})
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        serialize=False  # Set to True for JSON output
    )


class StructuredLogger:
    """Structured logger for palette generation."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        self.context = dict(context or {})
        self._logger = logger.bind(**self.context)

    def for_palette(self, palette_id: Optional[str] = None,
                    harmony: Optional[str] = None) -> "StructuredLogger":
        """
        Return a logger whose records carry the given palette context.

        Args:
            palette_id: Palette ID, once one has been assigned
            harmony: Harmony rule or its request value

        Returns:
            New StructuredLogger; this one is left unchanged
        """
        context = dict(self.context)
        if palette_id is not None:
            context["palette_id"] = palette_id
        if harmony is not None:
            context["harmony"] = getattr(harmony, "value", harmony)
        return StructuredLogger(context)

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        target = self._logger.bind(**extra) if extra else self._logger
        target.log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with optional extra data."""
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance, configuring loguru on first use."""
    global _logger
    if _logger is None:
        configure_logging()
        _logger = StructuredLogger()
    return _logger
