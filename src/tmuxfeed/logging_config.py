"""
Logging configuration for tmuxfeed.

All loggers live under the "tmuxfeed" namespace so the CLI can configure
them in one place.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from rich.logging import RichHandler


DEFAULT_LOG_DIR = Path.home() / ".tmuxfeed" / "logs"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the tmuxfeed namespace."""
    return logging.getLogger(f"tmuxfeed.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    rich_console: bool = False,
) -> None:
    """Configure the root tmuxfeed logger.

    Args:
        level: Logging level
        log_file: Optional file to append log records to
        console: Whether to log to stderr
        rich_console: Use rich's RichHandler for console output
    """
    logger = logging.getLogger("tmuxfeed")
    logger.handlers.clear()
    logger.setLevel(level)

    if console:
        if rich_console:
            handler: logging.Handler = RichHandler(show_path=False)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def setup_cli_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging for CLI usage: quiet unless verbose."""
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=log_file,
        console=True,
        rich_console=True,
    )
    return get_logger("cli")


class StructuredLogger:
    """Logger wrapper that appends key=value context to each message."""

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        self._logger = logger
        self._context = context or {}

    def with_context(self, **kwargs: Any) -> "StructuredLogger":
        merged = dict(self._context)
        merged.update(kwargs)
        return StructuredLogger(self._logger, merged)

    def _format(self, message: str, kwargs: Dict[str, Any]) -> str:
        fields = dict(self._context)
        fields.update(kwargs)
        if not fields:
            return message
        extra = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{message} {extra}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(self._format(message, kwargs))


def get_structured_logger(name: str) -> StructuredLogger:
    return StructuredLogger(get_logger(name))
