"""Logging utilities for releasedocs runs."""

from __future__ import annotations

import logging
from typing import Iterator

_LOGGER_NAME = "releasedocs"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the releasedocs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the releasedocs logger with a single stderr handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[releasedocs] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    return logger


def leaf_errors(exc: BaseException) -> Iterator[BaseException]:
    """Yield the individual failures wrapped in batch or build errors."""
    children = getattr(exc, "errors", None)
    if not children:
        yield exc
        return
    for child in children:
        yield from leaf_errors(child)


def log_failure(logger: logging.Logger, message: str, exc: BaseException) -> None:
    """Log a summary line, then each leaf failure of ``exc`` with its traceback."""
    leaves = list(leaf_errors(exc))
    logger.error("%s: %d error(s)", message, len(leaves))
    for leaf in leaves:
        logger.error("%s", leaf, exc_info=(type(leaf), leaf, leaf.__traceback__))


__all__ = ["configure_logging", "get_logger", "leaf_errors", "log_failure"]
