"""Logging setup shared by the search, generator and CLI."""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"
ROOT_LOGGER_NAME = "crisscross"


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"``, ``"INFO"`` or a numeric level into a logging level.

    Unknown names fall back to INFO so a mistyped ``--log-level`` still runs.
    """

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single formatted handler on the root logger.

    Placement and undo steps log at DEBUG; seeding, attempt and result
    summaries at INFO; failed or aborted attempts at WARNING.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
