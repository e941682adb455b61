"""File logging for the simulator core."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "core"
DEFAULT_LOG_PATH = Path("logs") / "robot_log.txt"

_logger: logging.Logger | None = None


class _LowerLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.levelname_lower = record.levelname.lower()
        return super().format(record)


def init_logging(path: str | Path = DEFAULT_LOG_PATH) -> logging.Logger:
    """Set up the core logger to write debug-level records to ``path``."""
    global _logger
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(f"arachnopod.{LOGGER_NAME}")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        _LowerLevelFormatter(
            "[%(asctime)s] [%(levelname_lower)s] %(message)s", datefmt="%H:%M:%S"
        )
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _logger = logger
    return logger


def get_logger() -> logging.Logger | None:
    """Return the core logger, or None if ``init_logging`` was never called."""
    return _logger