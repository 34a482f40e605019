# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for number_words.

One log entry is one JSON object on one line:
  {"ts": "2026-...", "level": "DEBUG", "module": "number_words.parser.base",
   "msg": "parse finished", "strategy": "memoized", "result_count": 3}

The stdlib `logging` machinery does the routing. JsonFormatter serialises
each record and folds the caller's `extra={...}` context into the object.
Loggers are obtained through `get_logger` only; `set_log_level` retunes
every logger in the package at once, which is how --log-level reaches the
module-level loggers created at import time.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_PREFIX = "number_words"

# Everything a bare LogRecord carries is plumbing; anything else came from `extra`.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Level last applied by set_log_level; loggers created afterwards start at it.
_package_level: Optional[int] = None


class JsonFormatter(logging.Formatter):
    """
    Render a LogRecord as a single JSON line.

    ts is an ISO 8601 UTC timestamp and module is the logger name. Extra
    values JSON can't encode are written with str(). If the record has
    exception info, the formatted traceback goes under "exc".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _level_number(level_name: str) -> int:
    name = level_name.upper()
    if name not in _LEVELS:
        raise ValueError(f"Invalid log level '{level_name}'. Must be one of: {', '.join(_LEVELS)}")
    return logging.getLevelNamesMapping()[name]


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)


def get_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Return the JSON logger called `name`, creating its handlers on first use.

    Args:
        name: Logger name, usually the caller's __name__.
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case).
            When omitted the logger follows the level last passed to
            set_log_level, or INFO if it was never called.
        log_file: Also append JSON lines to this file. Only honoured the
            first time a given name is requested.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    if log_level is not None:
        level = _level_number(log_level)
    elif _package_level is not None:
        level = _package_level
    else:
        level = logging.INFO
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    _attach(logger, logging.StreamHandler(stream=sys.stdout), level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)

    logger.propagate = False
    return logger


def set_log_level(log_level: str) -> None:
    """
    Apply `log_level` to every existing number_words logger and its handlers.

    Loggers created later without an explicit level pick it up too.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    global _package_level
    level = _level_number(log_level)
    _package_level = level
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != PACKAGE_LOGGER_PREFIX and not name.startswith(PACKAGE_LOGGER_PREFIX + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
