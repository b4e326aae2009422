"""Centralized logging configuration using Loguru.

Usage:
    from contentsdb.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows at --debug or CONTENTSDB_LOG_LEVEL=DEBUG

Environment Variables:
    CONTENTSDB_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    CONTENTSDB_LOG_JSON: 0|1 (default: 0, human-readable)
    CONTENTSDB_LOG_FILE: path to log file (optional)

The command line verbosity flags override CONTENTSDB_LOG_LEVEL through
set_verbosity().
"""

import json
import os
import sys
from enum import IntEnum

from loguru import logger

from .constants import ENV_LOG_FILE, ENV_LOG_JSON, ENV_LOG_LEVEL

# Remove default handler
logger.remove()


class Verbosity(IntEnum):
    """Command line verbosity, ordered so that higher means chattier."""

    WARNING = 5
    INFO = 7
    DEBUG = 8

    @property
    def level_name(self) -> str:
        """Loguru level name for this verbosity."""
        return self.name


_log_level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
_json_mode = os.environ.get(ENV_LOG_JSON, "0") == "1"
_log_file = os.environ.get(ENV_LOG_FILE)


def _to_json(message) -> str:
    """Render a loguru message as one NDJSON line."""
    record = message.record
    payload = {
        "level": record["level"].name,
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }
    for key, value in record["extra"].items():
        payload[key] = value
    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(payload) + "\n"


def json_sink(message):
    """Write log records to stderr as NDJSON."""
    # Never call logger.* inside a sink - causes infinite recursion
    sys.stderr.write(_to_json(message))
    sys.stderr.flush()


def stderr_sink(message):
    """Write formatted log records to whatever sys.stderr currently is.

    Resolving sys.stderr at write time keeps logging working when the stream
    is swapped (click's CliRunner, pytest capture).
    """
    sys.stderr.write(message)
    sys.stderr.flush()


# No emojis, no colors - output is frequently redirected into files
_human_format = "{time:HH:mm:ss} | {level: <8} | {message}"

_console_handler_id: int | None = None


def _install_console_handler(level: str) -> None:
    global _console_handler_id

    if _console_handler_id is not None:
        logger.remove(_console_handler_id)

    if _json_mode:
        _console_handler_id = logger.add(json_sink, level=level, colorize=False)
    else:
        _console_handler_id = logger.add(
            stderr_sink,
            level=level,
            format=_human_format,
            colorize=False,
        )


_install_console_handler(_log_level)

# Optional file handler (always NDJSON for machine parsing)
if _log_file:
    def _file_sink(message):
        """Append JSON log lines to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_json(message))

    logger.add(_file_sink, level="DEBUG")


def set_verbosity(verbosity: Verbosity) -> None:
    """Reconfigure the console handler for the requested verbosity."""
    _install_console_handler(verbosity.level_name)


__all__ = [
    "logger",
    "Verbosity",
    "set_verbosity",
]
