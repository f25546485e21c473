"""Engine-wide console logger writing formatted records to standard error."""

from __future__ import annotations

import logging
import sys
import time

TRACE = 5
DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

LOGGER_NAME = "URSA"

logging.addLevelName(TRACE, "TRACE")

_LEVEL_LETTERS = {
    TRACE: "T",
    DEBUG: "D",
    INFO: "I",
    WARN: "W",
    ERROR: "E",
    CRITICAL: "C",
}

_LEVEL_COLOURS = {
    TRACE: "\033[37m",
    DEBUG: "\033[36m",
    INFO: "\033[32m",
    WARN: "\033[33m\033[1m",
    ERROR: "\033[31m\033[1m",
    CRITICAL: "\033[1m\033[41m",
}

_RESET = "\033[m"


def _stream_is_terminal(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` currently is, colouring the level on terminals."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass

    def format(self, record: logging.LogRecord) -> str:
        stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
        letter = _LEVEL_LETTERS.get(record.levelno, record.levelname[:1])
        level = f" {letter} "
        if _stream_is_terminal(sys.stderr):
            colour = _LEVEL_COLOURS.get(record.levelno, "")
            level = f"{colour}{level}{_RESET}"
        return f"[ {stamp} ]--[{level}]--[ {record.name} ]: {record.getMessage()}"


_logger = logging.getLogger(LOGGER_NAME)
_logger.propagate = False
_logger.addHandler(logging.NullHandler())


def setup(level) -> None:
    """Attach the console handler to the engine logger and set its level."""
    logger = get_logger()
    if not any(isinstance(handler, _StderrHandler) for handler in logger.handlers):
        logger.addHandler(_StderrHandler())
    logger.setLevel(level)


def get_logger() -> logging.Logger:
    """Return the engine logger."""
    return _logger