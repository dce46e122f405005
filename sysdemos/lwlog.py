"""A lightweight leveled logger with syslog levels and ANSI colours."""

from __future__ import annotations

import inspect
import os
import sys
from enum import IntEnum
from typing import TextIO


class Level(IntEnum):
    """Log levels, numbered as in syslog."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


NONE = "\x1b[0m"
RED = "\x1b[0;31m"
GREEN = "\x1b[0;32m"
BROWN = "\x1b[0;33m"
YELLOW = "\x1b[1;33m"
BLUE = "\x1b[0;34m"
PURPLE = "\x1b[0;35m"
CYAN = "\x1b[0;36m"
GRAY = "\x1b[0;37m"

_STYLES = {
    Level.EMERG: (RED, "[EMERG]   "),
    Level.ALERT: (PURPLE, "[ALERT]   "),
    Level.CRIT: (YELLOW, "[CRIT]    "),
    Level.ERR: (BROWN, "[ERR]     "),
    Level.WARNING: (BLUE, "[WARNING] "),
    Level.NOTICE: (CYAN, "[NOTICE]  "),
    Level.INFO: (GREEN, "[INFO]    "),
    Level.DEBUG: (GRAY, "[DEBUG]   "),
}

_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def _clean_errno() -> str:
    """Describe the OS error currently being handled, or 'None'."""
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno:
        return os.strerror(exc.errno)
    return "None"


def _is_own_frame(filename: str) -> bool:
    return os.path.normcase(os.path.abspath(filename)) == _THIS_FILE


def _caller() -> tuple[str, str, int]:
    frame = inspect.currentframe()
    while frame is not None and _is_own_frame(frame.f_code.co_filename):
        frame = frame.f_back
    if frame is None:
        return "?", "?", 0
    return frame.f_code.co_name, frame.f_code.co_filename, frame.f_lineno


class LwLog:
    """Writes messages at or below a threshold level; -1 turns logging off."""

    def __init__(self, level: int = Level.DEBUG, color: bool = True, stream: TextIO | None = None) -> None:
        self.level = int(level)
        self.color = color
        self.stream = stream

    def log(self, level: int, message: str, *args: object) -> None:
        level = Level(level)
        if level > self.level:
            return
        func, filename, lineno = _caller()
        text = message % args if args else message
        color, tag = _STYLES[level]
        none = NONE if self.color else ""
        if not self.color:
            color = ""
        line = f"{color}{tag}{func} ({filename}:{lineno}) {none}{text}"
        if level <= Level.NOTICE:
            yellow = YELLOW if self.color else ""
            line += f"{yellow} errno: {_clean_errno()}\n{none}"
        else:
            line += "\n"
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(line)

    def emerg(self, message: str, *args: object) -> None:
        self.log(Level.EMERG, message, *args)

    def alert(self, message: str, *args: object) -> None:
        self.log(Level.ALERT, message, *args)

    def crit(self, message: str, *args: object) -> None:
        self.log(Level.CRIT, message, *args)

    def err(self, message: str, *args: object) -> None:
        self.log(Level.ERR, message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.log(Level.WARNING, message, *args)

    def notice(self, message: str, *args: object) -> None:
        self.log(Level.NOTICE, message, *args)

    def info(self, message: str, *args: object) -> None:
        self.log(Level.INFO, message, *args)

    def debug(self, message: str, *args: object) -> None:
        self.log(Level.DEBUG, message, *args)


def demo(logger: LwLog) -> int:
    """Emit one message at every level."""
    logger.emerg("This a emerge log.")
    logger.alert("This a alert log.")
    logger.crit("This a crit log.")
    logger.err("This a err log.")
    logger.warning("This a warning log.")
    logger.notice("This a notice log.")
    logger.info("This a info log.")
    logger.debug("This a debug log.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration against standard error."""
    return demo(LwLog())


if __name__ == "__main__":
    raise SystemExit(main())