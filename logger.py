from __future__ import annotations

"""Coloured console logging for the demo and file watcher."""

from enum import Enum
from typing import Any

from result import Result, match


class Color(str, Enum):
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"


class Level(Enum):
    """Message level, rendered as a ``[TAG]`` prefix in its color."""

    LOG = ("LOG", Color.MAGENTA)
    INFO = ("INFO", Color.BLUE)
    WARN = ("WARN", Color.YELLOW)
    ERR = ("ERR", Color.RED)

    @property
    def tag(self) -> str:
        return self.value[0]

    @property
    def color(self) -> Color:
        return self.value[1]


def paint(text: str, color: Color) -> str:
    """Return the given text wrapped in ANSI color codes."""
    return f"{color.value}{text}{Color.RESET.value}"


def emit(level: Level, msg: Any) -> None:
    print(paint(f"[{level.tag}] {msg}", level.color))


def log(msg: Any) -> None:
    emit(Level.LOG, msg)


def log_info(msg: Any) -> None:
    emit(Level.INFO, msg)


def log_warn(msg: Any) -> None:
    emit(Level.WARN, msg)


def log_err(msg: Any) -> None:
    emit(Level.ERR, msg)


def describe(result: Result[Any, Any]) -> str:
    """Render a result as a one-line colored summary.

    Ok values are shown in green, errors in red. Long values are cut to
    sixty characters.
    """

    def shorten(value: Any) -> str:
        text = repr(value)
        return text if len(text) <= 60 else text[:57] + "..."

    return match(
        result,
        lambda value: paint(f"Ok({shorten(value)})", Color.GREEN),
        lambda error: paint(f"Err({shorten(error)})", Color.RED),
    )
