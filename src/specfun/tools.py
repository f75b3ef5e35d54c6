from __future__ import annotations
import os
import sys
from typing import Any, TextIO

DEBUG = int(os.environ.get("SPECFUN_DEBUG", "0") or 0)
"""Diagnostics level. Messages at `debug_level` <= DEBUG are printed."""


class InvalidParameter(ValueError):
    """A shape parameter lies outside the domain of its function family."""

    def __init__(self, family: str, name: str, value: Any, condition: str):
        super().__init__(f"{family}: parameter {name}={value} must satisfy {condition}")
        self.family = family
        self.name = name
        self.value = value


class InsufficientCapacity(ValueError):
    """A caller-supplied buffer is too short for the requested degrees."""

    def __init__(self, what: str, required: int, available: int):
        super().__init__(
            f"{what} has {available} entries, but {required} are required"
        )
        self.required = required
        self.available = available


def log(*args, debug_level: int = 1) -> None:
    if DEBUG >= debug_level:
        print(*args, file=sys.stderr)


class Logger:
    """Callable that prints indented diagnostics when active.

    Loggers are created with :func:`make_logger`, which returns an inactive
    instance when the current :data:`DEBUG` level is below the requested one,
    so that callers can invoke them unconditionally.
    """

    active: bool
    level: int
    prefix: str
    stream: TextIO

    def __init__(self, level: int = 1, active: bool = True, prefix: str = ""):
        self.level = level
        self.active = active
        self.prefix = prefix
        self.stream = sys.stderr

    def __call__(self, *args: Any) -> None:
        if self.active:
            text = " ".join(str(a) for a in args)
            for line in text.splitlines() or [""]:
                print(self.prefix + line, file=self.stream)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __bool__(self) -> bool:
        return self.active

    def close(self) -> None:
        if self.active:
            self.stream.flush()
        self.active = False


def make_logger(debug_level: int = 1) -> Logger:
    """Return a :class:`Logger` that prints only if `DEBUG >= debug_level`."""
    if DEBUG < debug_level:
        return Logger(debug_level, active=False)
    return Logger(debug_level, active=True, prefix=" " * (debug_level - 1))
