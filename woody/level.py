# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Severity levels."""

from contextvars import ContextVar
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Optional

_STDLIB_LEVELS = {
    "trace": 5,
    "debug": 10,
    "verbose": 15,
    "info": 20,
    "log": 20,
    "warn": 30,
    "error": 40,
    "fatal": 50,
}

_ALIASES = {
    "log": "info",
    "warning": "warn",
    "critical": "fatal",
}

_current_level: ContextVar[Optional["Level"]] = ContextVar("woody_current_level", default=None)


def _is_number(value: object) -> bool:
    # bool subclasses int but is a condition of its own
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


class Level(Enum):
    """Severity of a log call.

    Members are totally ordered by ``severity`` (FATAL is the most severe)
    and compare against plain numbers, so a level can be used directly as a
    numeric floor. ``LOG`` shares the severity of ``INFO`` but is a distinct
    member, which lets renderers tell the two apart by name.
    """

    TRACE = (10, "trace")
    DEBUG = (20, "debug")
    VERBOSE = (30, "verbose")
    INFO = (40, "info")
    LOG = (40, "log")
    WARN = (50, "warn")
    ERROR = (60, "error")
    FATAL = (70, "fatal")

    @property
    def severity(self) -> int:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    def __int__(self) -> int:
        return self.severity

    def _rank(self, other: object) -> Optional[float]:
        if isinstance(other, Level):
            return other.severity
        if _is_number(other):
            return float(other)
        return None

    def __lt__(self, other: object) -> bool:
        rank = self._rank(other)
        if rank is None:
            return NotImplemented
        return self.severity < rank

    def __le__(self, other: object) -> bool:
        rank = self._rank(other)
        if rank is None:
            return NotImplemented
        return self.severity <= rank

    def __gt__(self, other: object) -> bool:
        rank = self._rank(other)
        if rank is None:
            return NotImplemented
        return self.severity > rank

    def __ge__(self, other: object) -> bool:
        rank = self._rank(other)
        if rank is None:
            return NotImplemented
        return self.severity >= rank

    def to_stdlib_level(self) -> int:
        """Convert to a standard library logging level.

        Returns:
            Integer understood by ``logging.Logger.log``
        """
        return _STDLIB_LEVELS[self.label]

    @classmethod
    def from_string(cls, value: str) -> "Level":
        """Look up a level by name, case-insensitively.

        ``"log"`` resolves to ``INFO``; ``"warning"`` and ``"critical"`` are
        accepted as the stdlib spellings of ``WARN`` and ``FATAL``.

        Args:
            value: Level name

        Returns:
            Matching Level

        Raises:
            ValueError: If the name doesn't match a known level
        """
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        for member in cls:
            if member.label == name:
                return member
        raise ValueError(f"Invalid log level: {value}. Must be one of {[m.name for m in cls]}")


def to_string(level: Level) -> str:
    """Return the lowercase name of a level, e.g. ``"warn"``."""
    return level.label


def current_level() -> Optional[Level]:
    """Severity of the log call whose contexts are being materialized.

    Context producers call this to learn the level they are rendering for.
    Returns None when called outside of a log call.
    """
    return _current_level.get()
