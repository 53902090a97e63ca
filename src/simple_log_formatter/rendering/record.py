"""Log record and severity level consumed by the renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Self

# stdlib names that have no member of their own
_ALIASES = {"WARNING": "WARN", "CRITICAL": "ERROR", "FATAL": "ERROR"}


class Level(IntEnum):
    """Ordered severity: ERROR > WARN > INFO > DEBUG > TRACE.

    Values line up with stdlib logging levels so both compare directly.
    """

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    def as_str(self) -> str:
        """Upper-case name as rendered in output ("DEBUG", "WARN", ...)."""
        return self.name

    __str__ = as_str

    @classmethod
    def from_levelno(cls, levelno: int) -> Self:
        """Highest level not above a stdlib level number (CRITICAL -> ERROR, 1 -> TRACE)."""
        for level in reversed(cls):
            if levelno >= level:
                return level
        return cls.TRACE

    @classmethod
    def parse(cls, name: str) -> Self:
        """Level from its name, case-insensitive, stdlib aliases included."""
        key = name.strip().upper()
        try:
            return cls[_ALIASES.get(key, key)]
        except KeyError:
            raise ValueError(f"Unknown level: {name!r}. Use one of {', '.join(m.name for m in cls)}") from None


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One log event, already interpolated.

    Attributes:
        level: Severity of the event
        message: Final message text
        module_path: Originating module, None when unknown (rendered as "")
    """

    level: Level
    message: str
    module_path: str | None = None

    @classmethod
    def from_stdlib(cls, record: logging.LogRecord) -> Self:
        """Convert a stdlib record: logger name as module path, root logger has none."""
        name = record.name if record.name and record.name != "root" else None
        return cls(Level.from_levelno(record.levelno), record.getMessage(), name)
