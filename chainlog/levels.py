from __future__ import annotations
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping

from .errors import UnknownLevelError


class Level(IntEnum):
    """Severity of a record. Higher is more severe."""

    DEBUG = 100       # detailed debug information
    INFO = 200        # interesting events
    NOTICE = 250      # normal but significant events
    WARNING = 300     # exceptional occurrences that are not errors
    ERROR = 400       # runtime errors that need no immediate action
    CRITICAL = 500    # critical conditions
    ALERT = 550       # action must be taken immediately
    EMERGENCY = 600   # system is unusable


LEVEL_NAMES: Mapping[int, str] = MappingProxyType({lvl.value: lvl.name for lvl in Level})

_BY_NAME: Mapping[str, Level] = MappingProxyType({lvl.name: lvl for lvl in Level})


def name_of(level: Any) -> str:
    # bools are ints in Python but never a severity
    if isinstance(level, bool):
        raise UnknownLevelError(level)
    try:
        return LEVEL_NAMES[level]
    except (KeyError, TypeError):
        raise UnknownLevelError(level) from None


def level_of(name: str) -> Level:
    """Reverse lookup, case-insensitive: ``level_of("warning") is Level.WARNING``."""
    if not isinstance(name, str):
        raise UnknownLevelError(name)
    try:
        return _BY_NAME[name.strip().upper()]
    except KeyError:
        raise UnknownLevelError(name) from None
