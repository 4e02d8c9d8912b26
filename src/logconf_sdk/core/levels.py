from __future__ import annotations

import logging

LEVEL_OFF = logging.CRITICAL + 10

_ALIASES = {
    "ALL": logging.NOTSET,
    "TRACE": logging.DEBUG,
    "WARN": logging.WARNING,
    "OFF": LEVEL_OFF,
}


def parse_level(value: str | int) -> int:
    """Resolve a level name (``INFO``, ``warn``, ``OFF``...) to its number."""
    if isinstance(value, int):
        return value
    level_name = value.strip().upper()
    if level_name in _ALIASES:
        return _ALIASES[level_name]
    level = logging.getLevelName(level_name)
    if isinstance(level, int):
        return level
    raise ValueError(f"Invalid log level: {value!r}")
