from __future__ import annotations
import os
from dataclasses import dataclass

def getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default)

def getenv_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")

@dataclass(frozen=True)
class Config:
    # diagnostics emitted by chainlog itself
    LOG_LEVEL: str = getenv_str("LOG_LEVEL", "INFO")
    LOG_UTC: bool = getenv_bool("LOG_UTC", True)

    # how StructlogHandler renders Record.datetime
    DATETIME_FORMAT: str = getenv_str("DATETIME_FORMAT", "%Y-%m-%d %H:%M:%S")

cfg = Config()
