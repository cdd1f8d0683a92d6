import datetime as dt
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .levels import Level, name_of


def now_seconds() -> dt.datetime:
    """Current local time truncated to whole seconds."""
    return dt.datetime.now().replace(microsecond=0)


class Record(BaseModel):
    """One log call. Frozen: processors return copies, handlers only read."""

    model_config = ConfigDict(frozen=True)

    message: str
    context: Dict[str, Any] = Field(default_factory=dict)
    level: Level
    level_name: str = ""
    channel: str
    datetime: dt.datetime = Field(default_factory=now_seconds)
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("level", mode="before")
    @classmethod
    def level_defined(cls, v: Any) -> Any:
        # pydantic only wraps ValueError, UnknownLevelError is a KeyError
        try:
            name_of(v)
        except KeyError as e:
            raise ValueError(str(e))
        return v

    @field_validator("datetime")
    @classmethod
    def second_precision(cls, v: dt.datetime) -> dt.datetime:
        return v.replace(microsecond=0)

    @model_validator(mode="before")
    @classmethod
    def derive_level_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("level_name"):
            try:
                data = {**data, "level_name": name_of(data.get("level"))}
            except KeyError:
                pass  # the level validator reports it
        return data
