from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from .config import cfg
from .diagnostics import get_record_logger
from .levels import Level
from .models import Record


@runtime_checkable
class Handler(Protocol):
    """
    Destination for records.

    A Handler may write records somewhere, forward them, or drop them.
    The Logger only stores and iterates handlers; it never builds them.
    """

    def is_handling(self, level_context: Mapping[str, Any]) -> bool:
        """
        Whether a record at level_context["level"] would be accepted.

        Must not have side effects.
        """

    def handle(self, record: Record) -> bool:
        """
        Deliver a record.

        Returns True to claim it (dispatch stops here), False to let it
        bubble to the next handler in the chain.
        """


class AbstractHandler(ABC):
    """Threshold filtering and bubble semantics shared by the stock handlers."""

    def __init__(self, level: int = Level.DEBUG, bubble: bool = True):
        self.level = Level(level)
        self.bubble = bubble

    def is_handling(self, level_context: Mapping[str, Any]) -> bool:
        return level_context["level"] >= self.level

    def handle(self, record: Record) -> bool:
        if not self.is_handling({"level": record.level}):
            return False
        self.write(record)
        return not self.bubble

    @abstractmethod
    def write(self, record: Record) -> None:
        ...


class NullHandler(AbstractHandler):
    """Swallows every record at or above its level."""

    def __init__(self, level: int = Level.DEBUG):
        super().__init__(level, bubble=False)

    def write(self, record: Record) -> None:
        pass


# structlog only knows the stdlib severities
_STRUCTLOG_METHODS = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.NOTICE: "info",
    Level.WARNING: "warning",
    Level.ERROR: "error",
    Level.CRITICAL: "critical",
    Level.ALERT: "critical",
    Level.EMERGENCY: "critical",
}


class StructlogHandler(AbstractHandler):
    """
    Forwards records to a structlog logger.

    The record message becomes the structlog event; channel, level name,
    timestamp, context and extra are bound as key/value pairs.
    """

    def __init__(self, level: int = Level.DEBUG, bubble: bool = True, logger: Optional[Any] = None):
        super().__init__(level, bubble)
        self._log = logger if logger is not None else get_record_logger()

    def write(self, record: Record) -> None:
        method = getattr(self._log, _STRUCTLOG_METHODS[record.level])
        method(
            record.message,
            channel=record.channel,
            level_name=record.level_name,
            datetime=record.datetime.strftime(cfg.DATETIME_FORMAT),
            context=record.context,
            extra=record.extra,
        )
