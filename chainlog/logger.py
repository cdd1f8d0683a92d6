from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Dict, Iterable, Optional, Tuple

from .diagnostics import get_logger
from .errors import EmptyChainError, InvalidHandlerError, InvalidPushError
from .handlers import Handler
from .levels import Level, name_of
from .models import Record, now_seconds
from .processors import Processor
from .validator import check_handler, check_processor

log = get_logger()


class LoggerInterface(ABC):
    """Level-named entry points every chainlog facade provides."""

    @abstractmethod
    def emergency(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def alert(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def critical(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def notice(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...

    @abstractmethod
    def log(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> None: ...


def _require_handler(handler: Any) -> None:
    ok, reason = check_handler(handler)
    if not ok:
        raise InvalidHandlerError(reason)


def _require_processor(processor: Any) -> None:
    ok, reason = check_processor(processor)
    if not ok:
        raise InvalidPushError(reason)


class Logger(LoggerInterface):
    """
    Channel-bound logger dispatching records through a handler chain.

    Both chains are priority lists: index 0 is consulted first and every
    push inserts at the front. Chains are not guarded by a lock; share a
    Logger across threads only behind your own synchronization.
    """

    DEBUG = Level.DEBUG
    INFO = Level.INFO
    NOTICE = Level.NOTICE
    WARNING = Level.WARNING
    ERROR = Level.ERROR
    CRITICAL = Level.CRITICAL
    ALERT = Level.ALERT
    EMERGENCY = Level.EMERGENCY

    def __init__(
        self,
        channel: str,
        handlers: Optional[Iterable[Handler]] = None,
        processors: Optional[Iterable[Processor]] = None,
    ):
        self._channel = channel
        self._handlers: deque = deque(handlers or ())
        self._processors: deque = deque(processors or ())
        for h in self._handlers:
            _require_handler(h)
        for p in self._processors:
            _require_processor(p)

    @property
    def channel(self) -> str:
        return self._channel

    # ---- handler chain ----

    def push_handler(self, handler: Handler) -> "Logger":
        _require_handler(handler)
        self._handlers.appendleft(handler)
        log.debug("handler_pushed", channel=self._channel, handler=type(handler).__name__,
                  depth=len(self._handlers))
        return self

    def pop_handler(self) -> Handler:
        if not self._handlers:
            raise EmptyChainError("handler")
        handler = self._handlers.popleft()
        log.debug("handler_popped", channel=self._channel, handler=type(handler).__name__,
                  depth=len(self._handlers))
        return handler

    def set_handlers(self, handlers: Any) -> "Logger":
        """
        Replace the whole chain, keeping the given order (handlers[0] first).

        Anything other than a list, tuple or deque leaves the chain empty.
        """
        self._handlers.clear()
        if isinstance(handlers, (list, tuple, deque)):
            for h in handlers:
                _require_handler(h)
            # each push goes to the front, so push in reverse to keep the order
            for h in reversed(handlers):
                self.push_handler(h)
        return self

    def get_handlers(self) -> Tuple[Handler, ...]:
        return tuple(self._handlers)

    # ---- processor chain ----

    def push_processor(self, processor: Processor) -> "Logger":
        # NOTE: an empty chain refuses pushes, seed processors through the constructor
        if not self._processors:
            raise InvalidPushError(
                f"Processors can only be pushed onto a non-empty processor stack, {processor!r} given"
            )
        _require_processor(processor)
        self._processors.appendleft(processor)
        log.debug("processor_pushed", channel=self._channel, depth=len(self._processors))
        return self

    def pop_processor(self) -> Processor:
        if not self._processors:
            raise EmptyChainError("processor")
        processor = self._processors.popleft()
        log.debug("processor_popped", channel=self._channel, depth=len(self._processors))
        return processor

    def get_processors(self) -> Tuple[Processor, ...]:
        return tuple(self._processors)

    # ---- dispatch ----

    def is_handling(self, level: int) -> bool:
        """Whether any handler in the chain accepts records at this level."""
        level_context = {"level": level}
        return any(h.is_handling(level_context) for h in self._handlers)

    def add_record(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        """
        Build a record and run it through processors and handlers.

        Returns False without building anything when no handler accepts the
        level. Otherwise every handler is offered the record front to back,
        starting again from the first one, until a handler claims it.
        Exceptions from processors or handlers propagate to the caller.
        """
        handlers = tuple(self._handlers)
        level_context = {"level": level}
        if not any(h.is_handling(level_context) for h in handlers):
            return False

        record = Record(
            message=str(message),
            context=dict(context or {}),
            level=level,
            level_name=name_of(level),
            channel=self._channel,
            datetime=now_seconds(),
        )

        for processor in tuple(self._processors):
            record = processor(record)

        for handler in handlers:
            if handler.handle(record):
                break
        else:
            log.debug("record_unclaimed", channel=self._channel, level=record.level_name)

        return True

    def emergency(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.EMERGENCY, message, context)

    def alert(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.ALERT, message, context)

    def critical(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.CRITICAL, message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.ERROR, message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.WARNING, message, context)

    def notice(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.NOTICE, message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.INFO, message, context)

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.add_record(Level.DEBUG, message, context)

    def log(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        # inert; use add_record() to dispatch at an arbitrary level
        pass
