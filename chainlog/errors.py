from __future__ import annotations
from typing import Any


class ChainlogError(Exception):
    """Base class for everything chainlog raises on its own."""


class UnknownLevelError(ChainlogError, KeyError):
    def __init__(self, level: Any):
        self.level = level
        super().__init__(f"Level {level!r} is not defined, use one of the Logger level constants")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class EmptyChainError(ChainlogError, IndexError):
    def __init__(self, chain: str):
        self.chain = chain
        super().__init__(f"You tried to pop from an empty {chain} stack")


class InvalidPushError(ChainlogError, ValueError):
    pass


class InvalidHandlerError(ChainlogError, TypeError):
    pass
