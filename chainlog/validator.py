from __future__ import annotations
from typing import Any, Optional, Tuple

_HANDLER_METHODS = ("is_handling", "handle")

def check_handler(obj: Any) -> Tuple[bool, Optional[str]]:
    """
    Returns (is_handler, reason)
    reason is None when obj exposes callable is_handling() and handle().
    """
    missing = [m for m in _HANDLER_METHODS if not callable(getattr(obj, m, None))]
    if missing:
        return False, f"{type(obj).__name__} does not implement {', '.join(missing)}"
    return True, None

def check_processor(obj: Any) -> Tuple[bool, Optional[str]]:
    if not callable(obj):
        return False, (
            "Processors must be valid callables (function or object with a __call__ method), "
            f"{obj!r} given"
        )
    return True, None
