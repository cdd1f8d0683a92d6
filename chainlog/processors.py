from __future__ import annotations
import re
from typing import Any, Callable

from .models import Record

# Any callable taking the current Record and returning the Record to continue with.
Processor = Callable[[Record], Record]

_PLACEHOLDER = re.compile(r"\{([^{}\s]+)\}")


def interpolate_message(record: Record) -> Record:
    """
    Replace {key} placeholders in the message with values from the context.

    A key is any run of characters other than braces and whitespace, so
    "{request-id}" and "{user.name}" both match the literal context key.

    Placeholders without a matching context key are left as they are.
    """
    if "{" not in record.message:
        return record

    def _sub(m: re.Match) -> str:
        key = m.group(1)
        if key in record.context:
            return str(record.context[key])
        return m.group(0)

    return record.model_copy(update={"message": _PLACEHOLDER.sub(_sub, record.message)})


class ExtraFieldsProcessor:
    """Merges a fixed set of fields into record.extra."""

    def __init__(self, **fields: Any):
        self.fields = fields

    def __call__(self, record: Record) -> Record:
        return record.model_copy(update={"extra": {**record.extra, **self.fields}})
