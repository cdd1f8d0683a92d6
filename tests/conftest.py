import pytest

from chainlog.logger import Logger


class FakeHandler:
    """Handler double that records every call made to it."""

    def __init__(self, accepts=True, claims=True, name="fake", calls=None):
        self.accepts = accepts
        self.claims = claims
        self.name = name
        self.is_handling_calls = []
        self.records = []
        # shared list lets a test observe ordering across handlers
        self.calls = calls if calls is not None else []

    def is_handling(self, level_context):
        self.is_handling_calls.append(level_context)
        if callable(self.accepts):
            return self.accepts(level_context["level"])
        return self.accepts

    def handle(self, record):
        self.records.append(record)
        self.calls.append(self.name)
        return self.claims

    def __repr__(self):
        return f"FakeHandler({self.name})"


def tag_processor(tag, calls=None):
    """Processor that appends its tag to record.extra["tags"]."""
    def _proc(record):
        if calls is not None:
            calls.append(tag)
        tags = record.extra.get("tags", []) + [tag]
        return record.model_copy(update={"extra": {**record.extra, "tags": tags}})
    _proc.tag = tag
    return _proc


@pytest.fixture
def calls():
    return []

@pytest.fixture
def always_handler(calls):
    return FakeHandler(accepts=True, claims=True, name="always", calls=calls)

@pytest.fixture
def app_logger(always_handler):
    return Logger("app", [always_handler], [])

def make_handler(**kw):
    return FakeHandler(**kw)
