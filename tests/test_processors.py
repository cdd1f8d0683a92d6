from chainlog.levels import Level
from chainlog.logger import Logger
from chainlog.models import Record
from chainlog.processors import ExtraFieldsProcessor, interpolate_message
from conftest import FakeHandler

def _record(message, context=None):
    return Record(message=message, context=context or {}, level=Level.INFO, channel="app")

def test_interpolate_replaces_known_placeholders():
    rec = _record("user {user} failed {count} logins", {"user": "ann", "count": 3})
    out = interpolate_message(rec)
    assert out.message == "user ann failed 3 logins"
    assert rec.message == "user {user} failed {count} logins"

def test_interpolate_keeps_unknown_placeholders():
    out = interpolate_message(_record("hello {who} from {where}", {"who": "bob"}))
    assert out.message == "hello bob from {where}"

def test_interpolate_without_placeholders_returns_same_record():
    rec = _record("plain")
    assert interpolate_message(rec) is rec

def test_extra_fields_processor_merges():
    proc = ExtraFieldsProcessor(service="api", region="eu")
    rec = _record("x").model_copy(update={"extra": {"region": "us", "trace": "t1"}})
    out = proc(rec)
    assert out.extra == {"region": "eu", "trace": "t1", "service": "api"}
    assert rec.extra == {"region": "us", "trace": "t1"}

def test_stock_processors_in_a_logger():
    handler = FakeHandler()
    lg = Logger("app", [handler], [interpolate_message])
    lg.push_processor(ExtraFieldsProcessor(host="web-1"))
    lg.error("payment {id} declined", {"id": "p-7"})
    rec = handler.records[0]
    assert rec.message == "payment p-7 declined"
    assert rec.extra == {"host": "web-1"}

def test_interpolate_accepts_dashed_and_dotted_keys():
    rec = _record("req {request-id} by {user.name}", {"request-id": "r-1", "user.name": "ann"})
    assert interpolate_message(rec).message == "req r-1 by ann"

def test_interpolate_ignores_braces_with_spaces():
    rec = _record("literal { not a key }", {"not a key": "x"})
    assert interpolate_message(rec).message == "literal { not a key }"
