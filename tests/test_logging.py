"""
Tests for the structured logging helpers.
"""
import json
import logging

from core.logging import context, get_context, get_logger
from core.logging.formatter import JSONFormatter
from core.logging.levels import LogLevel, to_level


def test_to_level():
    assert to_level("trace") == LogLevel.TRACE
    assert to_level("SUCCESS") == 25
    assert to_level("warning") == logging.WARNING
    assert to_level("nonsense") == logging.INFO
    assert to_level(10) == 10


def test_context_is_scoped():
    with context(puuid="p1", region=None):
        assert get_context() == {"puuid": "p1"}
        with context(match_id="m1"):
            assert get_context() == {"puuid": "p1", "match_id": "m1"}
        assert "match_id" not in get_context()
    assert get_context() == {}


def test_lazy_message_not_rendered_when_disabled(caplog):
    calls = []

    def render():
        calls.append(1)
        return "expensive"

    log = get_logger("tests.lazy", service="test")
    with caplog.at_level(logging.INFO, logger="tests.lazy"):
        log.debug(render)
        log.info(render)

    assert len(calls) == 1
    assert [r.getMessage() for r in caplog.records] == ["expensive"]
    assert caplog.records[0].service == "test"


def test_json_formatter_includes_context():
    record = logging.LogRecord("tests", logging.INFO, __file__, 1, "hello", None, None)
    record.service = "test"
    with context(puuid="p1"):
        payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "hello"
    assert payload["service"] == "test"
    assert payload["context"] == {"puuid": "p1"}
