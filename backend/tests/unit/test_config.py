import json
import logging

import pytest

from app.config import Settings
from app.utils.events import LoggingHandler, StatusChangedEvent
from app.utils.logging import JsonFormatter, RequestContextFilter, request_id_var


def test_production_rejects_debug() -> None:
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="production", DEBUG=True)


def test_production_requires_json_logs() -> None:
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="prod", DEBUG=False, LOG_FORMAT="text")


def test_cors_origins_are_split() -> None:
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def _record(msg: str = "stock %s", args=("low",)) -> logging.LogRecord:
    return logging.LogRecord("app.test", logging.INFO, __file__, 1, msg, args, None)


def test_json_formatter_carries_extra_fields() -> None:
    record = _record()
    record.sku = "ELEC-CIRC-V2"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "stock low"
    assert payload["level"] == "INFO"
    assert payload["sku"] == "ELEC-CIRC-V2"
    assert "event" not in payload


def test_json_formatter_groups_event_fields() -> None:
    record = _record("domain_event %s", ("status_changed",))
    record.event = "status_changed"
    record.entity_type = "production_batch"
    record.entity_id = "BATCH-1001"
    record.old_status = "Planned"
    record.new_status = "Active"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == {
        "event": "status_changed",
        "entity_type": "production_batch",
        "entity_id": "BATCH-1001",
        "old_status": "Planned",
        "new_status": "Active",
    }
    assert "entity_id" not in payload


def test_request_context_filter_stamps_request_and_service() -> None:
    record = _record()
    token = request_id_var.set("req-42")
    try:
        RequestContextFilter(service="FactoryFlow", environment="test").filter(record)
    finally:
        request_id_var.reset(token)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["request_id"] == "req-42"
    assert payload["service"] == "FactoryFlow"
    assert payload["environment"] == "test"


def test_request_context_filter_keeps_explicit_request_id() -> None:
    record = _record()
    record.request_id = "req-explicit"

    RequestContextFilter().filter(record)

    assert record.request_id == "req-explicit"


def test_domain_event_log_line(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="app.utils.events"):
        LoggingHandler()(StatusChangedEvent(
            entity_type="production_batch", entity_id="BATCH-1001",
            old_status="Active", new_status="On Hold",
        ))

    payload = json.loads(JsonFormatter().format(caplog.records[-1]))
    assert payload["event"]["entity_id"] == "BATCH-1001"
    assert payload["event"]["new_status"] == "On Hold"
