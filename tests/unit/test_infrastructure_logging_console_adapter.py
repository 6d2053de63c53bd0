"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods writing structured JSON
- Level filtering
- Context binding (new adapter, original untouched)
- Exception details on error/critical
"""

import json
from io import StringIO

import pytest

from crm_core.infrastructure.logging.console_adapter import ConsoleAdapter


def read_events(stream: StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.fixture
def stream() -> StringIO:
    return StringIO()


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_writes_json_event(self, stream):
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.info("entity_created", family="account_type", version=1)

        [event] = read_events(stream)
        assert event["event"] == "entity_created"
        assert event["level"] == "info"
        assert event["family"] == "account_type"
        assert event["version"] == 1
        assert "timestamp" in event

    def test_level_filtering(self, stream):
        adapter = ConsoleAdapter(use_json=True, level="WARNING", stream=stream)

        adapter.debug("hidden")
        adapter.info("hidden")
        adapter.warning("shown")

        assert [e["event"] for e in read_events(stream)] == ["shown"]

    def test_level_name_is_case_insensitive(self, stream):
        adapter = ConsoleAdapter(use_json=True, level="debug", stream=stream)

        adapter.debug("shown")

        assert len(read_events(stream)) == 1

    def test_error_includes_exception_details(self, stream):
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.error("handler_failed", error=RuntimeError("boom"))

        [event] = read_events(stream)
        assert event["level"] == "error"
        assert event["error_type"] == "RuntimeError"
        assert event["error_message"] == "boom"

    def test_critical_without_exception(self, stream):
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.critical("registry_inconsistent", count=2)

        [event] = read_events(stream)
        assert event["level"] == "critical"
        assert "error_type" not in event

    def test_console_renderer_writes_text(self, stream):
        adapter = ConsoleAdapter(use_json=False, stream=stream)

        adapter.info("human_readable", family="company")

        assert "human_readable" in stream.getvalue()


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter_with_context(self, stream):
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        bound = adapter.bind(handler="GetEntityByIdHandler")
        bound.info("bound_event")
        adapter.info("plain_event")

        bound_event, plain_event = read_events(stream)
        assert isinstance(bound, ConsoleAdapter)
        assert bound is not adapter
        assert bound_event["handler"] == "GetEntityByIdHandler"
        assert "handler" not in plain_event

    def test_with_context_is_alias_for_bind(self, stream):
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.with_context(family="company").bind(entity_id="1").info("nested")

        [event] = read_events(stream)
        assert event["family"] == "company"
        assert event["entity_id"] == "1"
