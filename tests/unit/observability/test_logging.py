"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from mp_flags.flags import ResolutionContext
from mp_flags.observability.logging import JsonLoggerFactory, ResolutionContextProcessor, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolutionContextProcessor:
    def test_flattens_context(self) -> None:
        event = {"event": "x", "context": ResolutionContext(tenant_id="acme", client_id="web")}
        out = ResolutionContextProcessor()(None, "info", event)
        assert out == {"event": "x", "tenant_id": "acme", "client_id": "web"}

    def test_omits_missing_ids(self) -> None:
        out = ResolutionContextProcessor()(None, "info", {"event": "x", "context": ResolutionContext()})
        assert out == {"event": "x"}

    def test_no_context_untouched(self) -> None:
        assert ResolutionContextProcessor()(None, "info", {"event": "x"}) == {"event": "x"}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("test", component="flags").info("hello")
        assert logs == [{"event": "hello", "component": "flags", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_emits_json(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("json.test").warning(
            "flag_source_failed", tier="remote_config", context=ResolutionContext(tenant_id="acme")
        )
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "flag_source_failed"
        assert payload["level"] == "warning"
        assert payload["tenant_id"] == "acme"
        assert "context" not in payload
