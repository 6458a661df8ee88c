import json
import logging
from unittest.mock import patch

import structlog
from django.db import OperationalError

from modules.products.models import Product


def _messages(caplog):
    return [record.getMessage() for record in caplog.records]


class TestProductEventLogging:
    def test_create_logs_event_with_correlation_id(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/products",
                {"Name": "Widget", "Price": 9.99},
                format="json",
                HTTP_X_REQUEST_ID="log-create-001",
            )
        created = [m for m in _messages(caplog) if "product.created" in m]
        assert created
        assert "log-create-001" in created[0]

    def test_validation_failure_logged(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post("/products", {"Price": 1}, format="json")
        assert any("product.validation_failed" in m for m in _messages(caplog))

    def test_store_fault_logged_at_error(self, api_client, caplog):
        with patch.object(
            Product.objects, "all", side_effect=OperationalError("database is locked")
        ), caplog.at_level(logging.ERROR):
            api_client.get("/products")
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert any("store.fault" in r.getMessage() for r in errors)

    def test_request_finished_carries_status_code(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get("/products/999")
        finished = [m for m in _messages(caplog) if "request_finished" in m]
        assert finished
        assert "404" in finished[-1]


class TestJsonFormatter:
    def test_formatter_renders_json_line(self):
        from config.settings import LOGGING

        formatter_config = dict(LOGGING["formatters"]["json"])
        formatter = formatter_config.pop("()")(**formatter_config)
        record = logging.LogRecord(
            name="modules.products.services",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="product.deleted",
            args=(),
            exc_info=None,
        )
        structlog.contextvars.clear_contextvars()
        line = formatter.format(record)
        payload = json.loads(line)
        assert payload["event"] == "product.deleted"
        assert payload["level"] == "info"
        assert "timestamp" in payload
