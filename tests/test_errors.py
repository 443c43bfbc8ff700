"""Tests for unexpected failures, startup and logging."""

import json
import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from foodlink.core.logging import log_event
from foodlink.main import create_app, init_db


def test_unexpected_error_returns_opaque_500(client, monkeypatch) -> None:
	def broken_query(self, *args, **kwargs):
		raise RuntimeError("connection string leaked here")

	app = create_app()
	monkeypatch.setattr(Session, "query", broken_query)
	with TestClient(app, raise_server_exceptions=False) as failing_client:
		response = failing_client.get("/api/stats")

	assert response.status_code == 500
	assert response.json()["error"]["message"] == "Internal server error"
	assert "leaked" not in response.text
	assert response.headers["X-Request-Id"] == response.json()["error"]["request_id"]


def test_init_db_exits_when_database_is_unreachable(tmp_path) -> None:
	unreachable = create_engine(f"sqlite:///{tmp_path}/missing/dir/foodlink.db")

	with pytest.raises(SystemExit) as exc_info:
		init_db(bind=unreachable)

	assert exc_info.value.code == 1


def test_incoming_request_id_is_echoed(client) -> None:
	response = client.get("/health", headers={"X-Request-Id": "req-123"})

	assert response.headers["X-Request-Id"] == "req-123"


def test_log_event_writes_json_line(caplog) -> None:
	caplog.set_level(logging.INFO, logger="foodlink.api")

	log_event("donation_created", donation_id=7, request_id=None)

	record = caplog.records[-1]
	assert record.name == "foodlink.api"
	assert json.loads(record.getMessage()) == {"event": "donation_created", "donation_id": 7}
