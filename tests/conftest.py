from __future__ import annotations

import logging

import pytest


def call_event_payload(**overrides):
    payload = {
        "app": "A1",
        "callid": "C1",
        "request_hash": False,
        "cli_name": "Bob",
        "cli_number": "555",
        "number": "600",
        "command": "",
        "command_id": "",
        "command_result": None,
        "command_error": None,
        "date_started": "2024-01-01T00:00:00Z",
        "variables": {},
        "call_status": "INCOMING_CALL",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CALLR_RT_BANNER", raising=False)
    monkeypatch.delenv("CALLR_RT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("callr_rt")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
