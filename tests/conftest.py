from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from heimdallr_validator.config import get_settings

VALID_UUID = "f52b68f5-4f96-4be2-bf6b-3c78fd29c76d"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@pytest.fixture
def valid_uuid_str() -> str:
    return VALID_UUID


@pytest.fixture
def test_packets() -> Dict[str, Dict[str, Any]]:
    """Minimal well-formed packet for each built-in packet type."""
    ts = _now_iso()
    return {
        "event": {"subtype": "test", "data": True, "t": ts},
        "sensor": {"subtype": "test", "data": True, "t": ts},
        "control": {"provider": VALID_UUID, "subtype": "test", "data": True},
    }


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """
    Keep validator settings stable across tests; individual tests can
    monkeypatch further env vars.
    """
    monkeypatch.delenv("HEIMDALLR_LOG_DIR", raising=False)
    monkeypatch.delenv("HEIMDALLR_TRACE_PACKETS", raising=False)
    monkeypatch.delenv("HEIMDALLR_LOG_PROPAGATE", raising=False)
    monkeypatch.setenv("HEIMDALLR_LOG_LEVEL", "INFO")
    # settings are cached per process; reload them for each test
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
