"""
Global test fixtures for the feature flag service.

Creates an isolated Flask app with its own in-memory flag store
(file logging off, docs on) so tests never share flag state.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict
import pytest

# ---------------------------------------------------------------------------
# Import target app
# ---------------------------------------------------------------------------
import sys
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app  # type: ignore
from store.flag_store import FlagStore  # type: ignore

FIXED_TS = "2026-01-01T00:00:00.000Z"

# ---------------------------------------------------------------------------
# Pytest Hooks
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Called once per test run."""
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("LOG_TO_FILE", "0")

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def settings_override() -> Dict[str, Any]:
    return {"ENV": "test", "LOG_TO_FILE": False, "ENABLE_DOCS": True, "LOG_LEVEL": "WARNING"}


@pytest.fixture()
def store() -> FlagStore:
    """Fresh bootstrap store with a fixed timestamp."""
    return FlagStore.bootstrap(FIXED_TS)


@pytest.fixture()
def app(store: FlagStore, settings_override: Dict[str, Any]):
    flask_app = create_app(settings_override, store=store)
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture()
def json_headers():
    return {"Content-Type": "application/json"}
