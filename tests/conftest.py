# tests/conftest.py
import sys
from pathlib import Path

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rolegate import PermissionManager  # noqa: E402


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clear_cycle_policy(monkeypatch):
    """Keep a developer's .env or shell from changing the cycle policy."""
    monkeypatch.delenv("ROLEGATE_CYCLE_POLICY", raising=False)
    yield


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
@pytest.fixture
def make_manager():
    """Build a manager from role and permission lists."""

    def _make(roles=(), permissions=(), **kwargs):
        return PermissionManager(
            {"roles": list(roles), "permissions": list(permissions)}, **kwargs
        )

    return _make


@pytest.fixture
def log_messages():
    """Collect loguru output emitted during the test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
