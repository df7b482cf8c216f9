"""Hypothesis profiles and pytest fixtures for the cusip test suite."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from cusip.infra.config import ENV_FAIL_FAST, ENV_LOG_LEVEL, ENV_LOOSE

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any CUSIP_TOOL_* settings inherited from the caller's shell."""
    for name in (ENV_LOOSE, ENV_FAIL_FAST, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
