"""Shared pytest fixtures for the record-constructor test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Keep the ambient environment from leaking into the module-level
# ``settings = Settings()`` call in config.py, which runs at collection time.
# ---------------------------------------------------------------------------
os.environ.pop("LOG_FORMAT", None)
os.environ.pop("LOG_LEVEL", None)


# ---------------------------------------------------------------------------
# Input fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def valid_name() -> str:
    """A well-known non-empty name used across multiple test cases."""
    return "Alice"


@pytest.fixture
def valid_age() -> str:
    """A well-known in-range age string."""
    return "30"


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run from an empty directory with no logging env vars set.

    Ensures no ``.env`` file in the project root influences ``Settings``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return tmp_path
