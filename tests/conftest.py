"""Shared fixtures for the engine tests."""
import pytest

from truco.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep Settings() away from the developer's TRUCO_* variables and .env file."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"TRUCO_{name.upper()}", raising=False)
