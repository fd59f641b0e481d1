import pytest


@pytest.fixture(autouse=True)
def _production_environment(monkeypatch):
    """Keep debug disclosure off unless a test opts in."""
    monkeypatch.setenv("ENVIRONMENT", "production")
