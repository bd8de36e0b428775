"""Test configuration and fixtures."""

import pytest

from lingo.config import AuthSettings
from tests.harness import MODERATOR_EMAIL


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Pin settings that tests rely on, regardless of the local .env."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__JWT_SECRET", AuthSettings().jwt_secret)
    monkeypatch.setenv("AUTH__SEED_MODERATORS", f'["{MODERATOR_EMAIL}"]')
    monkeypatch.setenv("STORAGE__READ_RETRY_BASE_DELAY", "0")
