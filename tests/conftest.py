import pytest

from rocketchat_hooks.client import RocketChat
from rocketchat_hooks.config import get_settings

WEBHOOK_URL = "https://example.test/hooks/abc"

@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL

@pytest.fixture
def client() -> RocketChat:
    return RocketChat(WEBHOOK_URL, "#general")

@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """
    Isolates Settings from the developer's shell and .env file.
    Runs in an empty directory so no .env is picked up, and clears the cache
    around the test.
    """
    for var in ("ROCKETCHAT_WEBHOOK_URL", "ROCKETCHAT_CHANNEL", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
