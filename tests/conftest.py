import pytest
from unittest.mock import MagicMock
from dotenv import load_dotenv

from telegram_notifications.config import get_settings

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """
    Settings are cached; clear around each test so monkeypatched env vars apply
    and don't leak into the next test.
    """
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_FILE_PARSE_MODE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

@pytest.fixture
def sender():
    """
    Stand-in for the transport. Methods return a canned response.
    """
    mock = MagicMock()
    mock.send_file.return_value = {"ok": True, "result": {"message_id": 1}}
    mock.send_poll.return_value = {"ok": True, "result": {"message_id": 2}}
    return mock

@pytest.fixture
def upload_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 test document")
    return path

@pytest.fixture
def templates_dir(tmp_path, monkeypatch):
    directory = tmp_path / "templates"
    directory.mkdir()
    monkeypatch.setenv("TEMPLATES_DIR", str(directory))
    get_settings.cache_clear()
    return directory
