import pytest

from utils import MessageFactory, RecordingHandler, make_client


@pytest.fixture(autouse=True)
def _isolate_sendamatic_env(monkeypatch):
    # Keep a developer's real credentials out of settings-based tests
    for name in ("USER_ID", "PASSWORD", "BASE_URL", "TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"SENDAMATIC_{name}", raising=False)


@pytest.fixture
def valid_message():
    """A message that passes every pre-send check."""
    return MessageFactory.create_valid_message()


@pytest.fixture
def ok_handler():
    """Answers every request with a single accepted recipient."""
    return RecordingHandler(body={"recipient@example.com": [200, "msg-12345"]})


@pytest.fixture
def ok_client(ok_handler):
    return make_client(ok_handler)
