import os
import sys
import pytest

# Config is read at import time; the testing config disables rate limiting
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

# Import FastAPI app
from fastapi.testclient import TestClient
from bot_console.fastapi_app import create_fastapi_app
from bot_console.setup.ioc.container import AppProvider
from fakes import FakeGateway

API = "/api"


@pytest.fixture()
def gateway():
    """Fake Discord gateway shared by the app under test."""
    return FakeGateway()


@pytest.fixture()
def app(gateway):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(AppProvider(gateway=gateway, login_timeout=1.0))


@pytest.fixture()
def client(app):
    """
    A test client for the FastAPI app.

    Used as a context manager so every request runs on the same event loop
    and shutdown closes the DI container.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def create_bot(client):
    """Register a bot through the API and return its JSON."""

    def _create(name="Test Bot", credential="token-1"):
        res = client.post(f"{API}/bots", json={"name": name, "credential": credential})
        assert res.status_code == 201, res.text
        return res.json()

    return _create


@pytest.fixture()
def online_bot(client, create_bot):
    """Id of a registered bot with a live session."""
    bot = create_bot()
    res = client.post(f"{API}/bots/{bot['id']}/connect")
    assert res.status_code == 200, res.text
    return bot["id"]
