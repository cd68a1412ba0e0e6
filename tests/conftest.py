"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile
import shutil

import httpx

from wikihubot.notifications.config import HubotConfig, WikiUrls


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test artifacts."""
    dirpath = tempfile.mkdtemp()
    yield Path(dirpath)
    shutil.rmtree(dirpath, ignore_errors=True)


@pytest.fixture
def wiki_urls():
    """Link settings for a wiki served from https://wiki.example.org/."""
    return WikiUrls(wiki_url="https://wiki.example.org/")


@pytest.fixture
def hubot_config(wiki_urls):
    """Config pointing at a fake Hubot with every event enabled."""
    return HubotConfig(
        webhook_url="https://hubot.example.org/incoming/wiki",
        room_name="#wiki",
        urls=wiki_urls,
    )


class WebhookRecorder:
    """Stands in for the Hubot endpoint behind httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.fail_with: type[httpx.TransportError] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("Connection refused", request=request)
        return httpx.Response(self.status_code, text="ok")


@pytest.fixture
def webhook(monkeypatch):
    """Route every httpx.AsyncClient created by the code under test to a recorder."""
    recorder = WebhookRecorder()
    real_client = httpx.AsyncClient

    def _client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(recorder)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", _client)
    return recorder
