import json

import pytest

from dizzyjam.client import DizzyjamClient
from dizzyjam.transport import Transport, TransportResult


class FakeTransport(Transport):
    """Records every request and replays queued results."""

    def __init__(self):
        self.calls: list[tuple[str, dict | None]] = []
        self.results: list[TransportResult] = []

    def queue(self, body, url="http://api.test/", http_status=200):
        if isinstance(body, dict):
            body = json.dumps(body)
        self.results.append(TransportResult(body=body, url=url, http_status=http_status))

    def send(self, url, files=None):
        self.calls.append((url, files))
        if self.results:
            return self.results.pop(0)
        return TransportResult(body='{"success": true}', url=url, http_status=200)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DIZZYJAM_API_URL", "DIZZYJAM_AUTH_ID", "DIZZYJAM_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return DizzyjamClient(api_url="http://api.test/v1", transport=transport)


@pytest.fixture
def signed_client(client):
    return client.set_credentials("my_id", "my_key")
