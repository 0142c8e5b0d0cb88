import pytest

from embed_harness.app.services import basedash


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no json body")
        return self._body


class FakeSession:
    """Records outbound posts and replays queued responses in order."""

    def __init__(self):
        self.responses = []
        self.calls = []
        self.opened = 0
        self.closed = 0

    def __enter__(self):
        self.opened += 1
        return self

    def __exit__(self, *exc):
        self.closed += 1
        return False

    def queue(self, status_code=200, body=None):
        self.responses.append(FakeResponse(status_code, body))

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.responses.pop(0)


@pytest.fixture
def fake_basedash(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(basedash, "_new_session", lambda: session)
    return session
