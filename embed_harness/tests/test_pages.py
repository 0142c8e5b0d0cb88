from fastapi.testclient import TestClient

from embed_harness.app.core.settings import settings
from embed_harness.app.main import app
from embed_harness.app.server import banner

client = TestClient(app)


def test_index_served():
    for path in ("/", "/index.html"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "Basedash Embed Harness" in r.text


def test_config(monkeypatch):
    monkeypatch.setattr(settings, "BASEDASH_URL", "https://app.example.com/")
    r = client.get("/api/config")
    assert r.json() == {"basedashUrl": "https://app.example.com"}


def test_unknown_path_is_plain_404():
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.text == "Not Found"


def test_wrong_method_is_plain_404():
    r = client.get("/api/setup")
    assert r.status_code == 404
    assert r.text == "Not Found"


def test_banner_lists_endpoints():
    text = banner()
    assert f":{settings.PORT}" in text
    for path in ("/api/setup", "/api/generate-jwt", "/api/upload-icon", "/api/config"):
        assert path in text
