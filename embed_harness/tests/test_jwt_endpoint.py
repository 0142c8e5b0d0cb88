import jwt
from fastapi.testclient import TestClient

from embed_harness.app.core.settings import settings
from embed_harness.app.main import app
from embed_harness.app.routers import sso

client = TestClient(app)


def _check_token(token: str, org_id: str):
    claims = jwt.decode(token, "s3cret", algorithms=["HS256"])
    assert claims["orgId"] == org_id
    assert claims["email"] == settings.EMBED_USER_EMAIL
    assert claims["firstName"] == settings.EMBED_USER_FIRST_NAME
    assert claims["lastName"] == settings.EMBED_USER_LAST_NAME
    assert claims["exp"] - claims["iat"] == settings.JWT_EXPIRES_MINUTES * 60
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_generate_jwt_post():
    r = client.post("/api/generate-jwt", json={"jwtSecret": "s3cret", "orgId": "org_1"})
    assert r.status_code == 200
    j = r.json()
    _check_token(j["jwt"], "org_1")
    assert j["ssoUrl"] == f"{settings.basedash_url}/api/sso/jwt?jwt={j['jwt']}"
    assert j["user"] == settings.dummy_user
    assert j["orgId"] == "org_1"
    assert j["expiresIn"] == f"{settings.JWT_EXPIRES_MINUTES} minutes"


def test_generate_jwt_legacy_get():
    r = client.get("/api/generate-jwt", params={"jwtSecret": "s3cret", "orgId": "org_2"})
    assert r.status_code == 200
    _check_token(r.json()["jwt"], "org_2")


def test_generate_jwt_requires_secret_and_org():
    r = client.post("/api/generate-jwt", json={"orgId": "org_1"})
    assert r.status_code == 400
    assert r.json() == {"error": "jwtSecret and orgId are required"}
    r2 = client.get("/api/generate-jwt", params={"jwtSecret": "s3cret"})
    assert r2.status_code == 400


def test_generate_jwt_failure(monkeypatch):
    def boom(secret, org_id):
        raise RuntimeError("bad key")

    monkeypatch.setattr(sso, "generate_jwt", boom)
    r = client.post("/api/generate-jwt", json={"jwtSecret": "s", "orgId": "o"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to generate JWT. Check your configuration."}
