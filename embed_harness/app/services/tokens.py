from datetime import datetime, timedelta, timezone

import jwt

from embed_harness.app.core.settings import settings

JWT_ALGORITHM = "HS256"


def generate_jwt(jwt_secret: str, org_id: str) -> str:
    """
    Sign an HS256 token asserting the dummy embed user for org_id.
    The token carries iat and expires JWT_EXPIRES_MINUTES later.
    """
    now = datetime.now(tz=timezone.utc)
    claims = {
        **settings.dummy_user,
        "orgId": org_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    }
    return jwt.encode(claims, jwt_secret, algorithm=JWT_ALGORITHM)


def sso_url(token: str) -> str:
    return f"{settings.basedash_url}/api/sso/jwt?jwt={token}"
