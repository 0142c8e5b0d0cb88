from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from embed_harness.app.core.settings import settings
from embed_harness.app.services.tokens import generate_jwt, sso_url

router = APIRouter()


class JwtRequest(BaseModel):
    jwtSecret: str = ""
    orgId: str = ""


def _jwt_response(jwt_secret: str, org_id: str):
    if not jwt_secret or not org_id:
        return JSONResponse(
            {"error": "jwtSecret and orgId are required"}, status_code=400
        )
    try:
        token = generate_jwt(jwt_secret, org_id)
    except Exception:
        logger.exception("Failed to generate JWT")
        return JSONResponse(
            {"error": "Failed to generate JWT. Check your configuration."},
            status_code=500,
        )
    return {
        "jwt": token,
        "ssoUrl": sso_url(token),
        "user": settings.dummy_user,
        "orgId": org_id,
        "expiresIn": f"{settings.JWT_EXPIRES_MINUTES} minutes",
    }


@router.post("/generate-jwt")
def generate(req: JwtRequest):
    return _jwt_response(req.jwtSecret, req.orgId)


# legacy: secret and org passed as query params
@router.get("/generate-jwt")
def generate_legacy(jwtSecret: str = "", orgId: str = ""):
    return _jwt_response(jwtSecret, orgId)
