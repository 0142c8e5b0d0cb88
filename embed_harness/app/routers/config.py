from fastapi import APIRouter

from embed_harness.app.core.settings import settings

router = APIRouter()


@router.get("/config")
def config():
    return {"basedashUrl": settings.basedash_url}
