from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter()


@router.get("/")
@router.get("/index.html")
def index():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")
