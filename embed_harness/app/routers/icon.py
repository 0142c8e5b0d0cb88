from typing import Optional

from fastapi import APIRouter, File, Header, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger

from embed_harness.app.services.basedash import BasedashClient

router = APIRouter()


@router.post("/upload-icon")
def upload_icon(
    icon: Optional[UploadFile] = File(default=None),
    x_api_key: Optional[str] = Header(default=None),
    x_org_id: Optional[str] = Header(default=None),
):
    if not x_api_key or not x_org_id:
        return JSONResponse(
            {"error": "Missing required headers: X-Api-Key and X-Org-Id"},
            status_code=400,
        )
    if icon is None or not icon.filename:
        return JSONResponse({"error": "Missing icon file"}, status_code=400)

    try:
        status, body = BasedashClient(x_api_key).upload_icon(
            x_org_id,
            icon.filename,
            icon.file.read(),
            icon.content_type or "application/octet-stream",
        )
    except Exception as e:
        logger.exception("Icon upload failed")
        return JSONResponse({"error": str(e) or "Icon upload failed"}, status_code=500)
    return JSONResponse(body, status_code=status)
