from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from embed_harness.app.services.basedash import BasedashAPIError
from embed_harness.app.services.provisioning import (
    SetupError,
    setup_org_and_data_source,
)

router = APIRouter()


class SetupRequest(BaseModel):
    apiKey: Optional[str] = None
    orgName: Optional[str] = None
    dataSourceUri: Optional[str] = None
    dataSourceName: Optional[str] = None


@router.post("/setup")
def setup(req: SetupRequest):
    try:
        return setup_org_and_data_source(
            req.apiKey or "",
            req.orgName or "",
            req.dataSourceUri or "",
            req.dataSourceName or "",
        )
    except SetupError as e:
        return JSONResponse({"error": e.message}, status_code=e.status_code)
    except BasedashAPIError as e:
        logger.error(f"Setup failed: {e.detail}")
        return JSONResponse({"error": e.detail}, status_code=500)
    except Exception as e:
        logger.exception("Setup failed")
        return JSONResponse({"error": str(e) or "Setup failed"}, status_code=500)
