from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from embed_harness.app.routers import config, icon, pages, provision, sso

app = FastAPI(title="Basedash Embed Harness", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router)
app.include_router(provision.router, prefix="/api")
app.include_router(sso.router, prefix="/api")
app.include_router(config.router, prefix="/api")
app.include_router(icon.router, prefix="/api")


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    # unknown paths and wrong methods both look like a missing page
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(Exception)
async def _unhandled_error(request: Request, exc: Exception):
    logger.error("unhandled", exception=exc)
    # re-raise so FastAPI generates the proper error response
    raise exc
