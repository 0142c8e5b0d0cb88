import uvicorn
from loguru import logger

from embed_harness.app.core.logging import init_logging
from embed_harness.app.core.settings import settings

ENDPOINTS = [
    ("GET ", "/", "Main page with setup form"),
    ("POST", "/api/setup", "Create org and connect data source"),
    ("POST", "/api/generate-jwt", "Generate a new JWT token"),
    ("POST", "/api/upload-icon", "Upload organization icon"),
    ("GET ", "/api/config", "Get current configuration"),
]


def banner() -> str:
    lines = [
        "Basedash Embedding Test Server",
        f"  Server running at: http://{settings.HOST}:{settings.PORT}",
        f"  Basedash URL:      {settings.basedash_url}",
        "  Endpoints:",
    ]
    lines += [f"    {m} {p:<20} - {d}" for m, p, d in ENDPOINTS]
    return "\n".join(lines)


def main():
    init_logging()
    logger.info("\n" + banner())
    uvicorn.run(
        "embed_harness.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
