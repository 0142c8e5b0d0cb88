import os
import sys

from loguru import logger

from embed_harness.app.core.settings import settings


def init_logging():
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    logger.remove()
    logger.add(
        os.path.join(settings.LOG_DIR, "embed_harness.jsonl"),
        format="{message}",
        serialize=True,
        enqueue=True,
        rotation="10 MB",
        retention="7 days",
        backtrace=False,
        diagnose=False,
        level=settings.LOG_LEVEL,
    )
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        level=settings.LOG_LEVEL,
        backtrace=False,
        diagnose=False,
    )
