import logging
import time
from fastapi import Request

logger = logging.getLogger("cityhall.access")

SKIP_PATHS = ("/healthcheck", "/favicon.ico")

async def access_log_middleware(request: Request, call_next):
    path = request.url.path
    if path in SKIP_PATHS:
        return await call_next(request)

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("%s %s failed", request.method, path)
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, path, response.status_code, elapsed_ms)
    return response
