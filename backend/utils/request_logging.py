"""Controller invocation logging."""

import logging
import time

from fastapi import Request

logger = logging.getLogger("controllers")


async def log_controller_calls(request: Request, call_next):
    """Log every /api call with its query, status and duration."""
    if not request.url.path.startswith("/api"):
        return await call_next(request)

    start = time.perf_counter()
    query = f"?{request.url.query}" if request.url.query else ""
    logger.info("%s %s%s", request.method, request.url.path, query)

    try:
        response = await call_next(request)
    except Exception:
        # Unhandled errors are reported as 500 by the outer error handler
        duration = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.1fms)", request.method, request.url.path, 500, duration)
        raise

    duration = (time.perf_counter() - start) * 1000
    logger.info("%s %s -> %s (%.1fms)", request.method, request.url.path, response.status_code, duration)
    return response
