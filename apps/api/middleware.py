"""HTTP middleware: fault injection and request logging."""

import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


async def simulate_chaos(request: Request, call_next):
    """Short-circuit a share of requests with a simulated backend failure.

    The injector lives on ``app.state`` so tests can swap it for a
    deterministic or disabled one.
    """
    injector = request.app.state.fault_injector
    fault = injector.intercept(request.method, request.url.path)
    if fault is not None:
        return JSONResponse(status_code=fault.status_code, content=fault.to_body())
    return await call_next(request)


async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.debug(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response
