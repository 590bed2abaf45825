"""
Request Tracking Middleware
Logs every API request with timing and response code
"""
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from tiyende.config import settings
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """Middleware to track all requests"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            response_time = time.perf_counter() - start_time
            logger.exception(
                f"{request.method} {request.url.path} failed after {response_time*1000:.0f}ms "
                f"[request_id={request_id}]"
            )
            raise

        response_time = time.perf_counter() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{response_time*1000:.2f}ms"

        message = (
            f"{request.method} {request.url.path} - {response.status_code} - "
            f"{response_time*1000:.0f}ms [request_id={request_id}]"
        )
        if response_time > settings.SLOW_REQUEST_SECONDS:
            logger.warning(f"SLOW REQUEST: {message}")
        elif response.status_code >= 500:
            logger.error(message)
        else:
            logger.info(message)

        return response
