import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to every log entry emitted while serving a request."""

    async def dispatch(self, request, call_next):
        correlation_id = request.headers.get("x-correlation-id") or str(uuid.uuid4())
        with bind_request_context(
            correlation_id=correlation_id,
            request_path=request.url.path,
            request_method=request.method,
        ):
            started = time.perf_counter()
            response = await call_next(request)
            logger.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        response.headers["x-correlation-id"] = correlation_id
        return response
