"""Request Logging Middleware

Binds a correlation id to every request so resolver and source logs emitted
while serving it can be grouped, and logs completion with timing. Requests
slower than the threshold are flagged; they usually mean an upstream
Wiktionary fetch ran into its timeout.
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import api_logger, bind_context, clear_context, generate_correlation_id

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and echoes its correlation id in the response."""

    def __init__(self, app, slow_threshold_ms: float = 5000):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        else:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            response.headers["X-Correlation-ID"] = correlation_id

            status = response.status_code
            log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
            log_method("request_completed", status=status, duration_ms=duration_ms)
            if duration_ms > self.slow_threshold_ms:
                log.warning("slow_request", duration_ms=duration_ms, threshold_ms=self.slow_threshold_ms)
            return response
        finally:
            clear_context()
