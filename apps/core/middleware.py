import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Log method, path, status and duration of every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            '%s %s -> %s (%.1f ms)',
            request.method,
            request.get_full_path(),
            response.status_code,
            elapsed_ms,
        )
        return response
