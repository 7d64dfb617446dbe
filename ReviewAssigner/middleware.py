"""Логирование HTTP-запросов.

На время запроса в контекст structlog кладется correlation_id
(из заголовка ``X-Correlation-ID`` или новый uuid), по завершении
пишется метод, путь, статус и длительность.
"""

import time
import uuid

import structlog

from ReviewAssigner.logging import bind_request_context, clear_request_context

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        correlation_id = request.headers.get('X-Correlation-ID') or str(uuid.uuid4())
        clear_request_context()
        bind_request_context(correlation_id=correlation_id)

        start = time.perf_counter()
        response = self.get_response(request)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            'request_completed',
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        response['X-Correlation-ID'] = correlation_id
        clear_request_context()
        return response
