"""
Prometheus metrics middleware for HTTP request tracking.
"""

import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..monitoring.prometheus_metrics import prometheus_metrics

METRICS_PATH = "/metrics"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics for HTTP requests."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time

        # Label by route template (/availabilities/{record_id}) to bound cardinality
        route = request.scope.get("route")
        endpoint = getattr(route, "path", None) or "unmatched"

        prometheus_metrics.record_http_request(
            method=request.method,
            endpoint=endpoint,
            duration=duration,
            status_code=response.status_code,
        )
        return response
