"""
common.health
~~~~~~~~~~~~~
GET /health/ – lightweight liveness probe.

Returns:
    200  {"status": "ok"}

Probes hit this endpoint constantly, so the default rules log it at DEBUG.
"""
import structlog
from django.http import JsonResponse

from apps.request_logging.context import get_request_logger

logger = structlog.get_logger(__name__)


def health_check(request):
    """Return service liveness; logs through the request's own logger."""
    get_request_logger(request, default=logger).debug("health_check")
    return JsonResponse({"status": "ok"})
