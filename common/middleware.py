"""
common.middleware
~~~~~~~~~~~~~~~~~
Django entry points for structured request logging.

Install both, request id first, in ``settings.MIDDLEWARE``::

    "common.middleware.RequestIdMiddleware",
    "common.middleware.StructuredLoggingMiddleware",
"""
import structlog

from apps.request_logging.conf import get_request_logging_settings
from apps.request_logging.context import (
    RequestContext,
    get_request_context,
    set_request_context,
)
from apps.request_logging.middleware import LoggingMiddleware

logger = structlog.get_logger(__name__)


class RequestIdMiddleware:
    """
    Copies the caller's request id header into the request context.

    Ids are propagated, never generated: a request without the header has
    no ``request_id``.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        header = get_request_logging_settings().request_id_header
        self.meta_key = "HTTP_" + header.upper().replace("-", "_")

    def __call__(self, request):
        request_id = request.META.get(self.meta_key, "").strip()
        if request_id:
            context = get_request_context(request)
            set_request_context(
                request, RequestContext(request_id=request_id, logger=context.logger)
            )
        return self.get_response(request)


class StructuredLoggingMiddleware:
    """
    WSGI middleware that logs every request twice, before and after the
    rest of the chain, at the level selected by ``REQUEST_LOGGING["RULES"]``.

    Rules are compiled when Django loads its middleware, so an invalid
    pattern stops start-up with :class:`~common.exceptions.InvalidPatternError`.
    """

    def __init__(self, get_response):
        options = get_request_logging_settings()
        middleware = LoggingMiddleware.with_filters(
            structlog.get_logger(options.logger_name), options.rules
        )
        logger.debug(
            "request_logging_configured",
            logger_name=options.logger_name,
            rules=[(rule.pattern, rule.level.name) for rule in middleware.rules],
        )
        self.handler = middleware.apply(get_response)

    def __call__(self, request):
        return self.handler(request)
