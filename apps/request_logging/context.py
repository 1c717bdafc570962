"""
apps.request_logging.context
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Typed request-scoped metadata shared between middlewares and views.

Upstream code (see :class:`common.middleware.RequestIdMiddleware`) puts the
caller's request id here; the logging middleware replaces the context with
one that also carries the request's logger, which views read back with
:func:`get_request_logger`.
"""
from __future__ import annotations

from dataclasses import dataclass

from django.http import HttpRequest
from structlog.typing import BindableLogger

#: Attribute of :class:`~django.http.HttpRequest` holding the context.
_CONTEXT_ATTR = "log_context"


@dataclass(frozen=True)
class RequestContext:
    """
    Attributes:
        request_id: Identifier supplied by the caller, if any.
        logger: Logger bound to this request, set by the logging middleware.
    """

    request_id: str | None = None
    logger: BindableLogger | None = None


_EMPTY = RequestContext()


def get_request_context(request: HttpRequest) -> RequestContext:
    """Return the context attached to *request*, or an empty one."""
    return getattr(request, _CONTEXT_ATTR, _EMPTY)


def set_request_context(request: HttpRequest, context: RequestContext) -> None:
    setattr(request, _CONTEXT_ATTR, context)


def get_request_logger(request: HttpRequest, default=None):
    """Return the logger the logging middleware bound to *request*, or *default*."""
    logger = get_request_context(request).logger
    return default if logger is None else logger
