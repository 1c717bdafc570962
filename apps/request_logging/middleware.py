"""
apps.request_logging.middleware
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Wraps a request handler with a "starting request" / "request completed"
pair of structured log entries, at a level chosen per request path.

A *handler* is any callable ``handler(request, *args, **kwargs)`` returning
an :class:`~django.http.HttpResponseBase`: Django's ``get_response`` or a
view function, whose keyword arguments are the URL path variables.

Log record fields:
    method, path, host, from, protocol, referer, user_agent
                 – request metadata, each omitted when empty
    request_id   – present when the request context carries one
    status       – response status code (int), 200 when none was observed
    duration     – seconds spent in the handler (float), completion only
    bytes        – response body size (int), completion only
"""
from __future__ import annotations

import functools
import time
from collections.abc import Callable
from dataclasses import replace

from .context import get_request_context, set_request_context
from .fields import build_fields
from .levels import Level, emit
from .recorder import ResponseRecorder
from .rules import RuleSet, RuleSpec, build_rule_set, select_level

#: Status logged when the handler produced no response of its own.
DEFAULT_STATUS = 200


class LoggingMiddleware:
    """
    Request logging around a wrapped handler.

    An instance holds a base logger and an ordered :data:`RuleSet`; both are
    fixed at construction and shared read-only by every request.  Without
    rules every request is logged at ``INFO``.

    Args:
        logger: Base structlog logger; never mutated, only bound from.
        rules: Compiled rules, see :meth:`with_filters` to build them.
        clock: Monotonic clock returning seconds.
    """

    def __init__(
        self,
        logger,
        rules: RuleSet = (),
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._rules: RuleSet = tuple(rules)
        self._clock = clock

    @classmethod
    def with_filters(cls, logger, filters: RuleSpec, **kwargs) -> LoggingMiddleware:
        """
        Build a middleware whose level follows *filters*.

        All patterns are compiled here; one bad pattern means no middleware.

        Raises:
            InvalidPatternError: A pattern does not compile.
            InvalidLevelError: A level names no level.
        """
        return cls(logger, build_rule_set(filters), **kwargs)

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def level_for(self, path: str) -> Level:
        return select_level(path, self._rules)

    def apply(self, handler: Callable) -> Callable:
        """Return *handler* wrapped with request logging, same call signature."""

        @functools.wraps(handler)
        def logged_handler(request, *args, **kwargs):
            started = self._clock()

            context = get_request_context(request)
            logger = self._logger
            if context.request_id:
                logger = logger.bind(request_id=context.request_id)
            set_request_context(request, replace(context, logger=logger))

            logger = logger.bind(**build_fields(request))
            level = self.level_for(request.path)
            emit(logger, level, "starting request")

            recorder = ResponseRecorder()
            try:
                return recorder.record(handler(request, *args, **kwargs))
            finally:
                duration = self._clock() - started
                status = recorder.status
                if status is None:
                    status = DEFAULT_STATUS
                emit(
                    logger,
                    level,
                    "request completed",
                    status=status,
                    duration=max(duration, 0.0),
                    bytes=recorder.size,
                )

        return logged_handler
