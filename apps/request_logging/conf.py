"""
apps.request_logging.conf
~~~~~~~~~~~~~~~~~~~~~~~~~
Settings for the request logging middlewares.

``settings.REQUEST_LOGGING`` is a dict merged over :data:`DEFAULTS`::

    REQUEST_LOGGING = {
        "LOGGER": "apps.request_logging",
        "RULES": {r"^/health/": "debug", r"^/admin": "warn"},
        "REQUEST_ID_HEADER": "X-Request-Id",
    }

``RULES`` is usually read from the environment with :func:`parse_rules` as
a ``python-decouple`` cast.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from django.conf import settings

from common.exceptions import InvalidLevelError

DEFAULTS: dict = {
    "LOGGER": "apps.request_logging",
    "RULES": {},
    "REQUEST_ID_HEADER": "X-Request-Id",
}


@dataclass(frozen=True)
class RequestLoggingSettings:
    logger_name: str
    rules: dict = field(default_factory=dict)
    request_id_header: str = "X-Request-Id"


def parse_rules(value: str) -> dict[str, str]:
    """
    Parse ``"pattern=level;pattern=level"`` into an ordered ``{pattern: level}``.

    The last ``=`` of an item separates the level, so patterns may contain
    ``=`` themselves.  Blank items are skipped; levels are validated later,
    when the rules are compiled.

    Example::

        >>> parse_rules("^/health/=debug; ^/admin=warn")
        {'^/health/': 'debug', '^/admin': 'warn'}

    Raises:
        InvalidLevelError: An item has no ``=level`` part.
    """
    rules: dict[str, str] = {}
    for item in value.split(";"):
        item = item.strip()
        if not item:
            continue
        pattern, sep, level = item.rpartition("=")
        if not sep or not pattern or not level.strip():
            raise InvalidLevelError(item, f"rule {item!r} is not of the form pattern=level")
        rules[pattern.strip()] = level.strip()
    return rules


def get_request_logging_settings() -> RequestLoggingSettings:
    """Return ``settings.REQUEST_LOGGING`` merged over :data:`DEFAULTS`."""
    options = {**DEFAULTS, **getattr(settings, "REQUEST_LOGGING", {})}
    return RequestLoggingSettings(
        logger_name=options["LOGGER"],
        rules=options["RULES"],
        request_id_header=options["REQUEST_ID_HEADER"],
    )
