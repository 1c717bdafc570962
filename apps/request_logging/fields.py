"""
apps.request_logging.fields
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Request metadata attached to both log entries of a request.
"""
from __future__ import annotations

from django.http import HttpRequest

#: Field names in the order they are extracted.
FIELD_NAMES: tuple[str, ...] = (
    "method",
    "path",
    "host",
    "from",
    "protocol",
    "referer",
    "user_agent",
)


def _remote_address(meta: dict) -> str:
    addr = meta.get("REMOTE_ADDR") or ""
    port = meta.get("REMOTE_PORT") or ""
    if addr and port:
        return f"{addr}:{port}"
    return addr


def build_fields(request: HttpRequest) -> dict[str, str]:
    """
    Return the metadata fields of *request*, leaving out empty values.

    ``host`` is the raw ``Host`` header (falling back to ``SERVER_NAME``)
    and is not checked against ``ALLOWED_HOSTS``, so building fields never
    raises for a request that reached the middleware.  Values are logged
    verbatim: no case folding, no truncation.
    """
    meta = request.META
    candidates = (
        ("method", request.method or ""),
        ("path", request.get_full_path()),
        ("host", meta.get("HTTP_HOST") or meta.get("SERVER_NAME") or ""),
        ("from", _remote_address(meta)),
        ("protocol", meta.get("SERVER_PROTOCOL") or ""),
        ("referer", meta.get("HTTP_REFERER") or ""),
        ("user_agent", meta.get("HTTP_USER_AGENT") or ""),
    )
    return {name: value for name, value in candidates if value}
