"""
apps.request_logging.recorder
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Observes the response an inner handler produced.
"""
from __future__ import annotations

from django.http.response import HttpResponseBase


class ResponseRecorder:
    """
    Records the status code and body size of one handler call.

    A recorder is created per request and only looks at the response: the
    object handed to :meth:`record` is returned as-is, with its content,
    headers and status untouched.

    ``status`` stays ``None`` until a response is recorded, i.e. when the
    handler raised instead of returning.

    ``size`` is the body length for regular responses.  A streaming body
    is only sent after the handler returns, so for streaming responses
    ``size`` is the declared ``Content-Length``, or ``0`` when none is
    declared, not the bytes eventually written.
    """

    def __init__(self) -> None:
        self._status: int | None = None
        self._size: int = 0

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def size(self) -> int:
        return self._size

    def record(self, response: HttpResponseBase) -> HttpResponseBase:
        self._status = response.status_code
        self._size = _body_size(response)
        return response


def _body_size(response: HttpResponseBase) -> int:
    # A streaming body has not been written yet when the handler returns;
    # report the declared length, if any.
    if getattr(response, "streaming", False):
        declared = response.get("Content-Length", "")
        return int(declared) if declared.isdigit() else 0
    return len(response.content)
