"""
common.exceptions
~~~~~~~~~~~~~~~~~
Configuration errors raised while assembling the request pipeline.

Every error here is raised at start-up, never while a request is being
handled: an invalid rule must stop the process from serving traffic instead
of being dropped silently.
"""
from django.core.exceptions import ImproperlyConfigured


class AppError(Exception):
    """Base application error.  Subclass to define domain-specific errors."""

    default_code: str = "error"
    default_detail: str = "An error occurred."

    def __init__(self, detail: str | None = None, code: str | None = None) -> None:
        self.detail = detail or self.default_detail
        self.code = code or self.default_code
        super().__init__(self.detail)

    def __str__(self) -> str:
        return self.detail


class ConfigurationError(AppError, ImproperlyConfigured):
    default_code = "configuration_error"
    default_detail = "The request logging configuration is invalid."


class InvalidPatternError(ConfigurationError):
    """
    Raised when a path pattern does not compile as a regular expression.

    The underlying :class:`re.error` is chained as ``__cause__``.

    Attributes:
        pattern: The offending pattern string, verbatim.
    """

    default_code = "invalid_pattern"

    def __init__(self, pattern: str, reason: str = "") -> None:
        self.pattern = pattern
        detail = f"invalid regexp '{pattern}'"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)


class InvalidLevelError(ConfigurationError):
    """Raised when a rule names a level outside the closed set."""

    default_code = "invalid_level"

    def __init__(self, value: object, detail: str | None = None) -> None:
        self.value = value
        super().__init__(detail or f"unknown log level {value!r}")
