"""
Test settings – deterministic rules, no environment lookups for logging.
"""
from .base import *  # noqa: F401, F403

DEBUG = False

ALLOWED_HOSTS = ["*"]

REQUEST_LOGGING = {
    "LOGGER": "apps.request_logging",
    "RULES": {r"^/health/": "debug", r"^/admin": "warn"},
    "REQUEST_ID_HEADER": "X-Request-Id",
}
