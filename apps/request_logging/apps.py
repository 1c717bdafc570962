"""
apps.request_logging.apps
"""
from django.apps import AppConfig


class RequestLoggingConfig(AppConfig):
    name = "apps.request_logging"
    label = "request_logging"
    verbose_name = "Request Logging"
