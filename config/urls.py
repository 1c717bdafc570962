"""
Root URL configuration for the request logging service.
"""
from django.urls import path

from common.health import health_check

urlpatterns = [
    # Health check
    path("health/", health_check, name="health-check"),
]
