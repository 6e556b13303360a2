from django.apps import AppConfig
from django.conf import settings


class DashboardConfig(AppConfig):
    name = 'apps.dashboard'
    label = 'dashboard'

    def ready(self):
        # Fetch the admin password list at startup so the first login does not wait.
        if settings.SPARKLE_PRELOAD_PASSWORDS:
            from .gate import registry
            registry.start_loading()
