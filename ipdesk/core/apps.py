from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ipdesk.core'

    def ready(self):
        """Import signals when app is ready"""
        import ipdesk.core.model_cache  # noqa: F401  # List cache invalidation signals
