from django.apps import AppConfig

from .hooks import FilterRegistry


class BrandingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "branding"
    verbose_name = "Branding"

    def __init__(self, app_name, app_module):
        super().__init__(app_name, app_module)
        self.filters = FilterRegistry()

    def ready(self):
        from . import signals  # noqa: F401
