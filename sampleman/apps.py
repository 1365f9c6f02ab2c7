"""Django app configuration for Sampleman."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SamplemanConfig(AppConfig):
    """Configuration for Sampleman app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "sampleman"
    verbose_name = _("Sample Tracking")
