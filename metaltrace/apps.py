"""Django app configuration for Metaltrace."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class MetaltraceConfig(AppConfig):
    """Configuration for Metaltrace app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "metaltrace"
    verbose_name = _("Rastreabilidade de Estruturas")
