"""
Operator model — Role of a Django user in the tracking workflow.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from metaltrace.models.enums import Role


class Operator(models.Model):
    """
    Role attached to a user account.

    The account itself (credentials, is_active) stays in the configured
    AUTH_USER_MODEL. Users without an Operator row cannot use the API.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='operator',
        verbose_name=_('Usuário'),
    )
    role = models.CharField(
        max_length=30,
        choices=Role.choices,
        default=Role.CUSTOMER_OPERATOR,
        verbose_name=_('Papel'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Operador')
        verbose_name_plural = _('Operadores')

    def __str__(self) -> str:
        return f"{self.user} ({self.get_role_display()})"
