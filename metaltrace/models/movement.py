"""
Movement model — Immutable ledger of element custody changes.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from metaltrace.models.enums import MovementOperation


class Movement(models.Model):
    """
    Immutable record of an element arriving at a control point.

    Rules:
    - NEVER update() or delete()
    - Corrections are new Movements
    - The service layer updates Element.status/current_location in the
      same transaction as the insert

    Together the movements of an element form its full audit trail.
    """

    element = models.ForeignKey(
        'metaltrace.Element',
        on_delete=models.PROTECT,
        related_name='movements',
        verbose_name=_('Elemento'),
    )
    from_location = models.ForeignKey(
        'metaltrace.ControlPoint',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='movements_from',
        verbose_name=_('Origem'),
    )
    to_location = models.ForeignKey(
        'metaltrace.ControlPoint',
        on_delete=models.PROTECT,
        related_name='movements_to',
        verbose_name=_('Destino'),
    )
    operation = models.CharField(
        max_length=20,
        choices=MovementOperation.choices,
        verbose_name=_('Operação'),
    )
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='+',
        verbose_name=_('Operador'),
    )

    comments = models.TextField(blank=True, default='', verbose_name=_('Comentários'))
    photo_url = models.CharField(max_length=500, blank=True, default='', verbose_name=_('Foto'))
    latitude = models.DecimalField(max_digits=10, decimal_places=8, null=True, blank=True)
    longitude = models.DecimalField(max_digits=11, decimal_places=8, null=True, blank=True)

    timestamp = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Data/Hora'))

    class Meta:
        verbose_name = _('Movimentação')
        verbose_name_plural = _('Movimentações')
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['element', 'timestamp'], name='metaltrace_mv_element_ts_idx'),
        ]

    def save(self, *args, **kwargs):
        """Insert only."""
        if self.pk:
            raise ValueError(
                "Movimentações são imutáveis. "
                "Para corrigir, registre uma nova movimentação."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion. Movements are immutable."""
        raise ValueError(
            "Movimentações são imutáveis e não podem ser excluídas."
        )

    def __str__(self) -> str:
        return f"{self.element_id} → {self.to_location_id} | {self.operation}"
