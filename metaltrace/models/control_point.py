"""
ControlPoint model — Where elements are checked in and out.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from metaltrace.models.enums import ControlPointType


class ControlPoint(models.Model):
    """
    Named physical location: factory, storage or construction site.

    Control points are stable entities created by administrators.
    Elements and movements reference them with PROTECT, so a point that
    has ever held an element cannot be deleted.

    The type column is plain text: choices are not a database constraint.
    The service layer rejects unknown types on create; rows with other
    values are treated as storage by the status derivation.

    Examples:
        ControlPoint.objects.create(name='Fábrica Central', type=ControlPointType.FACTORY)
        ControlPoint.objects.create(name='Depósito 1', type=ControlPointType.STORAGE)
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_('Nome'),
    )
    type = models.CharField(
        max_length=20,
        choices=ControlPointType.choices,
        verbose_name=_('Tipo'),
        help_text=_('Define o status do elemento ao chegar aqui.'),
    )
    address = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Endereço'),
    )
    latitude = models.DecimalField(
        max_digits=10,
        decimal_places=8,
        null=True,
        blank=True,
        verbose_name=_('Latitude'),
    )
    longitude = models.DecimalField(
        max_digits=11,
        decimal_places=8,
        null=True,
        blank=True,
        verbose_name=_('Longitude'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Ponto de Controle')
        verbose_name_plural = _('Pontos de Controle')
        ordering = ['name', 'id']

    def __str__(self) -> str:
        return self.name
