"""
Element model — A marked structural piece tracked by its code.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from metaltrace.models.enums import ElementStatus, ElementType


class ElementQuerySet(models.QuerySet):
    """Custom QuerySet for Element with the API list filters."""

    def matching(self, status=None, type=None, location_id=None):
        """
        AND-combined filters. None means no constraint.

        Ordered most recently created first.
        """
        qs = self
        if status:
            qs = qs.filter(status=status)
        if type:
            qs = qs.filter(type=type)
        if location_id:
            qs = qs.filter(current_location_id=location_id)
        return qs.order_by('-created_at', '-id')

    def at_location(self, location):
        """Elements currently at a control point."""
        return self.filter(current_location=location)


class Element(models.Model):
    """
    Structural element (beam, column, truss, connection).

    Rules:
    - code is the physical marking (DataMatrix); unique and NEVER changes
    - status/current_location move only through Movements or the
      administrative override in the service layer
    """

    code = models.CharField(
        max_length=64,
        unique=True,
        verbose_name=_('Código'),
        help_text=_('Marcação DataMatrix (ex: BM-2024-001547)'),
    )
    type = models.CharField(
        max_length=20,
        choices=ElementType.choices,
        verbose_name=_('Tipo'),
    )
    status = models.CharField(
        max_length=20,
        choices=ElementStatus.choices,
        default=ElementStatus.PRODUCTION,
        db_index=True,
        verbose_name=_('Status'),
    )

    # Technical attributes
    drawing = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Desenho'))
    batch = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Lote'))
    gost = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Norma GOST'))
    length = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, verbose_name=_('Comprimento'))
    width = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, verbose_name=_('Largura'))
    height = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, verbose_name=_('Altura'))
    weight = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, verbose_name=_('Peso'))

    current_location = models.ForeignKey(
        'metaltrace.ControlPoint',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='elements',
        verbose_name=_('Localização atual'),
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ElementQuerySet.as_manager()

    class Meta:
        verbose_name = _('Elemento')
        verbose_name_plural = _('Elementos')
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status', 'type'], name='metaltrace_el_status_type_idx'),
        ]

    def save(self, *args, **kwargs):
        """Save element, refusing to change the code of a stored row."""
        if self.pk and not self._state.adding:
            stored = type(self).objects.filter(pk=self.pk).values_list('code', flat=True).first()
            if stored is not None and stored != self.code:
                raise ValueError(
                    "O código do elemento é imutável. "
                    "Marque um novo elemento em vez de alterar o código."
                )
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.code} ({self.get_status_display()})"
