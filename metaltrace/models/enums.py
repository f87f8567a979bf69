"""
Enums for Metaltrace models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ControlPointType(models.TextChoices):
    """
    Kind of physical location an element can be found at.

    The type decides the status an element takes on arrival
    (see metaltrace.lifecycle).
    """
    FACTORY = 'factory', _('Fábrica')
    STORAGE = 'storage', _('Depósito')
    USAGE_SITE = 'usage_site', _('Canteiro de obra')


class ElementType(models.TextChoices):
    """Structural element family."""
    BEAM = 'beam', _('Viga')
    COLUMN = 'column', _('Pilar')
    TRUSS = 'truss', _('Treliça')
    CONNECTION = 'connection', _('Ligação')


class ElementStatus(models.TextChoices):
    """Element lifecycle status."""
    PRODUCTION = 'production', _('Em produção')          # Marked, still at the factory
    READY_TO_SHIP = 'ready_to_ship', _('Pronto p/ envio') # Override only
    IN_TRANSIT = 'in_transit', _('Em trânsito')           # Override only
    IN_STORAGE = 'in_storage', _('Em depósito')
    IN_ASSEMBLY = 'in_assembly', _('Em montagem')         # Override only
    IN_OPERATION = 'in_operation', _('Em operação')       # Arrived at a usage site


class MovementOperation(models.TextChoices):
    """What the operator did at the control point."""
    RECEPTION = 'reception', _('Recebimento')
    SHIPPING = 'shipping', _('Expedição')
    INVENTORY = 'inventory', _('Inventário')


class Role(models.TextChoices):
    """Operator roles. Each API endpoint is gated by a subset of these."""
    ADMINISTRATOR = 'administrator', _('Administrador')
    CUSTOMER_OPERATOR = 'customer_operator', _('Operador do cliente')
    FACTORY_OPERATOR = 'factory_operator', _('Operador da fábrica')
    WAREHOUSE_KEEPER = 'warehouse_keeper', _('Almoxarife')
    SITE_MASTER = 'site_master', _('Mestre de obras')
