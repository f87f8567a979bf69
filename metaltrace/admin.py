"""
Metaltrace Admin.

Provides views for administrators and production debugging:
- ControlPoint: list + edit
- Element: list + edit technical attributes; status editable (override),
  code read-only once marked
- Movement: read-only audit trail
- Operator: role assignment
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from metaltrace.models import ControlPoint, Element, Movement, Operator

logger = logging.getLogger(__name__)


# =========================================================================
# CONTROL POINT ADMIN
# =========================================================================

@admin.register(ControlPoint)
class ControlPointAdmin(admin.ModelAdmin):
    """Editable. Deletion fails while elements or movements reference the point."""

    list_display = ['name', 'type', 'address', 'latitude', 'longitude', 'elements_count']
    list_filter = ['type']
    search_fields = ['name', 'address']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description=_('Elementos no local'))
    def elements_count(self, obj):
        return obj.elements.count()


# =========================================================================
# ELEMENT ADMIN
# =========================================================================

class MovementInline(admin.TabularInline):
    """Read-only movement history inside the element page."""

    model = Movement
    fk_name = 'element'
    extra = 0
    fields = ['timestamp', 'operation', 'from_location', 'to_location', 'operator', 'comments']
    readonly_fields = fields
    ordering = ['-timestamp', '-id']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Element)
class ElementAdmin(admin.ModelAdmin):
    """Changing status here is the administrative override."""

    list_display = ['code', 'type', 'status', 'current_location', 'batch', 'updated_at']
    list_filter = ['status', 'type', 'current_location']
    search_fields = ['code', 'drawing', 'batch']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    inlines = [MovementInline]

    def get_readonly_fields(self, request, obj=None):
        fields = list(super().get_readonly_fields(request, obj))
        if obj is not None:
            fields.append('code')
        return fields

    def save_model(self, request, obj, form, change):
        if change and 'status' in form.changed_data:
            logger.info(
                "element.status_override",
                extra={"element_id": obj.pk, "to_status": obj.status, "via": "admin",
                       "user_id": request.user.pk},
            )
        super().save_model(request, obj, form, change)

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# MOVEMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(Movement)
class MovementAdmin(admin.ModelAdmin):
    """Read-only audit trail."""

    list_display = ['timestamp', 'element', 'operation', 'from_location', 'to_location', 'operator']
    list_filter = ['operation', 'timestamp', 'to_location']
    search_fields = ['element__code', 'comments']
    readonly_fields = ['element', 'from_location', 'to_location', 'operation', 'operator',
                       'comments', 'photo_url', 'latitude', 'longitude', 'timestamp']
    date_hierarchy = 'timestamp'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# OPERATOR ADMIN
# =========================================================================

@admin.register(Operator)
class OperatorAdmin(admin.ModelAdmin):
    list_display = ['user', 'role', 'is_active_display']
    list_filter = ['role']
    search_fields = ['user__username', 'user__email']
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description=_('Ativo?'), boolean=True)
    def is_active_display(self, obj):
        return obj.user.is_active
