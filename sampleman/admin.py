"""
Sampleman Admin.

Provides views for operations and debugging:
- SampleManufacturer: list + edit, with the resolved display status
  of each record's order item
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from sampleman.models import SampleManufacturer
from sampleman.presentation import format_status
from sampleman.services.queries import SampleQueries


# =========================================================================
# SAMPLE MANUFACTURER ADMIN
# =========================================================================

@admin.register(SampleManufacturer)
class SampleManufacturerAdmin(admin.ModelAdmin):
    """SampleManufacturer admin: editable, display status read-only."""

    list_display = ['id', 'order_item_display', 'factory_ref', 'status',
                    'arrived_at_forwarder', 'sample_price', 'eta',
                    'display_status_display']
    list_filter = ['status', 'arrived_at_forwarder']
    search_fields = ['factory_ref', 'object_id']
    readonly_fields = ['display_status_display', 'created_at', 'updated_at']

    @admin.display(description=_('Order item'))
    def order_item_display(self, obj):
        return str(obj.order_item) if obj.order_item else '?'

    @admin.display(description=_('Display status'))
    def display_status_display(self, obj):
        if obj.order_item is None:
            return '-'
        return format_status(SampleQueries.display_status(obj.order_item))
