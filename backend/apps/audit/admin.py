"""
Admin configuration for audit app.
"""
from django.contrib import admin

from .models import AuditEvent


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    """Read-only admin for the append-only audit trail."""

    list_display = ['timestamp', 'action', 'entity', 'entity_id', 'user']
    list_filter = ['action', 'entity']
    search_fields = ['description', 'entity_id', 'user__email']
    ordering = ['-timestamp']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
