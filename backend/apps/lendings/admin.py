"""
Admin configuration for lendings app.
"""
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import LendingRecord


@admin.register(LendingRecord)
class LendingRecordAdmin(admin.ModelAdmin):
    """
    Read-only admin for lending records.
    Lending and returning go through LendingEngine so copy counts stay in step.
    """

    list_display = ['id', 'book', 'reader', 'borrowed_at', 'due_date', 'returned_at', 'status']
    list_filter = ['status', 'borrowed_at', 'due_date']
    search_fields = ['book__title', 'book__isbn', 'reader__name', 'reader__email']
    ordering = ['-borrowed_at']

    fieldsets = (
        (_('Lending Details'), {
            'fields': ('book', 'reader', 'lent_by', 'status')
        }),
        (_('Timing'), {
            'fields': ('borrowed_at', 'due_date', 'returned_at')
        }),
        (_('Metadata'), {
            'fields': ('created_at', 'updated_at')
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
