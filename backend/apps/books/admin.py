"""
Admin configuration for books app.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .ledger import InventoryLedger
from .models import Book, Category

INVENTORY_FIELDS = ('total_copies', 'available_copies')


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    """
    Catalogue editing. Available copies belong to the lending engine, so
    they are read-only here and a change of total copies goes through the
    inventory ledger.
    """

    list_display = ['title', 'author', 'isbn', 'category', 'total_copies', 'available_copies']
    list_filter = ['category']
    search_fields = ['title', 'author', 'isbn']
    ordering = ['title']

    fieldsets = (
        (_('Book Information'), {
            'fields': ('title', 'author', 'isbn', 'category')
        }),
        (_('Inventory'), {
            'fields': ('total_copies', 'available_copies', 'borrowed_count')
        }),
        (_('Metadata'), {
            'fields': ('created_at', 'updated_at')
        }),
    )

    ledger_class = InventoryLedger

    def get_readonly_fields(self, request, obj=None):
        readonly = ['created_at', 'updated_at', 'borrowed_count']
        if obj is not None:
            readonly.append('available_copies')
        return readonly

    def save_model(self, request, obj, form, change):
        if not change:
            super().save_model(request, obj, form, change)
            return

        # Copy counts are never written from the form instance; a lend or
        # return may have committed since the page was loaded.
        edited = [name for name in form.changed_data if name not in INVENTORY_FIELDS]
        if edited:
            Book.objects.filter(pk=obj.pk).update(
                updated_at=timezone.now(),
                **{name: getattr(obj, name) for name in edited}
            )
        if 'total_copies' in form.changed_data:
            self.ledger_class().set_total_copies(obj.pk, obj.total_copies)
        obj.refresh_from_db(fields=[*INVENTORY_FIELDS, 'updated_at'])

    @admin.display(description=_('Borrowed Count'))
    def borrowed_count(self, obj):
        return obj.borrowed_count
