"""
Filters for the lendings app.
"""
import django_filters

from .models import LendingRecord


class LendingRecordFilter(django_filters.FilterSet):
    """Filter lending records by status, reader, book and due-date range."""

    status = django_filters.MultipleChoiceFilter(choices=LendingRecord.Status.choices)
    due_after = django_filters.IsoDateTimeFilter(field_name='due_date', lookup_expr='gt')
    due_before = django_filters.IsoDateTimeFilter(field_name='due_date', lookup_expr='lt')

    class Meta:
        model = LendingRecord
        fields = ['status', 'reader', 'book', 'due_after', 'due_before']
