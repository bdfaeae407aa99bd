"""
Persistence for lending records.

No business rules live here: the engine decides what changes, the store
writes it. Terminal and status writes are compare-and-set updates keyed on
the state the engine observed, so a concurrent writer makes them report
failure instead of overwriting.
"""
from django.db.models import Count
from django.db.models.functions import ExtractMonth

from .exceptions import NotFound
from .models import LendingRecord
from .status import LendingStatus


class LendingRecordStore:
    """Query and update access to LendingRecord rows."""

    def _queryset(self):
        return LendingRecord.objects.select_related('book', 'reader', 'lent_by')

    def create(self, **fields):
        return LendingRecord.objects.create(**fields)

    def get(self, lending_id):
        try:
            return self._queryset().get(pk=lending_id)
        except (LendingRecord.DoesNotExist, ValueError):
            raise NotFound('lending record', lending_id)

    def get_for_update(self, lending_id):
        """Load a record and lock its row until the surrounding transaction ends."""
        try:
            return LendingRecord.objects.select_for_update().get(pk=lending_id)
        except (LendingRecord.DoesNotExist, ValueError):
            raise NotFound('lending record', lending_id)

    def find_all(self, status=None, reader_id=None, book_id=None,
                 due_before=None, due_after=None):
        """
        Filter lending records.

        Args:
            status: a single status or an iterable of statuses
            reader_id: only records of this reader
            book_id: only records of this book
            due_before: due_date strictly earlier than this datetime
            due_after: due_date strictly later than this datetime
        """
        queryset = self._queryset()
        if status is not None:
            if isinstance(status, str):
                queryset = queryset.filter(status=status)
            else:
                queryset = queryset.filter(status__in=list(status))
        if reader_id is not None:
            queryset = queryset.filter(reader_id=reader_id)
        if book_id is not None:
            queryset = queryset.filter(book_id=book_id)
        if due_before is not None:
            queryset = queryset.filter(due_date__lt=due_before)
        if due_after is not None:
            queryset = queryset.filter(due_date__gt=due_after)
        return queryset

    def mark_returned(self, record):
        """
        Persist a RETURNED transition.

        Returns:
            True if this call closed the record, False if it was already closed.
        """
        updated = LendingRecord.objects.filter(
            pk=record.pk,
            returned_at__isnull=True,
        ).update(
            status=record.status,
            returned_at=record.returned_at,
            updated_at=record.returned_at,
        )
        return bool(updated)

    def mark_overdue(self, record, now):
        """
        Persist an OVERDUE transition.

        Returns:
            True if the stored row was still BORROWED and got updated.
        """
        updated = LendingRecord.objects.filter(
            pk=record.pk,
            status=LendingStatus.BORROWED,
            returned_at__isnull=True,
        ).update(
            status=record.status,
            updated_at=now,
        )
        return bool(updated)

    def count(self, **filters):
        return self.find_all(**filters).count()

    def monthly_counts(self, year=None):
        """Number of lendings per calendar month of borrowed_at."""
        queryset = LendingRecord.objects.all()
        if year is not None:
            queryset = queryset.filter(borrowed_at__year=year)
        rows = (
            queryset
            .annotate(month=ExtractMonth('borrowed_at'))
            .values('month')
            .annotate(count=Count('id'))
            .order_by('month')
        )
        return [(row['month'], row['count']) for row in rows]
