"""
Copy-count bookkeeping for book titles.

Every mutation is a single conditional UPDATE so that concurrent lends and
returns never read a count in Python and write it back.
"""
import logging

from django.db.models import Case, F, PositiveIntegerField, Value, When
from django.db.models.functions import Least
from django.utils import timezone

from apps.lendings.exceptions import NotFound, OutOfStock

from .models import Book

logger = logging.getLogger(__name__)


class InventoryLedger:
    """Owns available/total copy counts per book title."""

    def reserve_copy(self, book_id):
        """
        Take one copy off the shelf.

        Raises:
            NotFound: the book does not exist.
            OutOfStock: no copy is available.

        Returns:
            The number of copies still available.
        """
        updated = Book.objects.filter(pk=book_id, available_copies__gt=0).update(
            available_copies=F('available_copies') - 1,
            updated_at=timezone.now(),
        )
        if not updated:
            if not Book.objects.filter(pk=book_id).exists():
                raise NotFound('book', book_id)
            raise OutOfStock(book_id)
        return self._available_copies(book_id)

    def release_copy(self, book_id):
        """
        Put one copy back on the shelf, never exceeding total_copies.

        Raises:
            NotFound: the book does not exist.

        Returns:
            The number of copies available after the release.
        """
        updated = Book.objects.filter(pk=book_id).update(
            available_copies=Case(
                When(available_copies__lt=F('total_copies'),
                     then=F('available_copies') + 1),
                default=F('total_copies'),
                output_field=PositiveIntegerField()
            ),
            updated_at=timezone.now(),
        )
        if not updated:
            raise NotFound('book', book_id)
        return self._available_copies(book_id)

    def set_total_copies(self, book_id, total_copies):
        """Change the number of owned copies, re-clamping available copies."""
        if total_copies < 0:
            raise ValueError('total_copies cannot be negative')

        updated = Book.objects.filter(pk=book_id).update(
            total_copies=total_copies,
            available_copies=Least(
                F('available_copies'), Value(total_copies),
                output_field=PositiveIntegerField()
            ),
            updated_at=timezone.now(),
        )
        if not updated:
            raise NotFound('book', book_id)

        book = Book.objects.get(pk=book_id)
        logger.info(
            f"Book {book_id} now has {book.total_copies} copies "
            f"({book.available_copies} available)"
        )
        return book

    def availability(self, book_id):
        """Return an (available_copies, total_copies) snapshot."""
        try:
            return Book.objects.values_list(
                'available_copies', 'total_copies'
            ).get(pk=book_id)
        except Book.DoesNotExist:
            raise NotFound('book', book_id)

    def _available_copies(self, book_id):
        return Book.objects.values_list('available_copies', flat=True).get(pk=book_id)
