"""
Lending record model for the library lending application.
"""
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField, transition

from apps.books.models import Book
from apps.readers.models import Reader

from .status import OPEN_STATUSES, LendingStatus, derive_status


class LendingRecord(models.Model):
    """
    One loan of a book copy to a reader.

    Status moves BORROWED -> OVERDUE -> RETURNED or straight from
    BORROWED to RETURNED. RETURNED is terminal. Transitions only change
    the in-memory instance; LendingRecordStore persists them.
    """

    Status = LendingStatus

    book = models.ForeignKey(
        Book,
        on_delete=models.PROTECT,
        related_name='lendings',
        help_text=_('Book being lent')
    )
    reader = models.ForeignKey(
        Reader,
        on_delete=models.PROTECT,
        related_name='lendings',
        help_text=_('Reader who borrowed the book')
    )
    lent_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='lendings',
        help_text=_('Staff member who issued the loan')
    )
    borrowed_at = models.DateTimeField(
        help_text=_('When the book was borrowed')
    )
    due_date = models.DateTimeField(
        help_text=_('When the book should be returned')
    )
    returned_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_('When the book was returned')
    )
    status = FSMField(
        max_length=20,
        choices=LendingStatus.choices,
        default=LendingStatus.BORROWED,
        help_text=_('Current status of the lending record')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lending_records'
        verbose_name = _('lending record')
        verbose_name_plural = _('lending records')
        ordering = ['-borrowed_at']
        indexes = [
            models.Index(fields=['reader', 'status'], name='lending_reader_status_idx'),
            models.Index(fields=['book', 'status'], name='lending_book_status_idx'),
            models.Index(fields=['due_date'], name='lending_due_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(status=LendingStatus.RETURNED, returned_at__isnull=False) |
                    models.Q(status__in=OPEN_STATUSES, returned_at__isnull=True)
                ),
                name='returned_status_matches_returned_at',
            ),
        ]

    def __str__(self):
        return f"Lending #{self.id}: {self.book.title} to {self.reader.name}"

    def status_at(self, now):
        """Status the record should have at the given time."""
        return derive_status(self.returned_at, self.due_date, now)

    @transition(field=status, source=LendingStatus.BORROWED, target=LendingStatus.OVERDUE,
                custom={'description': 'Mark lending as overdue once the due date has passed'})
    def mark_overdue(self):
        """Mark lending as overdue."""

    @transition(field=status, source=list(OPEN_STATUSES), target=LendingStatus.RETURNED,
                custom={'description': 'Close the lending when the book comes back'})
    def mark_returned(self, when):
        """Mark lending as returned at the given time."""
        self.returned_at = when
