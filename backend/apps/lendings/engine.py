"""
Lending lifecycle: lend, return and the overdue sweep.

Every mutation runs in one database transaction, so a failure anywhere
leaves copy counts and lending records as they were. Audit events are
queued with transaction.on_commit, so a caller that wraps an operation in
its own transaction only emits them if that transaction commits.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.db import DatabaseError, transaction
from django_fsm import TransitionNotAllowed

from apps.audit.models import AuditEvent
from apps.audit.recorder import AuditRecorder
from apps.books.ledger import InventoryLedger
from apps.books.models import Book
from apps.readers.models import Reader

from .clock import SystemClock
from .exceptions import (
    AlreadyReturned,
    InvalidLoanPeriod,
    NotFound,
    PersistenceFailure,
)
from .status import OPEN_STATUSES, LendingStatus, derive_status
from .store import LendingRecordStore

logger = logging.getLogger(__name__)

ENTITY = 'Lending Record'

POLICY_REJECT = 'reject'
POLICY_CLAMP = 'clamp'


class LendingEngine:
    """
    Applies the lending state machine on top of the inventory ledger and
    the lending record store.

    Collaborators default to the real implementations; tests pass fakes,
    most importantly a clock with a controllable ``now()``.
    """

    def __init__(self, clock=None, ledger=None, store=None, audit=None,
                 default_loan_days=None, loan_period_policy=None, max_loan_days=None):
        self.clock = clock or SystemClock()
        self.ledger = ledger or InventoryLedger()
        self.store = store or LendingRecordStore()
        self.audit = audit or AuditRecorder()
        self.default_loan_days = (
            default_loan_days if default_loan_days is not None
            else settings.LENDING_DEFAULT_LOAN_DAYS
        )
        self.loan_period_policy = loan_period_policy or settings.LENDING_LOAN_PERIOD_POLICY
        self.max_loan_days = (
            max_loan_days if max_loan_days is not None
            else settings.LENDING_MAX_LOAN_DAYS
        )
        if self.loan_period_policy not in (POLICY_REJECT, POLICY_CLAMP):
            raise ValueError(f"Unknown loan period policy {self.loan_period_policy!r}")

    def resolve_loan_days(self, loan_days):
        """Validate a requested loan period according to the configured policy."""
        if loan_days is None:
            loan_days = self.default_loan_days
        if isinstance(loan_days, bool) or not isinstance(loan_days, int):
            raise InvalidLoanPeriod(loan_days, 'must be a whole number of days')

        if self.loan_period_policy == POLICY_CLAMP:
            return min(max(loan_days, 1), self.max_loan_days)

        if loan_days <= 0:
            raise InvalidLoanPeriod(loan_days)
        if loan_days > self.max_loan_days:
            raise InvalidLoanPeriod(
                loan_days, f'cannot exceed {self.max_loan_days} days'
            )
        return loan_days

    def _audit_on_commit(self, *args, **kwargs):
        """Record an audit event once the outermost transaction commits."""
        transaction.on_commit(lambda: self.audit.record(*args, **kwargs))

    def lend(self, book_id, reader_id, loan_days=None, acting_user_id=None):
        """
        Lend one copy of a book to a reader.

        Raises:
            InvalidLoanPeriod: loan_days rejected by the policy.
            NotFound: the book or the reader does not exist.
            OutOfStock: no copy is available.
            PersistenceFailure: the database rejected the change.
        """
        loan_days = self.resolve_loan_days(loan_days)

        try:
            book = Book.objects.get(pk=book_id)
        except (Book.DoesNotExist, ValueError):
            raise NotFound('book', book_id)
        try:
            reader = Reader.objects.get(pk=reader_id)
        except (Reader.DoesNotExist, ValueError):
            raise NotFound('reader', reader_id)

        now = self.clock.now()
        due_date = now + timedelta(days=loan_days)

        try:
            # The reservation and the record commit together or not at all.
            with transaction.atomic():
                remaining = self.ledger.reserve_copy(book.pk)
                record = self.store.create(
                    book=book,
                    reader=reader,
                    lent_by_id=acting_user_id,
                    borrowed_at=now,
                    due_date=due_date,
                    status=derive_status(None, due_date, now),
                )
        except DatabaseError as exc:
            logger.exception(f"Lending book {book.pk} to reader {reader.pk} failed")
            raise PersistenceFailure() from exc

        record = self.store.get(record.pk)
        logger.info(
            f"Lent book {book.pk} to reader {reader.pk} as lending {record.pk} "
            f"until {due_date.isoformat()} ({remaining} copies left)"
        )
        self._audit_on_commit(
            acting_user_id,
            AuditEvent.Action.LEND,
            ENTITY,
            record.pk,
            f'Lent book "{book.title}" to reader "{reader.name}" for {loan_days} days.',
            timestamp=now,
        )
        return record

    def return_book(self, lending_id, acting_user_id=None):
        """
        Close a lending record and put the copy back on the shelf.

        Raises:
            NotFound: the lending record (or its book) does not exist.
            AlreadyReturned: the record was closed before.
            PersistenceFailure: the database rejected the change.
        """
        now = self.clock.now()

        try:
            with transaction.atomic():
                record = self.store.get_for_update(lending_id)
                try:
                    record.mark_returned(now)
                except TransitionNotAllowed:
                    raise AlreadyReturned(lending_id)
                if not self.store.mark_returned(record):
                    # Another return won the race after our read.
                    raise AlreadyReturned(lending_id)
                available = self.ledger.release_copy(record.book_id)
        except DatabaseError as exc:
            logger.exception(f"Returning lending {lending_id} failed")
            raise PersistenceFailure() from exc

        record = self.store.get(record.pk)
        logger.info(
            f"Lending {record.pk} returned; book {record.book_id} "
            f"has {available} copies available"
        )
        self._audit_on_commit(
            acting_user_id,
            AuditEvent.Action.RETURN,
            ENTITY,
            record.pk,
            f'Returned book "{record.book.title}" from reader "{record.reader.name}".',
            timestamp=now,
        )
        return record

    def find_overdue(self, now=None):
        """Open records past their due date. Read-only."""
        now = now or self.clock.now()
        return self.store.find_all(status=OPEN_STATUSES, due_before=now).filter(
            returned_at__isnull=True
        ).order_by('due_date', 'pk')

    def sweep_overdue(self, acting_user_id=None):
        """
        Flip every BORROWED record past its due date to OVERDUE.

        Returns the full overdue set, including records that were already
        OVERDUE before this call. Running it twice at the same instant
        returns the same set and transitions nothing the second time.
        """
        now = self.clock.now()
        overdue = list(self.find_overdue(now))

        transitioned = []
        try:
            with transaction.atomic():
                for record in overdue:
                    if record.status != LendingStatus.BORROWED:
                        continue
                    try:
                        record.mark_overdue()
                    except TransitionNotAllowed:
                        continue
                    if self.store.mark_overdue(record, now):
                        transitioned.append(record.pk)
        except DatabaseError as exc:
            logger.exception('Overdue sweep failed')
            raise PersistenceFailure() from exc

        # A record returned concurrently drops out of the overdue set.
        result = list(self.find_overdue(now))

        if transitioned:
            logger.info(
                f"Marked {len(transitioned)} lending(s) as overdue; "
                f"{len(result)} overdue in total"
            )
            self._audit_on_commit(
                acting_user_id,
                AuditEvent.Action.UPDATE,
                ENTITY,
                None,
                f'Marked {len(transitioned)} lending record(s) as overdue: '
                + ', '.join(f'#{pk}' for pk in transitioned),
                timestamp=now,
            )
        return result

    def list_overdue(self):
        """
        Overdue lendings for callers.

        This read has a side effect: it runs sweep_overdue(), so stored
        statuses of BORROWED records past their due date become OVERDUE.
        Use find_overdue() for a read without writes.
        """
        return self.sweep_overdue()

    def get_lending(self, lending_id):
        return self.store.get(lending_id)

    def list_lendings(self, **filters):
        return self.store.find_all(**filters)

    def stats(self):
        """Dashboard counters; overdue is computed from due dates, not stored status."""
        now = self.clock.now()
        return {
            'total': self.store.count(),
            'active': self.store.count(status=OPEN_STATUSES),
            'overdue': self.find_overdue(now).count(),
            'returned': self.store.count(status=LendingStatus.RETURNED),
        }

    def monthly_lendings(self, year=None):
        return [
            {'month': month, 'count': count}
            for month, count in self.store.monthly_counts(year=year)
        ]
