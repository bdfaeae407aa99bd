"""
Tests for the periodic sweep task and the sweep_overdue management command.
"""
from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from apps.lendings.models import LendingRecord
from apps.lendings.tasks import sweep_overdue_lendings


@pytest.fixture
def past_due(engine, book, reader):
    record = engine.lend(book.id, reader.id, loan_days=1)
    LendingRecord.objects.filter(pk=record.pk).update(
        borrowed_at=timezone.now() - timedelta(days=3),
        due_date=timezone.now() - timedelta(days=2),
    )
    return record


@pytest.mark.unit
class TestSweepTask:

    def test_task_marks_overdue(self, past_due):
        result = sweep_overdue_lendings.delay()

        assert result.get() == '1 lending(s) overdue'
        past_due.refresh_from_db()
        assert past_due.status == LendingRecord.Status.OVERDUE


@pytest.mark.unit
class TestSweepCommand:

    def test_dry_run_changes_nothing(self, past_due):
        out = StringIO()

        call_command('sweep_overdue', '--dry-run', stdout=out)

        assert f'Would mark lending #{past_due.pk} as OVERDUE' in out.getvalue()
        past_due.refresh_from_db()
        assert past_due.status == LendingRecord.Status.BORROWED

    def test_command_marks_overdue(self, past_due):
        out = StringIO()

        call_command('sweep_overdue', stdout=out)

        assert f'Marked lending #{past_due.pk} as OVERDUE' in out.getvalue()
        assert 'Newly marked as overdue: 1' in out.getvalue()
        past_due.refresh_from_db()
        assert past_due.status == LendingRecord.Status.OVERDUE

    def test_command_with_nothing_to_do(self, db):
        out = StringIO()

        call_command('sweep_overdue', stdout=out)

        assert 'Total overdue lendings: 0' in out.getvalue()
