"""
Tests for the status rule.
"""
from datetime import datetime, timedelta, timezone

import pytest

from apps.lendings.status import LendingStatus, derive_status

DUE = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.mark.unit
class TestDeriveStatus:
    """Test suite for derive_status."""

    def test_open_before_due_date_is_borrowed(self):
        assert derive_status(None, DUE, DUE - timedelta(days=1)) == LendingStatus.BORROWED

    def test_open_at_due_date_is_still_borrowed(self):
        assert derive_status(None, DUE, DUE) == LendingStatus.BORROWED

    def test_open_after_due_date_is_overdue(self):
        assert derive_status(None, DUE, DUE + timedelta(seconds=1)) == LendingStatus.OVERDUE

    @pytest.mark.parametrize('now', [DUE - timedelta(days=3), DUE + timedelta(days=3)])
    def test_returned_wins_over_dates(self, now):
        returned_at = DUE - timedelta(days=5)
        assert derive_status(returned_at, DUE, now) == LendingStatus.RETURNED
