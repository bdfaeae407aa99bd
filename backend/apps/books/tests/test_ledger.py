"""
Tests for the inventory ledger.
"""
import pytest

from apps.books.ledger import InventoryLedger
from apps.books.models import Book
from apps.lendings.exceptions import NotFound, OutOfStock


@pytest.fixture
def ledger():
    return InventoryLedger()


@pytest.mark.unit
class TestReserveCopy:
    """Test suite for InventoryLedger.reserve_copy."""

    def test_reserve_decrements(self, ledger, book):
        assert ledger.reserve_copy(book.id) == 4
        book.refresh_from_db()
        assert book.available_copies == 4
        assert book.total_copies == 5

    def test_reserve_last_copy(self, ledger, single_copy_book):
        assert ledger.reserve_copy(single_copy_book.id) == 0

    def test_reserve_out_of_stock(self, ledger, unavailable_book):
        with pytest.raises(OutOfStock):
            ledger.reserve_copy(unavailable_book.id)

        unavailable_book.refresh_from_db()
        assert unavailable_book.available_copies == 0

    def test_reserve_missing_book(self, ledger, db):
        with pytest.raises(NotFound) as excinfo:
            ledger.reserve_copy(999999)

        assert excinfo.value.entity == 'book'

    def test_stale_copy_count_cannot_oversell(self, ledger, single_copy_book):
        """A caller holding an outdated count still cannot take a missing copy."""
        stale = Book.objects.get(pk=single_copy_book.pk)
        assert stale.available_copies == 1

        ledger.reserve_copy(single_copy_book.id)

        with pytest.raises(OutOfStock):
            ledger.reserve_copy(stale.id)
        single_copy_book.refresh_from_db()
        assert single_copy_book.available_copies == 0


@pytest.mark.unit
class TestReleaseCopy:
    """Test suite for InventoryLedger.release_copy."""

    def test_release_increments(self, ledger, unavailable_book):
        assert ledger.release_copy(unavailable_book.id) == 1

    def test_release_is_clamped_to_total(self, ledger, book):
        assert ledger.release_copy(book.id) == 5
        book.refresh_from_db()
        assert book.available_copies == book.total_copies

    def test_release_missing_book(self, ledger, db):
        with pytest.raises(NotFound):
            ledger.release_copy(999999)


@pytest.mark.unit
class TestSetTotalCopies:
    """Test suite for InventoryLedger.set_total_copies."""

    def test_shrinking_total_reclamps_available(self, ledger, book):
        updated = ledger.set_total_copies(book.id, 3)

        assert updated.total_copies == 3
        assert updated.available_copies == 3

    def test_shrinking_total_above_available_keeps_available(self, ledger, book):
        ledger.reserve_copy(book.id)
        ledger.reserve_copy(book.id)

        updated = ledger.set_total_copies(book.id, 4)

        assert updated.total_copies == 4
        assert updated.available_copies == 3

    def test_growing_total_keeps_available(self, ledger, book):
        updated = ledger.set_total_copies(book.id, 8)

        assert updated.total_copies == 8
        assert updated.available_copies == 5

    def test_negative_total_rejected(self, ledger, book):
        with pytest.raises(ValueError):
            ledger.set_total_copies(book.id, -1)

    def test_missing_book(self, ledger, db):
        with pytest.raises(NotFound):
            ledger.set_total_copies(999999, 2)

    def test_release_after_shrink_stays_within_total(self, ledger, book):
        ledger.reserve_copy(book.id)
        ledger.set_total_copies(book.id, 2)

        assert ledger.release_copy(book.id) == 2
        assert ledger.availability(book.id) == (2, 2)


@pytest.mark.unit
class TestAvailability:

    def test_availability_snapshot(self, ledger, book):
        assert ledger.availability(book.id) == (5, 5)

    def test_availability_missing_book(self, ledger, db):
        with pytest.raises(NotFound):
            ledger.availability(999999)
