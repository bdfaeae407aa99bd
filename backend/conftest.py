"""
Pytest configuration and fixtures for the library lending project.
"""
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest

from apps.accounts.models import User
from apps.audit.recorder import AuditRecorder
from apps.books.models import Book, Category
from apps.lendings.engine import LendingEngine
from apps.readers.models import Reader


class FakeClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, now):
        self._now = now

    def now(self):
        return self._now

    def advance(self, **kwargs):
        self._now += timedelta(**kwargs)
        return self._now


@pytest.fixture
def librarian_user(db):
    """Create a librarian user for testing."""
    return User.objects.create_librarian(
        email='librarian@test.com',
        password='testpass123',
        first_name='John',
        last_name='Doe'
    )


@pytest.fixture
def assistant_user(db):
    """Create an assistant user for testing."""
    return User.objects.create_user(
        email='assistant@test.com',
        password='testpass123',
        first_name='Jane',
        last_name='Smith',
        role=User.Role.ASSISTANT
    )


@pytest.fixture
def category(db):
    """Create a category for testing."""
    return Category.objects.create(name='Fiction', description='Novels and short stories')


@pytest.fixture
def book(db, category):
    """Create a book with five copies on the shelf."""
    return Book.objects.create(
        title='Test Book',
        author='Test Author',
        isbn='9781234567897',
        category=category,
        total_copies=5,
        available_copies=5
    )


@pytest.fixture
def two_copy_book(db, category):
    """Create a book with two copies on the shelf."""
    return Book.objects.create(
        title='Two Copies',
        author='Test Author',
        isbn='9780000000002',
        category=category,
        total_copies=2,
        available_copies=2
    )


@pytest.fixture
def single_copy_book(db, category):
    """Create a book with exactly one copy on the shelf."""
    return Book.objects.create(
        title='Single Copy',
        author='Test Author',
        isbn='9780000000001',
        category=category,
        total_copies=1,
        available_copies=1
    )


@pytest.fixture
def unavailable_book(db, category):
    """Create a book with no available copies."""
    return Book.objects.create(
        title='Unavailable Book',
        author='Test Author',
        isbn='9780000000000',
        category=category,
        total_copies=1,
        available_copies=0
    )


@pytest.fixture
def reader(db):
    """Create a reader for testing."""
    return Reader.objects.create(
        name='Ada Reader',
        email='ada@readers.test',
        phone='555-0100',
        address='1 Library Lane'
    )


@pytest.fixture
def another_reader(db):
    """Create another reader for testing."""
    return Reader.objects.create(
        name='Bob Reader',
        email='bob@readers.test'
    )


@pytest.fixture
def clock():
    """Controllable clock starting at a fixed instant."""
    return FakeClock(datetime(2026, 3, 2, 9, 0, tzinfo=dt_timezone.utc))


@pytest.fixture
def audit_events():
    """Audit payloads captured instead of being dispatched to Celery."""
    return []


@pytest.fixture
def engine(db, clock, audit_events):
    """Lending engine with a fake clock and a capturing audit sink."""
    return LendingEngine(
        clock=clock,
        audit=AuditRecorder(dispatch=audit_events.append),
    )


@pytest.fixture
def lending(engine, book, reader, librarian_user, django_capture_on_commit_callbacks):
    """Create an open lending record due in two days, with its LEND event delivered."""
    with django_capture_on_commit_callbacks(execute=True):
        return engine.lend(book.id, reader.id, loan_days=2, acting_user_id=librarian_user.id)


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def librarian_client(api_client, librarian_user):
    """Create an authenticated API client for a librarian."""
    api_client.force_authenticate(user=librarian_user)
    return api_client


@pytest.fixture
def assistant_client(api_client, assistant_user):
    """Create an authenticated API client for an assistant."""
    api_client.force_authenticate(user=assistant_user)
    return api_client
