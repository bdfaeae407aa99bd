"""
Tests for staff accounts.
"""
import pytest

from apps.accounts.models import User


@pytest.mark.unit
class TestUserManager:
    """Test suite for UserManager."""

    def test_create_user_defaults_to_assistant(self, db):
        user = User.objects.create_user(
            email='Desk@Library.TEST',
            password='testpass123',
            first_name='Desk',
            last_name='Assistant'
        )

        assert user.email == 'Desk@library.test'
        assert user.role == User.Role.ASSISTANT
        assert user.check_password('testpass123')
        assert not user.can_lend

    def test_create_librarian(self, db):
        user = User.objects.create_librarian(email='head@library.test', password='testpass123')

        assert user.is_librarian
        assert user.can_lend

    def test_email_is_required(self, db):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='testpass123')

    def test_superuser_is_a_librarian(self, db):
        user = User.objects.create_superuser(email='root@library.test', password='testpass123')

        assert user.is_staff
        assert user.is_superuser
        assert user.is_librarian

    def test_superuser_flags_are_enforced(self, db):
        with pytest.raises(ValueError):
            User.objects.create_superuser(
                email='root@library.test', password='testpass123', is_staff=False
            )

    def test_librarians_excludes_inactive_and_assistants(self, librarian_user, assistant_user):
        User.objects.create_librarian(email='gone@library.test', is_active=False)

        assert list(User.objects.librarians()) == [librarian_user]


@pytest.mark.unit
class TestUserModel:
    """Test suite for User model."""

    def test_inactive_librarian_cannot_lend(self, librarian_user):
        librarian_user.is_active = False

        assert librarian_user.is_librarian
        assert not librarian_user.can_lend

    def test_str(self, librarian_user):
        assert str(librarian_user) == 'John Doe <librarian@test.com>'

    def test_full_name_falls_back_to_email(self, db):
        user = User.objects.create_user(email='noname@library.test', password='testpass123')

        assert user.full_name == 'noname@library.test'
