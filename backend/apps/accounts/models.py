"""
Staff accounts for the library lending application.
"""
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    """Email-keyed manager; staff sign in with their work address."""

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('Staff accounts need an email address')
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', User.Role.ASSISTANT)
        return self._create_user(email, password, **extra_fields)

    def create_librarian(self, email, password=None, **extra_fields):
        """Staff member allowed to lend and take back books."""
        extra_fields['role'] = User.Role.LIBRARIAN
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        if not (extra_fields['is_staff'] and extra_fields['is_superuser']):
            raise ValueError('Superusers need is_staff and is_superuser set')
        return self.create_librarian(email, password, **extra_fields)

    def librarians(self):
        return self.filter(role=User.Role.LIBRARIAN, is_active=True)


class User(AbstractUser):
    """
    Staff member operating the library dashboard.
    Librarians lend and take back books; assistants have read access.
    Every audit event points at the user who triggered it.
    """

    class Role(models.TextChoices):
        LIBRARIAN = 'librarian', _('Librarian')
        ASSISTANT = 'assistant', _('Assistant')

    username = None
    email = models.EmailField(_('email address'), unique=True)

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.ASSISTANT,
        help_text=_('User role in the system')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    objects = UserManager()

    class Meta:
        db_table = 'users'
        verbose_name = _('user')
        verbose_name_plural = _('users')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name} <{self.email}>"

    @property
    def is_librarian(self):
        return self.role == self.Role.LIBRARIAN

    @property
    def can_lend(self):
        """Whether this account may lend and take back books."""
        return self.is_active and self.is_librarian

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip() or self.email
