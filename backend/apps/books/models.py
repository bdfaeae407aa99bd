"""
Book and category models for the library lending application.
"""
from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Category(models.Model):
    """Shelf category a book title belongs to."""

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text=_('Name of the category')
    )
    description = models.TextField(
        blank=True,
        help_text=_('Description of the category')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        verbose_name = _('category')
        verbose_name_plural = _('categories')
        ordering = ['name']

    def __str__(self):
        return self.name


class Book(models.Model):
    """
    Book title in the library.
    Copies are fungible: only the total and the number on the shelf are tracked.
    """

    isbn = models.CharField(
        max_length=20,
        unique=True,
        validators=[MinLengthValidator(10)],
        help_text=_('ISBN code for the book')
    )
    title = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(2)],
        help_text=_('Title of the book')
    )
    author = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(2)],
        help_text=_('Author of the book')
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='books',
        help_text=_('Category of the book')
    )
    total_copies = models.PositiveIntegerField(
        default=1,
        help_text=_('Total number of copies owned by the library')
    )
    available_copies = models.PositiveIntegerField(
        default=1,
        help_text=_('Copies currently on the shelf and available for lending')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'books'
        verbose_name = _('book')
        verbose_name_plural = _('books')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['title'], name='books_title_idx'),
            models.Index(fields=['author'], name='books_author_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_copies__lte=models.F('total_copies')),
                name='available_copies_within_total',
            ),
        ]

    def __str__(self):
        return f"{self.title} by {self.author}"

    def clean(self):
        """Validate that available_copies doesn't exceed total_copies."""
        if self.available_copies > self.total_copies:
            raise ValidationError(
                _('Available copies cannot exceed total copies.')
            )

    def save(self, *args, **kwargs):
        """Override save to run clean validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def is_available(self):
        """Check if the book has available copies."""
        return self.available_copies > 0

    @property
    def borrowed_count(self):
        """Calculate how many copies are currently lent out."""
        return self.total_copies - self.available_copies
