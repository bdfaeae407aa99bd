"""
Reader model for the library lending application.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _


class Reader(models.Model):
    """Library member who can borrow books."""

    name = models.CharField(
        max_length=255,
        help_text=_('Full name of the reader')
    )
    email = models.EmailField(
        unique=True,
        help_text=_('Contact email of the reader')
    )
    phone = models.CharField(
        max_length=30,
        blank=True,
        help_text=_('Contact phone number')
    )
    address = models.TextField(
        blank=True,
        help_text=_('Postal address')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'readers'
        verbose_name = _('reader')
        verbose_name_plural = _('readers')
        ordering = ['name']

    def __str__(self):
        return f"{self.name} <{self.email}>"
