"""
Audit trail for the library lending application.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class AuditEvent(models.Model):
    """
    Append-only record of something a user (or the system) did.
    Rows are written once and never updated or deleted.
    """

    class Action(models.TextChoices):
        CREATE = 'CREATE', _('Create')
        UPDATE = 'UPDATE', _('Update')
        DELETE = 'DELETE', _('Delete')
        LEND = 'LEND', _('Lend')
        RETURN = 'RETURN', _('Return')
        LOGIN = 'LOGIN', _('Login')
        LOGOUT = 'LOGOUT', _('Logout')
        RESET_PASSWORD = 'RESET_PASSWORD', _('Reset password')
        SEND_EMAIL = 'SEND_EMAIL', _('Send email')

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_events',
        help_text=_('User who performed the action; empty for system jobs')
    )
    action = models.CharField(
        max_length=20,
        choices=Action.choices,
        help_text=_('What was done')
    )
    entity = models.CharField(
        max_length=100,
        help_text=_('Type of the affected entity')
    )
    entity_id = models.CharField(
        max_length=64,
        blank=True,
        help_text=_('Identifier of the affected entity')
    )
    description = models.TextField(
        blank=True,
        help_text=_('Human readable summary')
    )
    timestamp = models.DateTimeField(
        default=timezone.now,
        help_text=_('When the action happened')
    )

    class Meta:
        db_table = 'audit_events'
        verbose_name = _('audit event')
        verbose_name_plural = _('audit events')
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['entity', 'entity_id'], name='audit_entity_idx'),
            models.Index(fields=['timestamp'], name='audit_timestamp_idx'),
        ]

    def __str__(self):
        return f"{self.action} {self.entity} {self.entity_id}".strip()

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise ValueError('Audit events are append-only and cannot be modified.')
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError('Audit events are append-only and cannot be deleted.')
