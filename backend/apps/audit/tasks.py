"""
Celery tasks for the audit app.
"""
import logging

from celery import shared_task
from django.db import DatabaseError, transaction
from django.utils.dateparse import parse_datetime

from apps.audit.models import AuditEvent

logger = logging.getLogger(__name__)


@shared_task(ignore_result=True)
def write_audit_event(user_id, action, entity, entity_id, description, timestamp):
    """
    Persist one audit event.

    Runs outside the business transaction that triggered it; a failed write
    is logged and dropped.
    """
    try:
        with transaction.atomic():
            event = AuditEvent.objects.create(
                user_id=user_id,
                action=action,
                entity=entity,
                entity_id=entity_id,
                description=description,
                timestamp=parse_datetime(timestamp),
            )
    except DatabaseError:
        logger.exception(f"Failed to write audit event {action} {entity} {entity_id}")
        return None
    return event.pk
