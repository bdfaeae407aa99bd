"""
Best-effort audit trail writer.

The business mutation is the source of truth: recording an event never
raises into the caller, and a failure here never undoes the operation that
triggered it.
"""
import logging

from django.utils import timezone

from .models import AuditEvent
from .tasks import write_audit_event

logger = logging.getLogger(__name__)


def dispatch_async(payload):
    """Hand the event to a Celery worker."""
    write_audit_event.delay(**payload)


class AuditRecorder:
    """Emits AuditEvent rows through a pluggable dispatcher."""

    def __init__(self, dispatch=None):
        self.dispatch = dispatch or dispatch_async

    def record(self, acting_user_id, action, entity_type, entity_id,
               description='', timestamp=None):
        """
        Queue one audit event.

        Returns:
            True if the event was handed to the dispatcher, False otherwise.
        """
        if action not in AuditEvent.Action.values:
            logger.warning(f"Dropping audit event with unknown action {action!r}")
            return False

        payload = {
            'user_id': acting_user_id,
            'action': str(action),
            'entity': entity_type,
            'entity_id': '' if entity_id is None else str(entity_id),
            'description': description,
            'timestamp': (timestamp or timezone.now()).isoformat(),
        }
        try:
            self.dispatch(payload)
        except Exception:
            logger.exception(
                f"Audit dispatch failed for {payload['action']} "
                f"{entity_type} {payload['entity_id']}"
            )
            return False
        return True
