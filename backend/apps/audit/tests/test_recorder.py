"""
Tests for the audit recorder and the audit write task.
"""
from datetime import datetime, timezone as dt_timezone
from unittest import mock

import pytest
from django.db import OperationalError

from apps.audit.models import AuditEvent
from apps.audit.recorder import AuditRecorder
from apps.audit.tasks import write_audit_event

WHEN = datetime(2026, 3, 2, 9, 0, tzinfo=dt_timezone.utc)


@pytest.mark.unit
class TestAuditRecorder:
    """Test suite for AuditRecorder."""

    def test_record_builds_payload(self):
        sent = []
        recorder = AuditRecorder(dispatch=sent.append)

        assert recorder.record(7, AuditEvent.Action.LEND, 'Lending Record', 12,
                               'Lent a book.', timestamp=WHEN)
        assert sent == [{
            'user_id': 7,
            'action': 'LEND',
            'entity': 'Lending Record',
            'entity_id': '12',
            'description': 'Lent a book.',
            'timestamp': WHEN.isoformat(),
        }]

    def test_missing_entity_id_becomes_blank(self):
        sent = []
        AuditRecorder(dispatch=sent.append).record(None, 'UPDATE', 'Lending Record', None)

        assert sent[0]['entity_id'] == ''
        assert sent[0]['user_id'] is None

    def test_unknown_action_is_dropped(self, caplog):
        sent = []
        recorder = AuditRecorder(dispatch=sent.append)

        assert recorder.record(1, 'BORROW', 'Lending Record', 1) is False
        assert sent == []
        assert 'unknown action' in caplog.text

    def test_dispatch_failure_is_swallowed_and_logged(self, caplog):
        def broken(payload):
            raise ConnectionError('broker unreachable')

        recorder = AuditRecorder(dispatch=broken)

        assert recorder.record(1, 'RETURN', 'Lending Record', 3) is False
        assert 'Audit dispatch failed for RETURN Lending Record 3' in caplog.text

    def test_default_dispatch_writes_row(self, librarian_user):
        """With eager Celery the default dispatcher writes synchronously."""
        recorder = AuditRecorder()

        assert recorder.record(librarian_user.id, 'LEND', 'Lending Record', 5,
                               'Lent a book.', timestamp=WHEN)

        event = AuditEvent.objects.get()
        assert event.user == librarian_user
        assert event.action == AuditEvent.Action.LEND
        assert event.entity_id == '5'
        assert event.timestamp == WHEN


@pytest.mark.unit
class TestWriteAuditEventTask:
    """Test suite for the write_audit_event task."""

    def test_writes_event(self, db):
        pk = write_audit_event(None, 'UPDATE', 'Lending Record', '', 'Sweep.', WHEN.isoformat())

        event = AuditEvent.objects.get(pk=pk)
        assert event.user is None
        assert event.description == 'Sweep.'

    def test_database_failure_returns_none(self, db, caplog):
        with mock.patch.object(
            AuditEvent.objects, 'create', side_effect=OperationalError('database is locked')
        ):
            result = write_audit_event(None, 'LEND', 'Lending Record', '1', '', WHEN.isoformat())

        assert result is None
        assert 'Failed to write audit event LEND Lending Record 1' in caplog.text
        assert not AuditEvent.objects.exists()


@pytest.mark.unit
class TestAuditEventModel:
    """Audit rows are append-only."""

    def test_cannot_modify(self, db):
        event = AuditEvent.objects.create(action='LEND', entity='Lending Record', entity_id='1')
        event.description = 'changed'

        with pytest.raises(ValueError):
            event.save()

    def test_cannot_delete(self, db):
        event = AuditEvent.objects.create(action='LEND', entity='Lending Record', entity_id='1')

        with pytest.raises(ValueError):
            event.delete()
        assert AuditEvent.objects.filter(pk=event.pk).exists()

    def test_str(self, db):
        event = AuditEvent.objects.create(action='UPDATE', entity='Lending Record')

        assert str(event) == 'UPDATE Lending Record'
