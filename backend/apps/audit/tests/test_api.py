"""
Tests for the audit API endpoints.
"""
import pytest
from django.urls import reverse
from rest_framework import status

from apps.audit.models import AuditEvent


@pytest.fixture
def events(db, librarian_user):
    AuditEvent.objects.create(user=librarian_user, action='LEND', entity='Lending Record', entity_id='1')
    AuditEvent.objects.create(action='UPDATE', entity='Lending Record', description='Sweep.')
    return AuditEvent.objects.all()


@pytest.mark.integration
class TestAuditAPI:
    """Test suite for the audit trail endpoints."""

    def test_librarian_lists_events(self, librarian_client, events):
        response = librarian_client.get(reverse('audit-event-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_filter_by_action(self, librarian_client, events):
        response = librarian_client.get(reverse('audit-event-list'), {'action': 'LEND'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['user_email'] == 'librarian@test.com'

    def test_assistant_is_forbidden(self, assistant_client, events):
        response = assistant_client.get(reverse('audit-event-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_events_are_read_only(self, librarian_client, events):
        event = events.first()

        response = librarian_client.delete(reverse('audit-event-detail', args=[event.pk]))

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert AuditEvent.objects.count() == 2
