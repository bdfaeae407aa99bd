"""
Views for the audit app.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from apps.accounts.permissions import IsLibrarian

from .models import AuditEvent
from .serializers import AuditEventSerializer


@extend_schema_view(
    list=extend_schema(
        summary='List audit events',
        description='Audit trail, most recent first (librarian only).',
        tags=['Audit']
    ),
    retrieve=extend_schema(
        summary='Get audit event',
        tags=['Audit']
    )
)
class AuditEventViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only access to the audit trail."""

    queryset = AuditEvent.objects.select_related('user').all()
    serializer_class = AuditEventSerializer
    permission_classes = [IsAuthenticated, IsLibrarian]
    filterset_fields = ['action', 'entity', 'entity_id', 'user']
    ordering_fields = ['timestamp']
    ordering = ['-timestamp']
