"""
Serializers for the audit app.
"""
from rest_framework import serializers

from .models import AuditEvent


class AuditEventSerializer(serializers.ModelSerializer):
    """Serializer for AuditEvent model."""

    user_email = serializers.EmailField(source='user.email', read_only=True)
    user_name = serializers.CharField(source='user.full_name', read_only=True)

    class Meta:
        model = AuditEvent
        fields = [
            'id', 'user', 'user_email', 'user_name', 'action',
            'entity', 'entity_id', 'description', 'timestamp'
        ]
        read_only_fields = fields
