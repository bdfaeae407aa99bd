import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AuditEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(choices=[('CREATE', 'Create'), ('UPDATE', 'Update'), ('DELETE', 'Delete'), ('LEND', 'Lend'), ('RETURN', 'Return'), ('LOGIN', 'Login'), ('LOGOUT', 'Logout'), ('RESET_PASSWORD', 'Reset password'), ('SEND_EMAIL', 'Send email')], help_text='What was done', max_length=20)),
                ('entity', models.CharField(help_text='Type of the affected entity', max_length=100)),
                ('entity_id', models.CharField(blank=True, help_text='Identifier of the affected entity', max_length=64)),
                ('description', models.TextField(blank=True, help_text='Human readable summary')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now, help_text='When the action happened')),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action; empty for system jobs', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'audit event',
                'verbose_name_plural': 'audit events',
                'db_table': 'audit_events',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['entity', 'entity_id'], name='audit_entity_idx'),
                    models.Index(fields=['timestamp'], name='audit_timestamp_idx'),
                ],
            },
        ),
    ]
