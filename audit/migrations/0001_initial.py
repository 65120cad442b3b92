# Generated manually for the audit trail

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(choices=[('CREATE', 'Create'), ('UPDATE', 'Update'), ('DELETE', 'Delete'), ('ASSIGN_TENANT', 'Assign Tenant'), ('TRANSFER_TENANT', 'Transfer Tenant'), ('REMOVE_TENANT', 'Remove Tenant')], db_index=True, max_length=20)),
                ('resource_type', models.CharField(choices=[('Property', 'Property'), ('RoomType', 'Room Type'), ('Room', 'Room'), ('Tenant', 'Tenant'), ('Assignment', 'Assignment')], db_index=True, max_length=50)),
                ('resource_id', models.IntegerField(blank=True, db_index=True, null=True)),
                ('description', models.TextField(help_text='Human-readable description of the action')),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, default=dict, help_text='Additional context data')),
                ('timestamp', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('owner', models.ForeignKey(help_text='Owner of the property this action belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='owned_audit_logs', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Audit Log',
                'verbose_name_plural': 'Audit Logs',
                'ordering': ['-timestamp', '-id'],
                'indexes': [
                    models.Index(fields=['owner', '-timestamp'], name='auditlog_owner_ts_idx'),
                    models.Index(fields=['resource_type', 'resource_id'], name='auditlog_resource_idx'),
                    models.Index(fields=['action', '-timestamp'], name='auditlog_action_ts_idx'),
                ],
            },
        ),
    ]
