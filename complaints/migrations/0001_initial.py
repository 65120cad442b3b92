# Generated manually for tenant complaints

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
        ('rooms', '0001_initial'),
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Complaint',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('subject', models.CharField(max_length=100)),
                ('description', models.TextField()),
                ('category', models.CharField(choices=[('MAINTENANCE', 'Maintenance'), ('UTILITY', 'Utility'), ('SAFETY', 'Safety'), ('NOISE', 'Noise'), ('OTHER', 'Other')], max_length=20)),
                ('priority', models.CharField(choices=[('LOW', 'Low'), ('MEDIUM', 'Medium'), ('HIGH', 'High'), ('URGENT', 'Urgent')], default='LOW', max_length=10)),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('IN_PROGRESS', 'In Progress'), ('RESOLVED', 'Resolved'), ('CLOSED', 'Closed')], default='PENDING', max_length=20)),
                ('assigned_to', models.CharField(blank=True, help_text="e.g., 'Plumber', 'Electrician', 'Warden'", max_length=255)),
                ('notes', models.TextField(blank=True)),
                ('resolved_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='complaints', to='properties.property')),
                ('room', models.ForeignKey(blank=True, help_text='Room the tenant occupied when raising the complaint', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='complaints', to='rooms.room')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='complaints', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Complaint',
                'verbose_name_plural': 'Complaints',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['property', 'status'], name='complaint_property_status_idx'),
                    models.Index(fields=['tenant', 'status'], name='complaint_tenant_status_idx'),
                ],
            },
        ),
    ]
