# Generated manually for the assignment ledger

import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('rooms', '0001_initial'),
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TenantAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('active', 'Active'), ('ended', 'Ended')], default='active', max_length=10)),
                ('check_in_date', models.DateField()),
                ('end_date', models.DateField(blank=True, null=True)),
                ('rent', models.DecimalField(decimal_places=2, help_text='Monthly rent agreed at check-in (room type base price)', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('notice_date', models.DateField(blank=True, help_text='Date when tenant gave notice to vacate', null=True)),
                ('expected_checkout_date', models.DateField(blank=True, help_text='Expected date of checkout after notice period', null=True)),
                ('notice_reason', models.TextField(blank=True, help_text='Reason for leaving (optional)')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('bed', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignments', to='rooms.bed')),
                ('room', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignments', to='rooms.room')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignments', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Tenant Assignment',
                'verbose_name_plural': 'Tenant Assignments',
                'ordering': ['-check_in_date', '-id'],
                'indexes': [
                    models.Index(fields=['room', 'status'], name='assignment_room_status_idx'),
                    models.Index(fields=['tenant', 'status'], name='assignment_tenant_status_idx'),
                    models.Index(fields=['status', 'check_in_date'], name='assignment_status_checkin_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('status', 'active')), fields=('bed',), name='unique_active_assignment_per_bed'),
                    models.UniqueConstraint(condition=models.Q(('status', 'active')), fields=('tenant',), name='unique_active_assignment_per_tenant'),
                ],
            },
        ),
    ]
