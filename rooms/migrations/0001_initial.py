# Generated manually for rooms and beds

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Room',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('room_number', models.CharField(help_text="e.g., 'D01', '203'", max_length=20)),
                ('gender_restriction', models.CharField(blank=True, choices=[('male', 'Male only'), ('female', 'Female only')], help_text='Leave blank for rooms open to any gender', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='rooms', to='properties.property')),
                ('room_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='rooms', to='properties.roomtype')),
            ],
            options={
                'verbose_name': 'Room',
                'verbose_name_plural': 'Rooms',
                'ordering': ['property', 'room_number'],
                'indexes': [
                    models.Index(fields=['property', 'room_type'], name='room_property_type_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('property', 'room_number'), name='unique_room_number_per_property'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Bed',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slot_index', models.PositiveSmallIntegerField(help_text='0-based position within the room')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('room', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='beds', to='rooms.room')),
            ],
            options={
                'verbose_name': 'Bed',
                'verbose_name_plural': 'Beds',
                'ordering': ['room', 'slot_index'],
                'constraints': [
                    models.UniqueConstraint(fields=('room', 'slot_index'), name='unique_bed_slot_per_room'),
                ],
            },
        ),
    ]
