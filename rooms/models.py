import builtins
from django.db import models
from django.core.exceptions import ValidationError
from core.constants import SharingKind, Gender, AssignmentStatus
from properties.models import Property, RoomType


class Room(models.Model):
    """Physical room in a property. Capacity follows the room type's sharing kind."""
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='rooms')
    room_type = models.ForeignKey(RoomType, on_delete=models.CASCADE, related_name='rooms')
    room_number = models.CharField(max_length=20, help_text="e.g., 'D01', '203'")
    gender_restriction = models.CharField(
        max_length=10, choices=Gender.RESTRICTION_CHOICES, blank=True,
        help_text="Leave blank for rooms open to any gender"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['property', 'room_number']
        verbose_name = "Room"
        verbose_name_plural = "Rooms"
        constraints = [
            models.UniqueConstraint(fields=['property', 'room_number'], name='unique_room_number_per_property'),
        ]
        indexes = [
            models.Index(fields=['property', 'room_type'], name='room_property_type_idx'),
        ]

    def __str__(self):
        return f"{self.property.title} - {self.room_number} ({self.room_type.get_sharing_kind_display()})"

    def clean(self):
        if self.room_type_id and self.property_id and self.room_type.property_id != self.property_id:
            raise ValidationError("Room type must belong to the same property as the room.")

    @builtins.property
    def sharing_kind(self):
        return self.room_type.sharing_kind

    @builtins.property
    def capacity(self):
        return SharingKind.bed_count(self.room_type.sharing_kind)

    @builtins.property
    def active_assignments(self):
        return self.assignments.filter(status=AssignmentStatus.ACTIVE)

    @builtins.property
    def occupied_beds(self):
        """Count of occupied beds"""
        return self.active_assignments.count()

    @builtins.property
    def vacant_beds(self):
        """Count of vacant beds"""
        return self.capacity - self.occupied_beds


class Bed(models.Model):
    """Bed slot in a room. Occupancy is read from the active assignment, never stored."""
    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name='beds')
    slot_index = models.PositiveSmallIntegerField(help_text="0-based position within the room")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['room', 'slot_index']
        verbose_name = "Bed"
        verbose_name_plural = "Beds"
        constraints = [
            models.UniqueConstraint(fields=['room', 'slot_index'], name='unique_bed_slot_per_room'),
        ]

    def __str__(self):
        return self.label

    @property
    def label(self):
        return f"{self.room.room_number}-B{self.slot_index + 1}"

    @property
    def current_assignment(self):
        """Get current active assignment for this bed"""
        return self.assignments.filter(status=AssignmentStatus.ACTIVE).select_related('tenant').first()

    @property
    def occupant(self):
        assignment = self.current_assignment
        return assignment.tenant if assignment else None

    @property
    def move_in_date(self):
        assignment = self.current_assignment
        return assignment.check_in_date if assignment else None
