import builtins
from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator
from core.constants import PropertyStatus, SharingKind, DefaultLimits


class Property(models.Model):
    """PG/hostel property listed by an owner"""
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='properties',
        limit_choices_to={'role': 'OWNER'},
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    address_line1 = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    zip_code = models.CharField(max_length=20)
    notice_period_days = models.IntegerField(
        default=DefaultLimits.NOTICE_PERIOD_DAYS,
        validators=[MinValueValidator(0)],
        help_text="Number of days notice required before checkout"
    )
    status = models.CharField(max_length=20, choices=PropertyStatus.CHOICES, default=PropertyStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['title']
        verbose_name = "Property"
        verbose_name_plural = "Properties"
        indexes = [
            models.Index(fields=['owner', 'status'], name='property_owner_status_idx'),
            models.Index(fields=['status'], name='property_status_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.city})"

    @property
    def is_active(self):
        return self.status != PropertyStatus.INACTIVE

    @property
    def address(self):
        return f"{self.address_line1}, {self.city}, {self.state} {self.zip_code}"


class RoomType(models.Model):
    """
    Room type definition within a property (single/double/triple/quad sharing).

    Beds per room come from SharingKind.bed_count(); the number of rooms
    is the count of Room rows pointing here. Neither is stored.
    """
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='room_types')
    sharing_kind = models.CharField(max_length=10, choices=SharingKind.CHOICES)
    base_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    label = models.CharField(max_length=100, blank=True, help_text="e.g., 'AC Double', 'Non-AC Triple'")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['property', 'sharing_kind', 'id']
        verbose_name = "Room Type"
        verbose_name_plural = "Room Types"
        indexes = [
            models.Index(fields=['property', 'sharing_kind'], name='roomtype_property_kind_idx'),
        ]

    def __str__(self):
        name = self.label or self.get_sharing_kind_display()
        return f"{self.property.title} - {name}"

    @builtins.property
    def beds_per_room(self):
        return SharingKind.bed_count(self.sharing_kind)

    @builtins.property
    def room_count(self):
        return self.rooms.count()
