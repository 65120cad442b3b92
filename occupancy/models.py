from django.db import models
from django.core.validators import MinValueValidator
from core.constants import AssignmentStatus
from tenants.models import Tenant
from rooms.models import Room, Bed


class TenantAssignmentQuerySet(models.QuerySet):

    def active(self):
        return self.filter(status=AssignmentStatus.ACTIVE)

    def ended(self):
        return self.filter(status=AssignmentStatus.ENDED)

    def for_room(self, room_id):
        return self.filter(room_id=room_id)

    def for_tenant(self, tenant_id):
        return self.filter(tenant_id=tenant_id)


class TenantAssignment(models.Model):
    """
    MOST IMPORTANT TABLE - the assignment ledger linking a tenant to a bed.

    This row is the single source of truth for both directions of the
    bed <-> tenant relation: a bed's occupant and a tenant's current room
    are queries over active rows. The partial unique constraints below
    make "one active bed per tenant" and "one active tenant per bed"
    hold at the database level.
    """
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='assignments')
    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name='assignments')
    bed = models.ForeignKey(Bed, on_delete=models.CASCADE, related_name='assignments')

    status = models.CharField(max_length=10, choices=AssignmentStatus.CHOICES, default=AssignmentStatus.ACTIVE)
    check_in_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)

    rent = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)],
        help_text="Monthly rent agreed at check-in (room type base price)"
    )

    # Notice Period Management
    notice_date = models.DateField(
        null=True, blank=True,
        help_text="Date when tenant gave notice to vacate"
    )
    expected_checkout_date = models.DateField(
        null=True, blank=True,
        help_text="Expected date of checkout after notice period"
    )
    notice_reason = models.TextField(
        blank=True,
        help_text="Reason for leaving (optional)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TenantAssignmentQuerySet.as_manager()

    class Meta:
        ordering = ['-check_in_date', '-id']
        verbose_name = "Tenant Assignment"
        verbose_name_plural = "Tenant Assignments"
        constraints = [
            models.UniqueConstraint(
                fields=['bed'],
                condition=models.Q(status='active'),
                name='unique_active_assignment_per_bed',
            ),
            models.UniqueConstraint(
                fields=['tenant'],
                condition=models.Q(status='active'),
                name='unique_active_assignment_per_tenant',
            ),
        ]
        indexes = [
            models.Index(fields=['room', 'status'], name='assignment_room_status_idx'),
            models.Index(fields=['tenant', 'status'], name='assignment_tenant_status_idx'),
            models.Index(fields=['status', 'check_in_date'], name='assignment_status_checkin_idx'),
        ]

    def __str__(self):
        return f"{self.tenant.name} - {self.location}"

    def clean(self):
        from django.core.exceptions import ValidationError
        if self.bed_id and self.room_id and self.bed.room_id != self.room_id:
            raise ValidationError("Bed must belong to the assigned room.")
        if self.end_date and self.end_date < self.check_in_date:
            raise ValidationError("End date cannot be before check-in date.")

    @property
    def is_active(self):
        return self.status == AssignmentStatus.ACTIVE

    @property
    def location(self):
        """Get human-readable location"""
        return f"{self.room.property.title} - {self.bed.label}"

    @property
    def notice_status(self):
        """Get notice status for display"""
        if not self.notice_date:
            return 'NO_NOTICE'
        from django.utils import timezone
        if self.expected_checkout_date and self.expected_checkout_date <= timezone.localdate():
            return 'ELIGIBLE'
        return 'IN_NOTICE_PERIOD'
