from django.db import models
from django.conf import settings
from core.constants import Gender, AssignmentStatus


class Tenant(models.Model):
    """Tenant onboarded by a PG owner - can occupy one bed at a time"""
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='tenants',
        help_text="Owner who onboarded this tenant"
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='tenant_profile',
        help_text="Login account of the tenant, if any"
    )
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=15, blank=True)
    email = models.EmailField(blank=True)
    gender = models.CharField(
        max_length=10, choices=Gender.CHOICES, blank=True,
        help_text="Leave blank if unknown"
    )
    occupation = models.CharField(max_length=100, blank=True)
    emergency_contact = models.CharField(max_length=15, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Tenant"
        verbose_name_plural = "Tenants"
        indexes = [
            models.Index(fields=['owner', 'name'], name='tenant_owner_name_idx'),
            models.Index(fields=['owner', 'phone'], name='tenant_owner_phone_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.phone})" if self.phone else self.name

    @property
    def current_assignment(self):
        """Get current active assignment"""
        return self.assignments.filter(
            status=AssignmentStatus.ACTIVE
        ).select_related('room', 'bed').first()

    @property
    def current_room(self):
        assignment = self.current_assignment
        return assignment.room if assignment else None
