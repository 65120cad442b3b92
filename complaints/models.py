from django.db import models
from django.utils import timezone
from core.constants import ComplaintStatus, ComplaintCategory, ComplaintPriority
from properties.models import Property
from rooms.models import Room
from tenants.models import Tenant


class Complaint(models.Model):
    """Complaint raised by a tenant about the property they live in"""
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='complaints')
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='complaints')
    room = models.ForeignKey(
        Room, on_delete=models.SET_NULL, null=True, blank=True, related_name='complaints',
        help_text="Room the tenant occupied when raising the complaint"
    )
    subject = models.CharField(max_length=100)
    description = models.TextField()
    category = models.CharField(max_length=20, choices=ComplaintCategory.CHOICES)
    priority = models.CharField(max_length=10, choices=ComplaintPriority.CHOICES, default=ComplaintPriority.LOW)
    status = models.CharField(max_length=20, choices=ComplaintStatus.CHOICES, default=ComplaintStatus.PENDING)
    assigned_to = models.CharField(max_length=255, blank=True,
                                   help_text="e.g., 'Plumber', 'Electrician', 'Warden'")
    notes = models.TextField(blank=True)
    resolved_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = "Complaint"
        verbose_name_plural = "Complaints"
        indexes = [
            models.Index(fields=['property', 'status'], name='complaint_property_status_idx'),
            models.Index(fields=['tenant', 'status'], name='complaint_tenant_status_idx'),
        ]

    def __str__(self):
        return f"{self.subject} ({self.get_status_display()})"

    def save(self, *args, **kwargs):
        """Stamp resolved_date on resolution, clear it if reopened"""
        if self.status in (ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED):
            if not self.resolved_date:
                self.resolved_date = timezone.now()
        else:
            self.resolved_date = None
        super().save(*args, **kwargs)
