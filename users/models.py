from django.contrib.auth.models import AbstractUser
from django.db import models
from core.constants import UserRole, Gender


class User(AbstractUser):
    """Custom User model - Admin/Owner/Tenant"""
    role = models.CharField(max_length=20, choices=UserRole.CHOICES, default=UserRole.OWNER)
    phone = models.CharField(max_length=15, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.CHOICES, blank=True)

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def is_platform_admin(self):
        return self.role == UserRole.ADMIN or self.is_superuser

    @property
    def is_owner(self):
        return self.role == UserRole.OWNER
