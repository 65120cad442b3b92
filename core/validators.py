"""
Validation utilities and validators.
Centralized validation logic following single responsibility principle.
"""
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from django.conf import settings
from django.utils import timezone
from core.constants import SharingKind, Gender, DefaultLimits, ComplaintStatus, ComplaintCategory, ComplaintPriority
from core.exceptions import ValidationError as AppValidationError


class RoomTypeValidator:
    """Validates room type definitions"""

    @staticmethod
    def validate_sharing_kind(sharing_kind):
        if not SharingKind.is_valid(sharing_kind):
            raise AppValidationError(
                message=f"Unknown sharing kind '{sharing_kind}'. Expected one of: {', '.join(SharingKind.values())}",
                code="INVALID_SHARING_KIND",
                details={"sharing_kind": sharing_kind, "allowed": SharingKind.values()}
            )

    @staticmethod
    def validate_room_count(room_count):
        if not isinstance(room_count, int) or isinstance(room_count, bool) or room_count <= 0:
            raise AppValidationError(
                message="Room count must be a positive integer",
                code="INVALID_ROOM_COUNT",
                details={"room_count": room_count}
            )

    @staticmethod
    def validate_base_price(base_price):
        """Validate and normalize the monthly base price"""
        try:
            price = Decimal(str(base_price))
        except (InvalidOperation, TypeError, ValueError):
            raise AppValidationError(
                message="Base price must be a number",
                code="INVALID_BASE_PRICE",
                details={"base_price": str(base_price)}
            )
        if price < 0:
            raise AppValidationError(
                message="Base price cannot be negative",
                code="INVALID_BASE_PRICE",
                details={"base_price": str(base_price)}
            )
        if price > Decimal('9999999.99'):
            raise AppValidationError(
                message="Base price exceeds maximum allowed",
                code="BASE_PRICE_TOO_LARGE"
            )
        return price


class RoomValidator:
    """Validates room attributes"""

    @staticmethod
    def validate_room_number(room_number):
        """Validate and normalize a room number"""
        normalized = (room_number or '').strip()
        if not normalized:
            raise AppValidationError(
                message="Room number cannot be blank",
                code="INVALID_ROOM_NUMBER"
            )
        if len(normalized) > 20:
            raise AppValidationError(
                message="Room number cannot exceed 20 characters",
                code="INVALID_ROOM_NUMBER",
                details={"room_number": normalized}
            )
        return normalized

    @staticmethod
    def validate_gender_restriction(gender):
        """Empty means unrestricted"""
        gender = gender or ''
        allowed = [value for value, _ in Gender.RESTRICTION_CHOICES]
        if gender and gender not in allowed:
            raise AppValidationError(
                message=f"Gender restriction must be one of: {', '.join(allowed)}",
                code="INVALID_GENDER_RESTRICTION",
                details={"gender": gender}
            )
        return gender


class AssignmentValidator:
    """Validates allocation inputs"""

    @staticmethod
    def validate_bed_slot(bed_slot, capacity):
        if bed_slot is None:
            return
        if not isinstance(bed_slot, int) or isinstance(bed_slot, bool) or not 0 <= bed_slot < capacity:
            raise AppValidationError(
                message=f"Bed slot must be between 0 and {capacity - 1}",
                code="INVALID_BED_SLOT",
                details={"bed_slot": bed_slot, "capacity": capacity}
            )

    @staticmethod
    def validate_check_in_date(check_in_date):
        """Check-in may not lie further in the future than the configured grace window"""
        grace_days = getattr(settings, 'OCCUPANCY_CHECK_IN_GRACE_DAYS', DefaultLimits.CHECK_IN_GRACE_DAYS)
        latest = timezone.localdate() + timedelta(days=grace_days)
        if check_in_date > latest:
            raise AppValidationError(
                message=f"Check-in date cannot be more than {grace_days} days in the future",
                code="INVALID_CHECK_IN_DATE",
                details={"check_in_date": check_in_date.isoformat(), "latest_allowed": latest.isoformat()}
            )

    @staticmethod
    def validate_notice_date(notice_date, check_in_date):
        if notice_date < check_in_date:
            raise AppValidationError(
                message="Notice date cannot be before check-in date",
                code="INVALID_NOTICE_DATE",
                details={"notice_date": notice_date.isoformat(), "check_in_date": check_in_date.isoformat()}
            )


class ComplaintValidator:
    """Validates complaint fields"""

    @staticmethod
    def validate_subject(subject):
        normalized = (subject or '').strip()
        if not normalized or len(normalized) > 100:
            raise AppValidationError(
                message="Subject is required and cannot exceed 100 characters",
                code="INVALID_SUBJECT"
            )
        return normalized

    @staticmethod
    def validate_choice(value, choices, field):
        allowed = [key for key, _ in choices]
        if value not in allowed:
            raise AppValidationError(
                message=f"Unknown {field} '{value}'. Expected one of: {', '.join(allowed)}",
                code=f"INVALID_{field.upper()}",
                details={field: value, "allowed": allowed}
            )
        return value

    @classmethod
    def validate_category(cls, category):
        return cls.validate_choice(category, ComplaintCategory.CHOICES, 'category')

    @classmethod
    def validate_priority(cls, priority):
        return cls.validate_choice(priority, ComplaintPriority.CHOICES, 'priority')

    @classmethod
    def validate_status(cls, status):
        return cls.validate_choice(status, ComplaintStatus.CHOICES, 'status')
