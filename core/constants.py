"""
Application-wide constants.
Centralized constants following DRY principle.
"""

# User Roles
class UserRole:
    ADMIN = 'ADMIN'
    OWNER = 'OWNER'
    TENANT = 'TENANT'

    CHOICES = [
        (ADMIN, 'Admin'),
        (OWNER, 'Owner'),
        (TENANT, 'Tenant'),
    ]


# Sharing kinds - bed count per room is a pure function of the kind
class SharingKind:
    SINGLE = 'single'
    DOUBLE = 'double'
    TRIPLE = 'triple'
    QUAD = 'quad'

    CHOICES = [
        (SINGLE, 'Single'),
        (DOUBLE, 'Double'),
        (TRIPLE, 'Triple'),
        (QUAD, 'Quad'),
    ]

    BED_COUNTS = {
        SINGLE: 1,
        DOUBLE: 2,
        TRIPLE: 3,
        QUAD: 4,
    }

    @classmethod
    def values(cls):
        return list(cls.BED_COUNTS)

    @classmethod
    def is_valid(cls, kind):
        return kind in cls.BED_COUNTS

    @classmethod
    def bed_count(cls, kind):
        """Number of bed slots in a room of this sharing kind"""
        return cls.BED_COUNTS[kind]

    @classmethod
    def room_prefix(cls, kind):
        """Room number prefix for auto-generated numbers, e.g. 'D' for double"""
        return kind[0].upper()


# Gender
class Gender:
    MALE = 'male'
    FEMALE = 'female'
    OTHER = 'other'

    CHOICES = [
        (MALE, 'Male'),
        (FEMALE, 'Female'),
        (OTHER, 'Other'),
    ]

    # Rooms can only be restricted to one of these
    RESTRICTION_CHOICES = [
        (MALE, 'Male only'),
        (FEMALE, 'Female only'),
    ]


# Property Status
class PropertyStatus:
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    INACTIVE = 'INACTIVE'

    CHOICES = [
        (PENDING, 'Pending approval'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
        (INACTIVE, 'Inactive'),
    ]


# Assignment Status
class AssignmentStatus:
    ACTIVE = 'active'
    ENDED = 'ended'

    CHOICES = [
        (ACTIVE, 'Active'),
        (ENDED, 'Ended'),
    ]


# Derived room status labels
class OccupancyStatus:
    EMPTY = 'empty'
    PARTIAL = 'partial'
    FULL = 'full'


# Complaints
class ComplaintStatus:
    PENDING = 'PENDING'
    IN_PROGRESS = 'IN_PROGRESS'
    RESOLVED = 'RESOLVED'
    CLOSED = 'CLOSED'

    CHOICES = [
        (PENDING, 'Pending'),
        (IN_PROGRESS, 'In Progress'),
        (RESOLVED, 'Resolved'),
        (CLOSED, 'Closed'),
    ]

    OPEN = [PENDING, IN_PROGRESS]


class ComplaintCategory:
    MAINTENANCE = 'MAINTENANCE'
    UTILITY = 'UTILITY'
    SAFETY = 'SAFETY'
    NOISE = 'NOISE'
    OTHER = 'OTHER'

    CHOICES = [
        (MAINTENANCE, 'Maintenance'),
        (UTILITY, 'Utility'),
        (SAFETY, 'Safety'),
        (NOISE, 'Noise'),
        (OTHER, 'Other'),
    ]


class ComplaintPriority:
    LOW = 'LOW'
    MEDIUM = 'MEDIUM'
    HIGH = 'HIGH'
    URGENT = 'URGENT'

    CHOICES = [
        (LOW, 'Low'),
        (MEDIUM, 'Medium'),
        (HIGH, 'High'),
        (URGENT, 'Urgent'),
    ]


# Default Limits
class DefaultLimits:
    NOTICE_PERIOD_DAYS = 30
    CHECK_IN_GRACE_DAYS = 7
    CLAIM_RETRIES = 3
    LOCK_TIMEOUT_SECONDS = 10


# Pagination
class Pagination:
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100
