"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass, field
from typing import Optional, List
from decimal import Decimal


@dataclass
class PropertyDTO:
    """Data Transfer Object for Property"""
    id: Optional[int] = None
    title: str = ""
    description: str = ""
    address_line1: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    notice_period_days: int = 30


@dataclass
class RoomTypeDTO:
    """Input for defining a room type and provisioning its rooms"""
    sharing_kind: str = ""
    base_price: Decimal = Decimal('0')
    room_count: int = 0
    label: str = ""
    gender_restriction: str = ""
    room_numbers: List[str] = field(default_factory=list)

