from enum import Enum
from typing import List

from pydantic import Field

from rentease.models.base import EntityModel


class PropertyStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class UnitStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class UnitType(str, Enum):
    STUDIO = "studio"
    BEDSITTER = "bedsitter"
    ONE_BEDROOM = "1br"
    TWO_BEDROOM = "2br"
    THREE_BEDROOM = "3br"
    FOUR_PLUS_BEDROOM = "4br+"


class Property(EntityModel):
    """A building or estate owned by one landlord"""
    name: str
    address: str = ""
    city: str = ""
    county: str = ""
    description: str = ""
    image_urls: List[str] = Field(default_factory=list)
    landlord_id: str
    # Maintained by callers; occupied_units <= total_units is not enforced
    total_units: int = 0
    occupied_units: int = 0
    amenities: List[str] = Field(default_factory=list)
    status: PropertyStatus = PropertyStatus.ACTIVE


class Unit(EntityModel):
    """A rentable unit inside a property"""
    property_id: str
    unit_number: str = ""
    type: UnitType = UnitType.ONE_BEDROOM
    bedrooms: int = 0
    bathrooms: float = 0
    square_meters: float = 0
    rent_amount: float = 0
    deposit_amount: float = 0
    status: UnitStatus = UnitStatus.AVAILABLE
    floor: int = 0
    amenities: List[str] = Field(default_factory=list)
    image_urls: List[str] = Field(default_factory=list)
