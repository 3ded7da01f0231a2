from typing import List, Optional

from rentease.models.base import CamelModel
from rentease.models.property import Property, PropertyStatus, Unit, UnitStatus, UnitType


class PropertyFilters(CamelModel):
    """Query filters for property and unit listings"""
    city: Optional[str] = None
    county: Optional[str] = None
    min_rent: Optional[float] = None
    max_rent: Optional[float] = None
    bedrooms: Optional[int] = None
    search: Optional[str] = None


class PropertyCreate(CamelModel):
    name: str
    address: str = ""
    city: str = ""
    county: str = ""
    description: str = ""
    image_urls: List[str] = []
    landlord_id: str
    total_units: int = 0
    occupied_units: int = 0
    amenities: List[str] = []
    status: PropertyStatus = PropertyStatus.ACTIVE


class PropertyUpdate(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    description: Optional[str] = None
    image_urls: Optional[List[str]] = None
    landlord_id: Optional[str] = None
    total_units: Optional[int] = None
    occupied_units: Optional[int] = None
    amenities: Optional[List[str]] = None
    status: Optional[PropertyStatus] = None


class UnitCreate(CamelModel):
    property_id: str
    unit_number: str
    type: UnitType = UnitType.ONE_BEDROOM
    bedrooms: int = 0
    bathrooms: float = 0
    square_meters: float = 0
    rent_amount: float
    deposit_amount: float = 0
    status: UnitStatus = UnitStatus.AVAILABLE
    floor: int = 0
    amenities: List[str] = []
    image_urls: List[str] = []


class UnitUpdate(CamelModel):
    property_id: Optional[str] = None
    unit_number: Optional[str] = None
    type: Optional[UnitType] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    square_meters: Optional[float] = None
    rent_amount: Optional[float] = None
    deposit_amount: Optional[float] = None
    floor: Optional[int] = None
    amenities: Optional[List[str]] = None
    image_urls: Optional[List[str]] = None


class UnitWithProperty(Unit):
    """Available-unit listing joined with its parent property"""
    property: Optional[Property] = None
