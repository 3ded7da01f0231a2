from fastapi import APIRouter, Depends, Query
from typing import Optional

from rentease.api.responses import created, envelope, paginated
from rentease.core.deps import get_services
from rentease.schemas.property import PropertyCreate, PropertyFilters, PropertyUpdate
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_properties(
    city: Optional[str] = None,
    county: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    services: Services = Depends(get_services),
):
    """Paginated property listing with city, county and free-text filters"""
    filters = PropertyFilters(city=city, county=county, search=search)
    return paginated(services.properties.list(filters, page, page_size))


@router.get("/landlord/{landlord_id}")
def get_landlord_properties(landlord_id: str, services: Services = Depends(get_services)):
    return envelope(services.properties.get_by_landlord(landlord_id))


@router.get("/{property_id}")
def get_property(property_id: str, services: Services = Depends(get_services)):
    """Get a specific property"""
    return envelope(services.properties.get_by_id(property_id))


@router.post("/", status_code=201)
def create_property(property_in: PropertyCreate, services: Services = Depends(get_services)):
    """Create a new property"""
    return created(services.properties.create(property_in))


@router.patch("/{property_id}")
def update_property(
    property_id: str,
    property_update: PropertyUpdate,
    services: Services = Depends(get_services),
):
    """Update a property"""
    return envelope(services.properties.update(property_id, property_update))


@router.delete("/{property_id}")
def delete_property(property_id: str, services: Services = Depends(get_services)):
    return envelope(services.properties.delete(property_id))
