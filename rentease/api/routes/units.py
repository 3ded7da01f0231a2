from fastapi import APIRouter, Depends, Query
from typing import Optional

from rentease.api.responses import created, envelope, paginated
from rentease.core.deps import get_services
from rentease.schemas.property import PropertyFilters, UnitCreate, UnitUpdate
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_units(services: Services = Depends(get_services)):
    return envelope(services.units.list_all())


@router.get("/available")
def list_available_units(
    city: Optional[str] = None,
    county: Optional[str] = None,
    min_rent: Optional[float] = Query(None, alias="minRent"),
    max_rent: Optional[float] = Query(None, alias="maxRent"),
    bedrooms: Optional[int] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    services: Services = Depends(get_services),
):
    """Public listing of available units, each joined with its property"""
    filters = PropertyFilters(
        city=city,
        county=county,
        min_rent=min_rent,
        max_rent=max_rent,
        bedrooms=bedrooms,
        search=search,
    )
    return paginated(services.units.get_available(filters, page, page_size))


@router.get("/property/{property_id}")
def get_property_units(property_id: str, services: Services = Depends(get_services)):
    return envelope(services.units.get_by_property(property_id))


@router.get("/{unit_id}")
def get_unit(unit_id: str, services: Services = Depends(get_services)):
    return envelope(services.units.get_by_id(unit_id))


@router.post("/", status_code=201)
def create_unit(unit_in: UnitCreate, services: Services = Depends(get_services)):
    return created(services.units.create(unit_in))


@router.patch("/{unit_id}")
def update_unit(unit_id: str, unit_update: UnitUpdate, services: Services = Depends(get_services)):
    return envelope(services.units.update(unit_id, unit_update))


@router.delete("/{unit_id}")
def delete_unit(unit_id: str, services: Services = Depends(get_services)):
    return envelope(services.units.delete(unit_id))
