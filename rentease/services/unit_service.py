"""
Unit Service
Rentable units and the public listing of available ones
"""
from typing import List, Optional

from rentease.models.property import Unit, UnitStatus
from rentease.schemas.property import PropertyFilters, UnitWithProperty
from rentease.services.base import EntityService
from rentease.services.pagination import Page, paginate
from rentease.services.property_service import PropertyService, matches_search
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey


class UnitService(EntityService[Unit]):
    model = Unit
    collection = CollectionKey.UNITS
    id_prefix = "unit"
    entity_name = "Unit"

    def __init__(self, store, properties: PropertyService, max_page_size: int = 100) -> None:
        super().__init__(store)
        self.properties = properties
        self.max_page_size = max_page_size

    def get_by_property(self, property_id: str) -> ServiceResult[List[Unit]]:
        return self.list_by("property_id", property_id)

    def get_available(
        self,
        filters: Optional[PropertyFilters] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page[UnitWithProperty]:
        """Available units joined with their parent property (None when it no longer exists)."""
        filters = filters or PropertyFilters()
        properties = {p.id: p for p in self.properties.list_all().data}

        listings = []
        for unit in self._load():
            if unit.status != UnitStatus.AVAILABLE:
                continue
            if filters.min_rent is not None and unit.rent_amount < filters.min_rent:
                continue
            if filters.max_rent is not None and unit.rent_amount > filters.max_rent:
                continue
            if filters.bedrooms is not None and unit.bedrooms != filters.bedrooms:
                continue
            parent = properties.get(unit.property_id)
            if filters.city and (parent is None or parent.city != filters.city):
                continue
            if filters.county and (parent is None or parent.county != filters.county):
                continue
            if filters.search and not matches_search(
                filters.search,
                unit.unit_number,
                parent.name if parent else None,
                parent.address if parent else None,
            ):
                continue
            listings.append(UnitWithProperty(**unit.model_dump(), property=parent))

        return paginate(listings, page, page_size, self.max_page_size)
