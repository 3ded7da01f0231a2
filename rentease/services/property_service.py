"""
Property Service
Property inventory owned by landlords
"""
from typing import List, Optional

from rentease.models.property import Property
from rentease.schemas.property import PropertyFilters
from rentease.services.base import EntityService
from rentease.services.pagination import Page, paginate
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey


def matches_search(search: Optional[str], *values: Optional[str]) -> bool:
    """Case-insensitive substring match against any of ``values``"""
    if not search:
        return True
    needle = search.strip().lower()
    return any(needle in (value or "").lower() for value in values)


class PropertyService(EntityService[Property]):
    model = Property
    collection = CollectionKey.PROPERTIES
    id_prefix = "prop"
    entity_name = "Property"

    def __init__(self, store, max_page_size: int = 100) -> None:
        super().__init__(store)
        self.max_page_size = max_page_size

    def list(
        self,
        filters: Optional[PropertyFilters] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page[Property]:
        filters = filters or PropertyFilters()
        items = self._load()
        if filters.city:
            items = [p for p in items if p.city == filters.city]
        if filters.county:
            items = [p for p in items if p.county == filters.county]
        if filters.search:
            items = [p for p in items if matches_search(filters.search, p.name, p.address)]
        return paginate(items, page, page_size, self.max_page_size)

    def get_by_landlord(self, landlord_id: str) -> ServiceResult[List[Property]]:
        return self.list_by("landlord_id", landlord_id)
