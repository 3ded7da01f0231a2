"""
Lease Service
Creating a lease occupies its unit and records a lease_created activity.
"""
import logging
from typing import List

from rentease.models.activity import ActivityType
from rentease.models.lease import Lease, LeaseStatus
from rentease.models.property import UnitStatus
from rentease.services.activity_service import ActivityService
from rentease.services.base import EntityService, Payload
from rentease.services.result import ServiceResult
from rentease.services.unit_service import UnitService
from rentease.storage import CollectionKey

logger = logging.getLogger(__name__)

LEASABLE_UNIT_STATUSES = {UnitStatus.AVAILABLE.value, UnitStatus.RESERVED.value}


class LeaseService(EntityService[Lease]):
    model = Lease
    collection = CollectionKey.LEASES
    id_prefix = "lease"
    entity_name = "Lease"

    def __init__(
        self,
        store,
        units: UnitService,
        activities: ActivityService,
        enforce_unit_availability: bool = True,
    ) -> None:
        super().__init__(store)
        self.units = units
        self.activities = activities
        self.enforce_unit_availability = enforce_unit_availability

    def create(self, payload: Payload) -> ServiceResult[Lease]:
        data = self._to_mapping(payload, partial=False)
        unit_id = data.get("unit_id")

        with self.store.lock:
            if self.enforce_unit_availability:
                unit = self.units.get_by_id(unit_id) if unit_id else None
                if unit is not None and not unit.success:
                    return ServiceResult.invalid("Unit not found")
                if unit is not None and unit.data.status not in LEASABLE_UNIT_STATUSES:
                    logger.warning(f"Lease refused: unit {unit_id} is {unit.data.status}")
                    return ServiceResult.invalid("Unit is not available for lease")
            return super().create(data)

    def _after_create(self, entity: Lease) -> None:
        occupied = self.units.update(entity.unit_id, {"status": UnitStatus.OCCUPIED})
        if not occupied.success:
            logger.warning(f"Lease {entity.id} references missing unit {entity.unit_id}")
        self.activities.log(
            ActivityType.LEASE_CREATED,
            entity.tenant_id,
            f"Lease created for unit {entity.unit_id}",
            {"leaseId": entity.id, "unitId": entity.unit_id},
        )

    def get_by_tenant(self, tenant_id: str) -> ServiceResult[List[Lease]]:
        return self.list_by("tenant_id", tenant_id)

    def get_by_unit(self, unit_id: str) -> ServiceResult[List[Lease]]:
        return self.list_by("unit_id", unit_id)

    def get_active(self) -> ServiceResult[List[Lease]]:
        return self.list_by("status", LeaseStatus.ACTIVE.value)
