"""
Maintenance Service
Repair tickets: opening, status changes, completion and comments
"""
import logging
from typing import Any, Dict, List

from rentease.models.activity import ActivityType
from rentease.models.base import generate_id, utcnow
from rentease.models.maintenance import MaintenanceComment, MaintenanceRequest, MaintenanceStatus
from rentease.services.activity_service import ActivityService
from rentease.services.base import EntityService
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey

logger = logging.getLogger(__name__)

COMPLETED = MaintenanceStatus.COMPLETED.value


class MaintenanceService(EntityService[MaintenanceRequest]):
    model = MaintenanceRequest
    collection = CollectionKey.MAINTENANCE_REQUESTS
    id_prefix = "maint"
    entity_name = "Maintenance request"

    def __init__(self, store, activities: ActivityService) -> None:
        super().__init__(store)
        self.activities = activities

    # ==================== Hooks ====================

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["status"] = MaintenanceStatus.OPEN
        data["comments"] = []
        data["completed_at"] = None
        return data

    def _prepare_update(self, before: MaintenanceRequest, merged: Dict[str, Any]) -> Dict[str, Any]:
        if merged.get("status") == COMPLETED and before.status != COMPLETED:
            merged["completed_at"] = utcnow()
        return merged

    def _after_create(self, entity: MaintenanceRequest) -> None:
        self.activities.log(
            ActivityType.MAINTENANCE_OPENED,
            entity.tenant_id,
            f"Maintenance request opened: {entity.title}",
            {"requestId": entity.id, "unitId": entity.unit_id, "priority": entity.priority},
        )

    def _after_update(self, before: MaintenanceRequest, after: MaintenanceRequest) -> None:
        if after.status == COMPLETED and before.status != COMPLETED:
            self.activities.log(
                ActivityType.MAINTENANCE_COMPLETED,
                after.tenant_id,
                f"Maintenance request completed: {after.title}",
                {"requestId": after.id, "unitId": after.unit_id},
            )

    # ==================== Queries ====================

    def get_by_tenant(self, tenant_id: str) -> ServiceResult[List[MaintenanceRequest]]:
        return self.list_by("tenant_id", tenant_id)

    def get_by_unit(self, unit_id: str) -> ServiceResult[List[MaintenanceRequest]]:
        return self.list_by("unit_id", unit_id)

    # ==================== Commands ====================

    def update_status(self, request_id: str, status: MaintenanceStatus) -> ServiceResult[MaintenanceRequest]:
        return self.update(request_id, {"status": status})

    def add_comment(self, request_id: str, content: str, user_id: str) -> ServiceResult[MaintenanceRequest]:
        """Append a comment to the request's thread."""
        if not (content or "").strip():
            return ServiceResult.invalid("Comment content is required")

        with self.store.lock:
            current = self.get_by_id(request_id)
            if not current.success:
                return current

            comment = MaintenanceComment(
                id=generate_id("comm"),
                request_id=request_id,
                user_id=user_id,
                content=content,
                created_at=utcnow(),
            )
            comments = [c.model_dump() for c in current.data.comments]
            comments.append(comment.model_dump())
            return self.update(request_id, {"comments": comments})
