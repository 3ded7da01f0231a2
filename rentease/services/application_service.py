"""
Application Service
Rental applications: submission, admin decision, landlord recommendation
"""
import logging
from typing import Any, Dict, List, Optional

from rentease.models.activity import ActivityType
from rentease.models.application import Application, ApplicationStatus, RecommendationStatus
from rentease.services.activity_service import ActivityService
from rentease.services.base import EntityService
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey

logger = logging.getLogger(__name__)


class ApplicationService(EntityService[Application]):
    model = Application
    collection = CollectionKey.APPLICATIONS
    id_prefix = "app"
    entity_name = "Application"

    def __init__(self, store, activities: ActivityService) -> None:
        super().__init__(store)
        self.activities = activities

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # Every submission starts pending, whatever the caller sent
        data["status"] = ApplicationStatus.PENDING
        data["landlord_recommendation"] = RecommendationStatus.PENDING
        return data

    def _after_create(self, entity: Application) -> None:
        self.activities.log(
            ActivityType.APPLICATION_SUBMITTED,
            entity.tenant_id,
            f"Application submitted for unit {entity.unit_id}",
            {"applicationId": entity.id, "unitId": entity.unit_id},
        )

    def _after_update(self, before: Application, after: Application) -> None:
        if after.status == ApplicationStatus.APPROVED and before.status != ApplicationStatus.APPROVED:
            self.activities.log(
                ActivityType.APPLICATION_APPROVED,
                after.tenant_id,
                f"Application {after.id} approved",
                {"applicationId": after.id, "unitId": after.unit_id},
            )

    def get_by_tenant(self, tenant_id: str) -> ServiceResult[List[Application]]:
        return self.list_by("tenant_id", tenant_id)

    def get_by_unit(self, unit_id: str) -> ServiceResult[List[Application]]:
        return self.list_by("unit_id", unit_id)

    def update_status(
        self, application_id: str, status: ApplicationStatus, notes: Optional[str] = None
    ) -> ServiceResult[Application]:
        """Admin decision; touches only ``status`` and ``admin_notes``."""
        logger.info(f"Application {application_id} status -> {status}")
        return self.update(application_id, {"status": status, "admin_notes": notes})

    def update_recommendation(
        self, application_id: str, recommendation: RecommendationStatus, notes: Optional[str] = None
    ) -> ServiceResult[Application]:
        """Landlord recommendation; touches only ``landlord_recommendation`` and ``landlord_notes``."""
        return self.update(
            application_id,
            {"landlord_recommendation": recommendation, "landlord_notes": notes},
        )
