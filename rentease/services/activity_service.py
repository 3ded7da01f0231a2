"""
Activity Service
Append-only audit trail written as a side effect of domain transitions
"""
import logging
from typing import Any, Dict, List, Optional

from rentease.models.activity import Activity, ActivityType
from rentease.services.base import EntityService, Payload
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey

logger = logging.getLogger(__name__)


class ActivityService(EntityService[Activity]):
    model = Activity
    collection = CollectionKey.ACTIVITIES
    id_prefix = "act"
    entity_name = "Activity"

    def log(
        self,
        activity_type: ActivityType,
        user_id: str,
        description: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Activity:
        result = self.create(
            {
                "type": activity_type,
                "user_id": user_id,
                "description": description,
                "metadata": metadata,
            }
        )
        if not result.success:
            logger.warning(f"Activity {activity_type} for {user_id} not recorded: {result.message}")
        return result.data

    def recent(self, limit: Optional[int] = None) -> ServiceResult[List[Activity]]:
        """Newest first, optionally capped at ``limit`` entries."""
        # Later entries win ties on created_at
        items = sorted(reversed(self._load()), key=lambda item: item.created_at, reverse=True)
        if limit:
            items = items[:limit]
        return ServiceResult.ok(items)

    def update(self, entity_id: str, patch: Payload) -> ServiceResult[Activity]:
        return ServiceResult.invalid("Activities are append-only")

    def delete(self, entity_id: str) -> ServiceResult[None]:
        return ServiceResult.invalid("Activities are append-only")
