from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from rentease.models.base import CamelModel, utcnow


class ActivityType(str, Enum):
    USER_CREATED = "user_created"
    APPLICATION_SUBMITTED = "application_submitted"
    APPLICATION_APPROVED = "application_approved"
    LEASE_CREATED = "lease_created"
    PAYMENT_RECEIVED = "payment_received"
    MAINTENANCE_OPENED = "maintenance_opened"
    MAINTENANCE_COMPLETED = "maintenance_completed"


class Activity(CamelModel):
    """Audit trail entry; the activity log is append-only"""
    id: str
    type: ActivityType
    user_id: str
    description: str
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime = Field(default_factory=utcnow)
