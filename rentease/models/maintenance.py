from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from rentease.models.base import CamelModel, EntityModel, utcnow


class MaintenanceStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class MaintenanceCategory(str, Enum):
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    APPLIANCE = "appliance"
    STRUCTURAL = "structural"
    PEST_CONTROL = "pest_control"
    OTHER = "other"


class MaintenanceComment(CamelModel):
    id: str
    request_id: str
    user_id: str
    content: str
    created_at: datetime = Field(default_factory=utcnow)


class MaintenanceRequest(EntityModel):
    """Repair ticket raised by a tenant against a unit"""
    unit_id: str
    tenant_id: str
    category: MaintenanceCategory = MaintenanceCategory.OTHER
    title: str
    description: str = ""
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    status: MaintenanceStatus = MaintenanceStatus.OPEN
    assigned_to: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list)
    comments: List[MaintenanceComment] = Field(default_factory=list)
    completed_at: Optional[datetime] = None
