from typing import List, Optional

from rentease.models.base import CamelModel
from rentease.models.maintenance import MaintenanceCategory, MaintenancePriority, MaintenanceStatus


class MaintenanceRequestCreate(CamelModel):
    unit_id: str
    tenant_id: str
    category: MaintenanceCategory = MaintenanceCategory.OTHER
    title: str
    description: str = ""
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    assigned_to: Optional[str] = None
    image_urls: List[str] = []


class MaintenanceRequestUpdate(CamelModel):
    category: Optional[MaintenanceCategory] = None
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[MaintenancePriority] = None
    status: Optional[MaintenanceStatus] = None
    assigned_to: Optional[str] = None
    image_urls: Optional[List[str]] = None


class MaintenanceStatusUpdate(CamelModel):
    status: MaintenanceStatus


class CommentCreate(CamelModel):
    user_id: str
    content: str
