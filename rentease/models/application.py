from datetime import date
from enum import Enum
from typing import Optional

from rentease.models.base import EntityModel


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class RecommendationStatus(str, Enum):
    PENDING = "pending"
    RECOMMENDED = "recommended"
    NOT_RECOMMENDED = "not_recommended"


class Application(EntityModel):
    """A tenant's rental application for a unit"""
    unit_id: str
    tenant_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    landlord_recommendation: RecommendationStatus = RecommendationStatus.PENDING
    landlord_notes: Optional[str] = None
    admin_notes: Optional[str] = None
    employment_status: str = ""
    monthly_income: float = 0
    emergency_contact: str = ""
    emergency_phone: str = ""
    move_in_date: Optional[date] = None
