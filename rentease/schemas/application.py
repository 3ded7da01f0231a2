from datetime import date
from typing import Optional

from rentease.models.application import ApplicationStatus, RecommendationStatus
from rentease.models.base import CamelModel


class ApplicationCreate(CamelModel):
    unit_id: str
    tenant_id: str
    employment_status: str = ""
    monthly_income: float = 0
    emergency_contact: str = ""
    emergency_phone: str = ""
    move_in_date: Optional[date] = None


class ApplicationUpdate(CamelModel):
    status: Optional[ApplicationStatus] = None
    landlord_recommendation: Optional[RecommendationStatus] = None
    landlord_notes: Optional[str] = None
    admin_notes: Optional[str] = None
    employment_status: Optional[str] = None
    monthly_income: Optional[float] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    move_in_date: Optional[date] = None


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    notes: Optional[str] = None


class RecommendationUpdate(CamelModel):
    recommendation: RecommendationStatus
    notes: Optional[str] = None
