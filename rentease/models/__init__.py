from rentease.models.base import CamelModel, EntityModel, generate_id, next_timestamp, utcnow
from rentease.models.user import User, UserRole, UserStatus
from rentease.models.property import Property, PropertyStatus, Unit, UnitStatus, UnitType
from rentease.models.application import Application, ApplicationStatus, RecommendationStatus
from rentease.models.lease import Lease, LeaseStatus, PaymentFrequency
from rentease.models.payment import Payment, PaymentMethod, PaymentStatus
from rentease.models.maintenance import (
    MaintenanceCategory,
    MaintenanceComment,
    MaintenancePriority,
    MaintenanceRequest,
    MaintenanceStatus,
)
from rentease.models.message import Message
from rentease.models.activity import Activity, ActivityType

__all__ = [
    "CamelModel",
    "EntityModel",
    "generate_id",
    "next_timestamp",
    "utcnow",
    "User",
    "UserRole",
    "UserStatus",
    "Property",
    "PropertyStatus",
    "Unit",
    "UnitStatus",
    "UnitType",
    "Application",
    "ApplicationStatus",
    "RecommendationStatus",
    "Lease",
    "LeaseStatus",
    "PaymentFrequency",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "MaintenanceCategory",
    "MaintenanceComment",
    "MaintenancePriority",
    "MaintenanceRequest",
    "MaintenanceStatus",
    "Message",
    "Activity",
    "ActivityType",
]
