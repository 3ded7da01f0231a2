"""
Dashboard Service
Role-scoped statistics computed by re-scanning the collections on every call
"""
import logging
from typing import Iterable, List, Optional

from rentease.models.activity import Activity
from rentease.models.application import ApplicationStatus
from rentease.models.maintenance import MaintenanceStatus
from rentease.models.payment import Payment, PaymentStatus
from rentease.models.property import UnitStatus
from rentease.schemas.dashboard import (
    AdminDashboardStats,
    LandlordDashboardStats,
    TenantDashboardStats,
)
from rentease.services.activity_service import ActivityService
from rentease.services.application_service import ApplicationService
from rentease.services.lease_service import LeaseService
from rentease.services.maintenance_service import MaintenanceService
from rentease.services.message_service import MessageService
from rentease.services.payment_service import PaymentService
from rentease.services.property_service import PropertyService
from rentease.services.result import ServiceResult
from rentease.services.unit_service import UnitService

logger = logging.getLogger(__name__)

OPEN_MAINTENANCE = {MaintenanceStatus.OPEN.value, MaintenanceStatus.IN_PROGRESS.value}
DUE_PAYMENT = {PaymentStatus.PENDING.value, PaymentStatus.OVERDUE.value}


def occupancy_rate(units) -> float:
    """Percentage of occupied units, 0 when there are none"""
    total = len(units)
    if not total:
        return 0
    occupied = sum(1 for u in units if u.status == UnitStatus.OCCUPIED.value)
    return round(occupied / total * 100, 2)


def paid_revenue(payments: Iterable[Payment]) -> float:
    return sum(p.amount for p in payments if p.status == PaymentStatus.PAID.value)


class DashboardService:
    def __init__(
        self,
        properties: PropertyService,
        units: UnitService,
        applications: ApplicationService,
        leases: LeaseService,
        payments: PaymentService,
        maintenance: MaintenanceService,
        messages: MessageService,
        activities: ActivityService,
    ) -> None:
        self.properties = properties
        self.units = units
        self.applications = applications
        self.leases = leases
        self.payments = payments
        self.maintenance = maintenance
        self.messages = messages
        self.activities = activities

    def admin_stats(self) -> ServiceResult[AdminDashboardStats]:
        units = self.units.list_all().data
        payments = self.payments.list_all().data

        stats = AdminDashboardStats(
            total_properties=len(self.properties.list_all().data),
            total_units=len(units),
            occupancy_rate=occupancy_rate(units),
            total_revenue=paid_revenue(payments),
            pending_applications=sum(
                1 for a in self.applications.list_all().data if a.status == ApplicationStatus.PENDING.value
            ),
            open_maintenance_requests=sum(
                1 for m in self.maintenance.list_all().data if m.status in OPEN_MAINTENANCE
            ),
            overdue_payments=sum(1 for p in payments if p.status == PaymentStatus.OVERDUE.value),
            active_leases=len(self.leases.get_active().data),
        )
        return ServiceResult.ok(stats)

    def landlord_stats(self, landlord_id: str) -> ServiceResult[LandlordDashboardStats]:
        """Same figures as the admin view, restricted to one landlord's portfolio."""
        property_ids = {p.id for p in self.properties.get_by_landlord(landlord_id).data}
        if not property_ids:
            logger.debug(f"Landlord {landlord_id} has no properties")
        units = [u for u in self.units.list_all().data if u.property_id in property_ids]
        unit_ids = {u.id for u in units}
        leases = [l for l in self.leases.list_all().data if l.unit_id in unit_ids]
        lease_ids = {l.id for l in leases}
        payments = [p for p in self.payments.list_all().data if p.lease_id in lease_ids]

        stats = LandlordDashboardStats(
            my_properties=len(property_ids),
            my_units=len(units),
            occupancy_rate=occupancy_rate(units),
            total_revenue=paid_revenue(payments),
            pending_applications=sum(
                1
                for a in self.applications.list_all().data
                if a.unit_id in unit_ids and a.status == ApplicationStatus.PENDING.value
            ),
            open_maintenance_requests=sum(
                1
                for m in self.maintenance.list_all().data
                if m.unit_id in unit_ids and m.status in OPEN_MAINTENANCE
            ),
            overdue_payments=sum(1 for p in payments if p.status == PaymentStatus.OVERDUE.value),
            active_leases=sum(1 for l in self.leases.get_active().data if l.unit_id in unit_ids),
        )
        return ServiceResult.ok(stats)

    def tenant_stats(self, tenant_id: str) -> ServiceResult[TenantDashboardStats]:
        current_lease = next(
            (l for l in self.leases.get_active().data if l.tenant_id == tenant_id),
            None,
        )
        due: List[Payment] = sorted(
            (p for p in self.payments.get_by_tenant(tenant_id).data if p.status in DUE_PAYMENT),
            key=lambda p: p.due_date,
        )

        stats = TenantDashboardStats(
            current_lease=current_lease,
            next_payment_due=due[0] if due else None,
            open_maintenance_requests=sum(
                1 for m in self.maintenance.get_by_tenant(tenant_id).data if m.status in OPEN_MAINTENANCE
            ),
            unread_messages=self.messages.unread_count(tenant_id),
        )
        return ServiceResult.ok(stats)

    def recent_activities(self, limit: Optional[int] = None) -> ServiceResult[List[Activity]]:
        return self.activities.recent(limit)
