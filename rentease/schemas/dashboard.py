from typing import Optional

from rentease.models.base import CamelModel
from rentease.models.lease import Lease
from rentease.models.payment import Payment


class AdminDashboardStats(CamelModel):
    total_properties: int = 0
    total_units: int = 0
    occupancy_rate: float = 0
    total_revenue: float = 0
    pending_applications: int = 0
    open_maintenance_requests: int = 0
    overdue_payments: int = 0
    active_leases: int = 0


class LandlordDashboardStats(CamelModel):
    my_properties: int = 0
    my_units: int = 0
    occupancy_rate: float = 0
    total_revenue: float = 0
    pending_applications: int = 0
    open_maintenance_requests: int = 0
    overdue_payments: int = 0
    active_leases: int = 0


class TenantDashboardStats(CamelModel):
    current_lease: Optional[Lease] = None
    next_payment_due: Optional[Payment] = None
    open_maintenance_requests: int = 0
    unread_messages: int = 0
