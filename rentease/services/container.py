"""
Service Container
Wires every service to one store handle
"""
from typing import Optional

from rentease.core.config import Settings, get_settings
from rentease.services.activity_service import ActivityService
from rentease.services.application_service import ApplicationService
from rentease.services.auth_service import AuthService
from rentease.services.dashboard_service import DashboardService
from rentease.services.lease_service import LeaseService
from rentease.services.maintenance_service import MaintenanceService
from rentease.services.message_service import MessageService
from rentease.services.payment_service import PaymentService
from rentease.services.property_service import PropertyService
from rentease.services.unit_service import UnitService
from rentease.services.user_service import UserService
from rentease.storage import KeyValueStore


class Services:
    def __init__(self, store: KeyValueStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or get_settings()

        self.activities = ActivityService(store)
        self.users = UserService(store)
        self.properties = PropertyService(store, max_page_size=self.settings.MAX_PAGE_SIZE)
        self.units = UnitService(store, self.properties, max_page_size=self.settings.MAX_PAGE_SIZE)
        self.applications = ApplicationService(store, self.activities)
        self.leases = LeaseService(
            store,
            self.units,
            self.activities,
            enforce_unit_availability=self.settings.ENFORCE_LEASE_UNIT_AVAILABILITY,
        )
        self.payments = PaymentService(store, self.activities)
        self.maintenance = MaintenanceService(store, self.activities)
        self.messages = MessageService(store)
        self.dashboard = DashboardService(
            self.properties,
            self.units,
            self.applications,
            self.leases,
            self.payments,
            self.maintenance,
            self.messages,
            self.activities,
        )
        self.auth = AuthService(store, self.users, self.activities, self.settings)
