from rentease.api.routes.auth import router as auth_router
from rentease.api.routes.users import router as users_router
from rentease.api.routes.properties import router as properties_router
from rentease.api.routes.units import router as units_router
from rentease.api.routes.applications import router as applications_router
from rentease.api.routes.leases import router as leases_router
from rentease.api.routes.payments import router as payments_router
from rentease.api.routes.maintenance import router as maintenance_router
from rentease.api.routes.messages import router as messages_router
from rentease.api.routes.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "users_router",
    "properties_router",
    "units_router",
    "applications_router",
    "leases_router",
    "payments_router",
    "maintenance_router",
    "messages_router",
    "dashboard_router",
]
