"""
Demo Fixtures
Loads a small Nairobi portfolio into an empty store so the dashboards have
something to show. Runs through the services, so the usual side effects
(unit occupancy, activity log) apply.
"""
import logging
from datetime import date, timedelta

from rentease.models.maintenance import MaintenanceCategory, MaintenancePriority
from rentease.models.payment import PaymentMethod, PaymentStatus
from rentease.models.property import UnitType
from rentease.models.user import UserRole
from rentease.services import Services

logger = logging.getLogger(__name__)


def seed_demo_data(services: Services) -> bool:
    """Populate the store; returns False when it already holds users."""
    if services.users.list_all().data:
        logger.info("Store already has data, skipping demo seed")
        return False

    admin = services.users.create(
        {"email": "admin@rentease.co.ke", "firstName": "Grace", "lastName": "Wanjiku", "role": UserRole.ADMIN}
    ).data
    landlord = services.users.create(
        {
            "email": "landlord@rentease.co.ke",
            "firstName": "Peter",
            "lastName": "Kamau",
            "phone": "+254712345678",
            "role": UserRole.LANDLORD,
        }
    ).data
    tenant = services.users.create(
        {
            "email": "tenant@rentease.co.ke",
            "firstName": "Mary",
            "lastName": "Otieno",
            "phone": "+254723456789",
            "role": UserRole.TENANT,
        }
    ).data
    applicant = services.users.create(
        {"email": "john.mwangi@example.com", "firstName": "John", "lastName": "Mwangi", "role": UserRole.TENANT}
    ).data

    property_ = services.properties.create(
        {
            "name": "Kilimani Heights",
            "address": "Argwings Kodhek Road",
            "city": "Nairobi",
            "county": "Nairobi",
            "description": "Modern apartments close to Yaya Centre",
            "landlordId": landlord.id,
            "totalUnits": 3,
            "occupiedUnits": 1,
            "amenities": ["parking", "borehole", "security"],
        }
    ).data

    units = [
        services.units.create(
            {
                "propertyId": property_.id,
                "unitNumber": number,
                "type": unit_type,
                "bedrooms": bedrooms,
                "bathrooms": bathrooms,
                "squareMeters": size,
                "rentAmount": rent,
                "depositAmount": rent,
                "floor": floor,
            }
        ).data
        for number, unit_type, bedrooms, bathrooms, size, rent, floor in [
            ("A1", UnitType.ONE_BEDROOM, 1, 1, 45, 30000, 1),
            ("A2", UnitType.TWO_BEDROOM, 2, 2, 70, 45000, 2),
            ("B1", UnitType.STUDIO, 0, 1, 28, 18000, 1),
        ]
    ]

    today = date.today()
    lease = services.leases.create(
        {
            "unitId": units[0].id,
            "tenantId": tenant.id,
            "startDate": today.replace(day=1) - timedelta(days=60),
            "endDate": today.replace(day=1) + timedelta(days=305),
            "rentAmount": units[0].rent_amount,
            "depositAmount": units[0].deposit_amount,
        }
    ).data

    paid = services.payments.create(
        {
            "leaseId": lease.id,
            "tenantId": tenant.id,
            "amount": lease.rent_amount,
            "dueDate": today.replace(day=1) - timedelta(days=30),
        }
    ).data
    services.payments.record_payment(paid.id, PaymentMethod.MPESA, "QK7H2LM9XZ")
    services.payments.create(
        {
            "leaseId": lease.id,
            "tenantId": tenant.id,
            "amount": lease.rent_amount,
            "dueDate": today.replace(day=1) + timedelta(days=5),
            "status": PaymentStatus.PENDING,
        }
    )

    services.applications.create(
        {
            "unitId": units[1].id,
            "tenantId": applicant.id,
            "employmentStatus": "employed",
            "monthlyIncome": 150000,
            "emergencyContact": "Jane Mwangi",
            "emergencyPhone": "+254734567890",
        }
    )

    services.maintenance.create(
        {
            "unitId": units[0].id,
            "tenantId": tenant.id,
            "category": MaintenanceCategory.PLUMBING,
            "title": "Leaking kitchen tap",
            "description": "The kitchen tap drips constantly",
            "priority": MaintenancePriority.MEDIUM,
        }
    )

    services.messages.send(
        {
            "senderId": landlord.id,
            "receiverId": tenant.id,
            "subject": "Welcome to Kilimani Heights",
            "content": "Karibu! Let me know if you need anything.",
        }
    )

    logger.info(f"[OK] Demo data seeded (admin: {admin.email})")
    return True
