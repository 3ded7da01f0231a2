import os
from datetime import date, timedelta
from typing import Callable

import pytest

# Keep the app-wide store in memory; must be set before rentease.core.config loads
os.environ.setdefault("STORE_BACKEND", "memory")

from fastapi.testclient import TestClient  # noqa: E402

from rentease.core.config import Settings  # noqa: E402
from rentease.core.deps import get_services  # noqa: E402
from rentease.main import app  # noqa: E402
from rentease.models.property import Property, Unit  # noqa: E402
from rentease.models.user import User, UserRole  # noqa: E402
from rentease.services import Services  # noqa: E402
from rentease.storage import MemoryStore  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(STORE_BACKEND="memory", SECRET_KEY="test-secret")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def services(store: MemoryStore, settings: Settings) -> Services:
    return Services(store, settings)


@pytest.fixture
def client(services: Services):
    """TestClient whose routes all share the per-test services container."""
    app.dependency_overrides[get_services] = lambda: services
    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()
        test_client.close()


@pytest.fixture
def create_user(services: Services) -> Callable[..., User]:
    def _create(email: str = "tenant@rentease.co.ke", role: UserRole = UserRole.TENANT, **fields) -> User:
        result = services.users.create({"email": email, "firstName": "Test", "lastName": "User", "role": role, **fields})
        assert result.success, result.message
        return result.data

    return _create


@pytest.fixture
def create_property(services: Services) -> Callable[..., Property]:
    def _create(landlord_id: str = "user-landlord", **fields) -> Property:
        data = {
            "name": "Kilimani Heights",
            "address": "Argwings Kodhek Road",
            "city": "Nairobi",
            "county": "Nairobi",
            "landlordId": landlord_id,
            **fields,
        }
        result = services.properties.create(data)
        assert result.success, result.message
        return result.data

    return _create


@pytest.fixture
def create_unit(services: Services) -> Callable[..., Unit]:
    def _create(property_id: str, unit_number: str = "A1", **fields) -> Unit:
        data = {
            "propertyId": property_id,
            "unitNumber": unit_number,
            "bedrooms": 1,
            "rentAmount": 30000,
            **fields,
        }
        result = services.units.create(data)
        assert result.success, result.message
        return result.data

    return _create


@pytest.fixture
def lease_payload() -> Callable[..., dict]:
    def _payload(unit_id: str, tenant_id: str = "user-tenant", **fields) -> dict:
        start = date(2026, 1, 1)
        return {
            "unitId": unit_id,
            "tenantId": tenant_id,
            "startDate": start.isoformat(),
            "endDate": (start + timedelta(days=364)).isoformat(),
            "rentAmount": 30000,
            "depositAmount": 30000,
            **fields,
        }

    return _payload
