def _create_property(client, **fields):
    body = {"name": "Kilimani Heights", "city": "Nairobi", "landlordId": "user-l1", **fields}
    response = client.post("/api/properties/", json=body)
    assert response.status_code == 201
    return response.json()["data"]


def _create_unit(client, property_id, **fields):
    body = {"propertyId": property_id, "unitNumber": "A1", "rentAmount": 30000, **fields}
    response = client.post("/api/units/", json=body)
    assert response.status_code == 201
    return response.json()["data"]


def test_health_and_version(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/api/version").json()["success"] is True


def test_property_crud_envelope(client):
    created = _create_property(client)
    assert created["id"].startswith("prop-")
    assert created["landlordId"] == "user-l1"

    response = client.get(f"/api/properties/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": created}

    response = client.patch(f"/api/properties/{created['id']}", json={"totalUnits": 8})
    assert response.json()["data"]["totalUnits"] == 8

    response = client.delete(f"/api/properties/{created['id']}")
    assert response.status_code == 200

    response = client.get(f"/api/properties/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "data": None, "message": "Property not found"}


def test_property_listing_is_paginated(client):
    for index in range(3):
        _create_property(client, name=f"Block {index}")

    body = client.get("/api/properties/", params={"page": 2, "pageSize": 2}).json()

    assert body["total"] == 3
    assert body["page"] == 2
    assert body["pageSize"] == 2
    assert body["totalPages"] == 2
    assert [p["name"] for p in body["data"]] == ["Block 2"]


def test_available_units_listing(client):
    prop = _create_property(client)
    _create_unit(client, prop["id"], unitNumber="A1", rentAmount=20000)
    _create_unit(client, prop["id"], unitNumber="A2", rentAmount=50000)

    body = client.get("/api/units/available", params={"maxRent": 30000}).json()

    assert body["total"] == 1
    assert body["data"][0]["unitNumber"] == "A1"
    assert body["data"][0]["property"]["name"] == "Kilimani Heights"


def test_lease_on_occupied_unit_returns_400(client):
    unit = _create_unit(client, _create_property(client)["id"])
    lease = {
        "unitId": unit["id"],
        "tenantId": "user-t1",
        "startDate": "2026-01-01",
        "endDate": "2026-12-31",
        "rentAmount": 30000,
    }

    assert client.post("/api/leases/", json=lease).status_code == 201
    assert client.get(f"/api/units/{unit['id']}").json()["data"]["status"] == "occupied"

    response = client.post("/api/leases/", json={**lease, "tenantId": "user-t2"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_malformed_body_returns_422_envelope(client):
    response = client.post(
        "/api/leases/",
        json={"unitId": "unit-1", "tenantId": "user-t1", "startDate": "2026-06-01", "endDate": "2026-01-01", "rentAmount": 1},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert body["errors"]


def test_application_status_and_recommendation(client):
    created = client.post("/api/applications/", json={"unitId": "unit-1", "tenantId": "user-t1"}).json()["data"]

    approved = client.post(f"/api/applications/{created['id']}/status", json={"status": "approved", "notes": "OK"})
    recommended = client.post(
        f"/api/applications/{created['id']}/recommendation", json={"recommendation": "recommended"}
    )

    assert approved.json()["data"]["adminNotes"] == "OK"
    assert recommended.json()["data"]["status"] == "approved"
    assert recommended.json()["data"]["landlordRecommendation"] == "recommended"


def test_record_payment_route(client):
    payment = client.post(
        "/api/payments/",
        json={"leaseId": "lease-1", "tenantId": "user-t1", "amount": 30000, "dueDate": "2026-02-01"},
    ).json()["data"]

    response = client.post(f"/api/payments/{payment['id']}/record", json={"method": "mpesa", "transactionRef": "QK7"})

    data = response.json()["data"]
    assert data["status"] == "paid"
    assert data["method"] == "mpesa"
    assert data["paidDate"] is not None


def test_maintenance_routes(client):
    request = client.post(
        "/api/maintenance/", json={"unitId": "unit-1", "tenantId": "user-t1", "title": "Broken window"}
    ).json()["data"]

    comment = client.post(
        f"/api/maintenance/{request['id']}/comments", json={"userId": "user-l1", "content": "On it"}
    )
    assert comment.status_code == 201
    assert comment.json()["data"]["comments"][0]["content"] == "On it"

    done = client.post(f"/api/maintenance/{request['id']}/status", json={"status": "completed"})
    assert done.json()["data"]["completedAt"] is not None


def test_message_routes(client):
    sent = client.post(
        "/api/messages/", json={"senderId": "user-a", "receiverId": "user-b", "content": "Hello"}
    ).json()["data"]

    assert client.get("/api/messages/inbox/user-b").json()["data"][0]["id"] == sent["id"]
    assert client.post(f"/api/messages/{sent['id']}/read").json()["data"]["read"] is True
    assert len(client.get("/api/messages/user/user-a").json()["data"]) == 1


def test_dashboard_routes(client):
    assert client.get("/api/dashboard/admin").json()["data"]["occupancyRate"] == 0
    assert client.get("/api/dashboard/landlord/user-l1").json()["data"]["myUnits"] == 0
    assert client.get("/api/dashboard/tenant/user-t1").json()["data"]["currentLease"] is None
    assert client.get("/api/dashboard/activities", params={"limit": 5}).json()["data"] == []


def test_auth_flow(client):
    registered = client.post(
        "/api/auth/register",
        json={"email": "peter@rentease.co.ke", "password": "secret123", "firstName": "Peter", "role": "landlord"},
    )
    assert registered.status_code == 201
    assert registered.json()["data"]["role"] == "landlord"

    duplicate = client.post("/api/auth/register", json={"email": "PETER@rentease.co.ke", "password": "secret123"})
    assert duplicate.status_code == 400

    login = client.post("/api/auth/login", json={"email": "peter@rentease.co.ke", "password": "secret123"})
    assert login.status_code == 200
    token = login.json()["data"]["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["data"]["email"] == "peter@rentease.co.ke"
    assert client.get("/api/auth/session").json()["data"]["token"] == token

    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/auth/session").status_code == 404


def test_auth_failures(client):
    bad_login = client.post("/api/auth/login", json={"email": "ghost@rentease.co.ke", "password": "secret123"})
    assert bad_login.status_code == 400
    assert bad_login.json()["message"] == "Invalid email or password"

    assert client.get("/api/auth/me", headers={"Authorization": "Bearer nonsense"}).status_code == 401

    reset = client.post("/api/auth/reset-password", json={"email": "ghost@rentease.co.ke"})
    assert reset.status_code == 200
    assert reset.json()["success"] is True


def test_auth_errors_use_envelope(client):
    missing = client.get("/api/auth/me")
    assert missing.status_code == 401
    assert missing.json() == {"success": False, "data": None, "message": "Not authenticated"}

    invalid = client.get("/api/auth/me", headers={"Authorization": "Bearer nonsense"})
    assert invalid.status_code == 401
    assert invalid.json()["success"] is False
    assert invalid.json()["message"] == "Could not validate credentials"
    assert invalid.headers["www-authenticate"] == "Bearer"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json()["success"] is False
