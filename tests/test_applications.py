from rentease.models.activity import ActivityType
from rentease.services.result import ResultStatus


def _activity_types(services):
    return [a.type for a in services.activities.list_all().data]


def test_application_lifecycle(services, create_property, create_unit):
    prop = create_property(landlord_id="user-l1")
    unit = create_unit(prop.id, status="available", rentAmount=30000)

    created = services.applications.create(
        {"tenantId": "user-t1", "unitId": unit.id, "status": "approved", "landlordRecommendation": "recommended"}
    )

    assert created.success
    application = created.data
    assert application.id.startswith("app-")
    assert application.status == "pending"
    assert application.landlord_recommendation == "pending"
    assert _activity_types(services) == [ActivityType.APPLICATION_SUBMITTED.value]

    approved = services.applications.update_status(application.id, "approved", "References checked")

    assert approved.data.status == "approved"
    assert approved.data.admin_notes == "References checked"
    assert approved.data.landlord_recommendation == "pending"
    assert approved.data.employment_status == application.employment_status
    assert _activity_types(services)[-1] == ActivityType.APPLICATION_APPROVED.value


def test_reapproving_logs_once(services):
    application = services.applications.create({"tenantId": "user-t1", "unitId": "unit-1"}).data

    services.applications.update_status(application.id, "approved")
    services.applications.update_status(application.id, "approved")

    assert _activity_types(services).count(ActivityType.APPLICATION_APPROVED.value) == 1


def test_update_recommendation_touches_only_recommendation(services):
    application = services.applications.create({"tenantId": "user-t1", "unitId": "unit-1"}).data
    services.applications.update_status(application.id, "rejected", "Incomplete documents")

    result = services.applications.update_recommendation(application.id, "recommended", "Good references")

    assert result.data.landlord_recommendation == "recommended"
    assert result.data.landlord_notes == "Good references"
    assert result.data.status == "rejected"
    assert result.data.admin_notes == "Incomplete documents"


def test_update_status_unknown_application(services):
    result = services.applications.update_status("app-missing", "approved")
    assert result.status == ResultStatus.NOT_FOUND
    assert result.message == "Application not found"


def test_get_by_tenant_and_unit(services):
    first = services.applications.create({"tenantId": "user-t1", "unitId": "unit-1"}).data
    services.applications.create({"tenantId": "user-t2", "unitId": "unit-2"})

    assert [a.id for a in services.applications.get_by_tenant("user-t1").data] == [first.id]
    assert [a.id for a in services.applications.get_by_unit("unit-1").data] == [first.id]
