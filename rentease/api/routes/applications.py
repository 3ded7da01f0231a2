from fastapi import APIRouter, Depends

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationUpdate,
    RecommendationUpdate,
)
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_applications(services: Services = Depends(get_services)):
    return envelope(services.applications.list_all())


@router.get("/tenant/{tenant_id}")
def get_tenant_applications(tenant_id: str, services: Services = Depends(get_services)):
    return envelope(services.applications.get_by_tenant(tenant_id))


@router.get("/unit/{unit_id}")
def get_unit_applications(unit_id: str, services: Services = Depends(get_services)):
    return envelope(services.applications.get_by_unit(unit_id))


@router.get("/{application_id}")
def get_application(application_id: str, services: Services = Depends(get_services)):
    return envelope(services.applications.get_by_id(application_id))


@router.post("/", status_code=201)
def submit_application(application_in: ApplicationCreate, services: Services = Depends(get_services)):
    """Submit a rental application; it always starts pending"""
    return created(services.applications.create(application_in))


@router.patch("/{application_id}")
def update_application(
    application_id: str,
    application_update: ApplicationUpdate,
    services: Services = Depends(get_services),
):
    return envelope(services.applications.update(application_id, application_update))


@router.post("/{application_id}/status")
def update_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    services: Services = Depends(get_services),
):
    """Admin decision: approve, reject or withdraw"""
    return envelope(services.applications.update_status(application_id, body.status, body.notes))


@router.post("/{application_id}/recommendation")
def update_application_recommendation(
    application_id: str,
    body: RecommendationUpdate,
    services: Services = Depends(get_services),
):
    return envelope(
        services.applications.update_recommendation(application_id, body.recommendation, body.notes)
    )


@router.delete("/{application_id}")
def delete_application(application_id: str, services: Services = Depends(get_services)):
    return envelope(services.applications.delete(application_id))
