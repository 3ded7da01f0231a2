from fastapi import APIRouter, Depends

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.schemas.maintenance import (
    CommentCreate,
    MaintenanceRequestCreate,
    MaintenanceRequestUpdate,
    MaintenanceStatusUpdate,
)
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_maintenance_requests(services: Services = Depends(get_services)):
    return envelope(services.maintenance.list_all())


@router.get("/tenant/{tenant_id}")
def get_tenant_maintenance(tenant_id: str, services: Services = Depends(get_services)):
    return envelope(services.maintenance.get_by_tenant(tenant_id))


@router.get("/unit/{unit_id}")
def get_unit_maintenance(unit_id: str, services: Services = Depends(get_services)):
    return envelope(services.maintenance.get_by_unit(unit_id))


@router.get("/{request_id}")
def get_maintenance_request(request_id: str, services: Services = Depends(get_services)):
    return envelope(services.maintenance.get_by_id(request_id))


@router.post("/", status_code=201)
def create_maintenance_request(
    request_in: MaintenanceRequestCreate,
    services: Services = Depends(get_services),
):
    """Open a maintenance request"""
    return created(services.maintenance.create(request_in))


@router.patch("/{request_id}")
def update_maintenance_request(
    request_id: str,
    request_update: MaintenanceRequestUpdate,
    services: Services = Depends(get_services),
):
    return envelope(services.maintenance.update(request_id, request_update))


@router.post("/{request_id}/status")
def update_maintenance_status(
    request_id: str,
    body: MaintenanceStatusUpdate,
    services: Services = Depends(get_services),
):
    return envelope(services.maintenance.update_status(request_id, body.status))


@router.post("/{request_id}/comments", status_code=201)
def add_maintenance_comment(
    request_id: str,
    body: CommentCreate,
    services: Services = Depends(get_services),
):
    return created(services.maintenance.add_comment(request_id, body.content, body.user_id))


@router.delete("/{request_id}")
def delete_maintenance_request(request_id: str, services: Services = Depends(get_services)):
    return envelope(services.maintenance.delete(request_id))
