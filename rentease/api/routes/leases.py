from fastapi import APIRouter, Depends

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.schemas.lease import LeaseCreate, LeaseUpdate
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_leases(services: Services = Depends(get_services)):
    return envelope(services.leases.list_all())


@router.get("/tenant/{tenant_id}")
def get_tenant_leases(tenant_id: str, services: Services = Depends(get_services)):
    return envelope(services.leases.get_by_tenant(tenant_id))


@router.get("/unit/{unit_id}")
def get_unit_leases(unit_id: str, services: Services = Depends(get_services)):
    return envelope(services.leases.get_by_unit(unit_id))


@router.get("/{lease_id}")
def get_lease(lease_id: str, services: Services = Depends(get_services)):
    return envelope(services.leases.get_by_id(lease_id))


@router.post("/", status_code=201)
def create_lease(lease_in: LeaseCreate, services: Services = Depends(get_services)):
    """Start a lease; the unit is marked occupied"""
    return created(services.leases.create(lease_in))


@router.patch("/{lease_id}")
def update_lease(lease_id: str, lease_update: LeaseUpdate, services: Services = Depends(get_services)):
    """Plain update; ending a lease does not free its unit"""
    return envelope(services.leases.update(lease_id, lease_update))


@router.delete("/{lease_id}")
def delete_lease(lease_id: str, services: Services = Depends(get_services)):
    return envelope(services.leases.delete(lease_id))
