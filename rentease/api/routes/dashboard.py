from fastapi import APIRouter, Depends, Query
from typing import Optional

from rentease.api.responses import envelope
from rentease.core.deps import get_services
from rentease.services import Services

router = APIRouter()


@router.get("/admin")
def get_admin_stats(services: Services = Depends(get_services)):
    """Portfolio-wide figures for the admin dashboard"""
    return envelope(services.dashboard.admin_stats())


@router.get("/landlord/{landlord_id}")
def get_landlord_stats(landlord_id: str, services: Services = Depends(get_services)):
    return envelope(services.dashboard.landlord_stats(landlord_id))


@router.get("/tenant/{tenant_id}")
def get_tenant_stats(tenant_id: str, services: Services = Depends(get_services)):
    return envelope(services.dashboard.tenant_stats(tenant_id))


@router.get("/activities")
def get_recent_activities(
    limit: Optional[int] = Query(None, ge=1),
    services: Services = Depends(get_services),
):
    """Recent activity feed, newest first"""
    return envelope(services.dashboard.recent_activities(limit))
