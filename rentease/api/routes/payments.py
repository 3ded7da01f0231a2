from fastapi import APIRouter, Depends

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.schemas.payment import PaymentCreate, PaymentUpdate, RecordPaymentRequest
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_payments(services: Services = Depends(get_services)):
    return envelope(services.payments.list_all())


@router.get("/tenant/{tenant_id}")
def get_tenant_payments(tenant_id: str, services: Services = Depends(get_services)):
    return envelope(services.payments.get_by_tenant(tenant_id))


@router.get("/lease/{lease_id}")
def get_lease_payments(lease_id: str, services: Services = Depends(get_services)):
    return envelope(services.payments.get_by_lease(lease_id))


@router.get("/{payment_id}")
def get_payment(payment_id: str, services: Services = Depends(get_services)):
    return envelope(services.payments.get_by_id(payment_id))


@router.post("/", status_code=201)
def create_payment(payment_in: PaymentCreate, services: Services = Depends(get_services)):
    return created(services.payments.create(payment_in))


@router.patch("/{payment_id}")
def update_payment(payment_id: str, payment_update: PaymentUpdate, services: Services = Depends(get_services)):
    return envelope(services.payments.update(payment_id, payment_update))


@router.post("/{payment_id}/record")
def record_payment(
    payment_id: str,
    body: RecordPaymentRequest,
    services: Services = Depends(get_services),
):
    """Mark a payment as paid (M-Pesa, bank transfer, cash or cheque)"""
    return envelope(services.payments.record_payment(payment_id, body.method, body.transaction_ref))


@router.delete("/{payment_id}")
def delete_payment(payment_id: str, services: Services = Depends(get_services)):
    return envelope(services.payments.delete(payment_id))
