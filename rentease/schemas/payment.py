from datetime import date
from typing import Optional

from rentease.models.base import CamelModel
from rentease.models.payment import PaymentMethod, PaymentStatus


class PaymentCreate(CamelModel):
    lease_id: str
    tenant_id: str
    amount: float
    due_date: date
    paid_date: Optional[date] = None
    status: PaymentStatus = PaymentStatus.PENDING
    method: Optional[PaymentMethod] = None
    transaction_ref: Optional[str] = None
    late_fee: Optional[float] = None
    notes: Optional[str] = None


class PaymentUpdate(CamelModel):
    amount: Optional[float] = None
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    status: Optional[PaymentStatus] = None
    method: Optional[PaymentMethod] = None
    transaction_ref: Optional[str] = None
    late_fee: Optional[float] = None
    notes: Optional[str] = None


class RecordPaymentRequest(CamelModel):
    method: Optional[PaymentMethod] = None
    transaction_ref: Optional[str] = None
