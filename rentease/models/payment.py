from datetime import date
from enum import Enum
from typing import Optional

from rentease.models.base import EntityModel


class PaymentStatus(str, Enum):
    """Payment status enum"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    PARTIAL = "partial"


class PaymentMethod(str, Enum):
    """Payment method enum"""
    MPESA = "mpesa"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"
    CHEQUE = "cheque"


class Payment(EntityModel):
    """Rent payment due against a lease"""
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
