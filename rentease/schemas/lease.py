"""
Lease Schemas
Payloads for creating and patching leases.
"""
from datetime import date
from typing import Optional

from pydantic import model_validator

from rentease.models.base import CamelModel
from rentease.models.lease import LeaseStatus, PaymentFrequency


class LeaseCreate(CamelModel):
    unit_id: str
    tenant_id: str
    start_date: date
    end_date: date
    rent_amount: float
    deposit_amount: float = 0
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    status: LeaseStatus = LeaseStatus.ACTIVE
    terms: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self) -> "LeaseCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class LeaseUpdate(CamelModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    rent_amount: Optional[float] = None
    deposit_amount: Optional[float] = None
    payment_frequency: Optional[PaymentFrequency] = None
    status: Optional[LeaseStatus] = None
    terms: Optional[str] = None
