from datetime import date
from enum import Enum
from typing import Optional

from pydantic import model_validator

from rentease.models.base import EntityModel


class LeaseStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    ENDED = "ended"
    TERMINATED = "terminated"


class PaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class Lease(EntityModel):
    unit_id: str
    tenant_id: str
    start_date: date
    end_date: date
    rent_amount: float = 0
    deposit_amount: float = 0
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    status: LeaseStatus = LeaseStatus.ACTIVE
    terms: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self) -> "Lease":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
