"""
Payment Service
Rent payments due against leases
"""
import logging
from datetime import date
from typing import List, Optional

from rentease.models.activity import ActivityType
from rentease.models.payment import Payment, PaymentMethod, PaymentStatus
from rentease.services.activity_service import ActivityService
from rentease.services.base import EntityService
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey

logger = logging.getLogger(__name__)


class PaymentService(EntityService[Payment]):
    model = Payment
    collection = CollectionKey.PAYMENTS
    id_prefix = "pay"
    entity_name = "Payment"

    def __init__(self, store, activities: ActivityService) -> None:
        super().__init__(store)
        self.activities = activities

    def get_by_tenant(self, tenant_id: str) -> ServiceResult[List[Payment]]:
        return self.list_by("tenant_id", tenant_id)

    def get_by_lease(self, lease_id: str) -> ServiceResult[List[Payment]]:
        return self.list_by("lease_id", lease_id)

    def record_payment(
        self,
        payment_id: str,
        method: Optional[PaymentMethod] = None,
        transaction_ref: Optional[str] = None,
    ) -> ServiceResult[Payment]:
        """
        Mark a payment as paid.

        Succeeds whatever the prior status, so recording twice logs twice.
        An existing paid_date is kept; method and reference are only
        overwritten when given.
        """
        with self.store.lock:
            current = self.get_by_id(payment_id)
            if not current.success:
                logger.warning(f"Payment {payment_id} not found for recording")
                return current

            changes = {
                "status": PaymentStatus.PAID,
                "paid_date": current.data.paid_date or date.today(),
            }
            if method is not None:
                changes["method"] = method
            if transaction_ref is not None:
                changes["transaction_ref"] = transaction_ref

            result = self.update(payment_id, changes)
            if result.success:
                payment = result.data
                self.activities.log(
                    ActivityType.PAYMENT_RECEIVED,
                    payment.tenant_id,
                    f"Payment of {payment.amount:,.2f} received",
                    {"paymentId": payment.id, "leaseId": payment.lease_id, "amount": payment.amount},
                )
        return result
