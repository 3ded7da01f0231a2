from datetime import date

from rentease.models.activity import ActivityType
from rentease.services.result import ResultStatus


def _payment(services, **fields):
    data = {"leaseId": "lease-1", "tenantId": "user-t1", "amount": 30000, "dueDate": "2026-02-01", **fields}
    return services.payments.create(data).data


def test_record_payment_marks_paid(services):
    payment = _payment(services, status="overdue")

    result = services.payments.record_payment(payment.id, "mpesa", "QK7H2LM9XZ")

    assert result.success
    recorded = services.payments.get_by_id(payment.id).data
    assert recorded.status == "paid"
    assert recorded.paid_date == date.today()
    assert recorded.method == "mpesa"
    assert recorded.transaction_ref == "QK7H2LM9XZ"

    activity = services.activities.list_all().data[-1]
    assert activity.type == ActivityType.PAYMENT_RECEIVED.value
    assert activity.metadata["paymentId"] == payment.id


def test_recording_twice_succeeds_without_reverting(services):
    payment = _payment(services, paidDate="2026-01-30", status="paid", method="bank_transfer", transactionRef="FT123")

    result = services.payments.record_payment(payment.id)

    assert result.success
    assert result.data.status == "paid"
    assert result.data.paid_date == date(2026, 1, 30)
    assert result.data.method == "bank_transfer"
    assert result.data.transaction_ref == "FT123"


def test_each_recording_is_logged(services):
    payment = _payment(services)

    services.payments.record_payment(payment.id, "cash")
    services.payments.record_payment(payment.id, "cash")

    types = [a.type for a in services.activities.list_all().data]
    assert types.count(ActivityType.PAYMENT_RECEIVED.value) == 2


def test_record_unknown_payment(services):
    result = services.payments.record_payment("pay-missing", "mpesa")

    assert result.status == ResultStatus.NOT_FOUND
    assert result.message == "Payment not found"
    assert services.activities.list_all().data == []


def test_record_with_invalid_method_is_rejected(services):
    payment = _payment(services)

    result = services.payments.record_payment(payment.id, "bitcoin")

    assert result.status == ResultStatus.INVALID
    assert services.payments.get_by_id(payment.id).data.status == "pending"


def test_get_by_tenant_and_lease(services):
    first = _payment(services, leaseId="lease-1", tenantId="user-t1")
    _payment(services, leaseId="lease-2", tenantId="user-t2")

    assert [p.id for p in services.payments.get_by_tenant("user-t1").data] == [first.id]
    assert [p.id for p in services.payments.get_by_lease("lease-1").data] == [first.id]
