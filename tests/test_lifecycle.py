import pytest

from tourpro.enums import BookingStatus, PaymentStatus
from tourpro.bookings.lifecycle import can_transition, can_transition_payment


@pytest.mark.parametrize("current,target", [
    (BookingStatus.PENDING, BookingStatus.CONFIRMED),
    (BookingStatus.PENDING, BookingStatus.CANCELLED),
    (BookingStatus.CONFIRMED, BookingStatus.COMPLETED),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
])
def test_allowed_status_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize("current,target", [
    (BookingStatus.PENDING, BookingStatus.COMPLETED),
    (BookingStatus.CANCELLED, BookingStatus.PENDING),
    (BookingStatus.CANCELLED, BookingStatus.CONFIRMED),
    (BookingStatus.COMPLETED, BookingStatus.CANCELLED),
    (BookingStatus.COMPLETED, BookingStatus.PENDING),
    (BookingStatus.CONFIRMED, BookingStatus.PENDING),
])
def test_rejected_status_transitions(current, target):
    assert not can_transition(current, target)


def test_same_status_is_always_allowed():
    for status in BookingStatus:
        assert can_transition(status, status)
    for status in PaymentStatus:
        assert can_transition_payment(status, status)


def test_accepts_stored_string_values():
    assert can_transition("Pending", "Confirmed")
    assert not can_transition_payment("Refunded", "Paid")


@pytest.mark.parametrize("current,target,allowed", [
    (PaymentStatus.UNPAID, PaymentStatus.PARTIAL, True),
    (PaymentStatus.UNPAID, PaymentStatus.PAID, True),
    (PaymentStatus.PARTIAL, PaymentStatus.PAID, True),
    (PaymentStatus.PARTIAL, PaymentStatus.REFUNDED, True),
    (PaymentStatus.PAID, PaymentStatus.REFUNDED, True),
    (PaymentStatus.UNPAID, PaymentStatus.REFUNDED, False),
    (PaymentStatus.PAID, PaymentStatus.UNPAID, False),
    (PaymentStatus.PAID, PaymentStatus.PARTIAL, False),
    (PaymentStatus.REFUNDED, PaymentStatus.PAID, False),
])
def test_payment_transitions(current, target, allowed):
    assert can_transition_payment(current, target) is allowed
