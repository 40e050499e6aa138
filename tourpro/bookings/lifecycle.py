"""Allowed transitions for booking status and payment status.

Both tables are strict: anything not listed is rejected. Re-applying the
current value is always allowed so that repeated payments and idempotent
admin edits succeed.
"""

from typing import Dict, FrozenSet
from tourpro.enums import BookingStatus, PaymentStatus

STATUS_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}

PAYMENT_TRANSITIONS: Dict[PaymentStatus, FrozenSet[PaymentStatus]] = {
    PaymentStatus.UNPAID: frozenset({PaymentStatus.PARTIAL, PaymentStatus.PAID}),
    PaymentStatus.PARTIAL: frozenset({PaymentStatus.PAID, PaymentStatus.REFUNDED}),
    PaymentStatus.PAID: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.REFUNDED: frozenset(),
}


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    current, target = BookingStatus(current), BookingStatus(target)
    return current == target or target in STATUS_TRANSITIONS[current]


def can_transition_payment(current: PaymentStatus, target: PaymentStatus) -> bool:
    current, target = PaymentStatus(current), PaymentStatus(target)
    return current == target or target in PAYMENT_TRANSITIONS[current]
