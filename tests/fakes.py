"""In-memory fake gateways for testing.

These implement the same abstract interfaces as the real adapters but
only record the calls they receive.  No logging, no side effects.
"""

from __future__ import annotations

from boxoffice.domain.exceptions import PaymentError, SeatReservationError
from boxoffice.domain.gateway.payment_processor import PaymentProcessor
from boxoffice.domain.gateway.seat_allocator import SeatAllocator
from boxoffice.domain.model.value_objects import Money


class FakePaymentProcessor(PaymentProcessor):

    def __init__(self) -> None:
        self.charges: list[tuple[int, Money]] = []

    def charge(self, account_id: int, amount: Money) -> None:
        self.charges.append((account_id, amount))


class FakeSeatAllocator(SeatAllocator):

    def __init__(self) -> None:
        self.reservations: list[tuple[int, int]] = []

    def reserve(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))


class FailingPaymentProcessor(FakePaymentProcessor):

    def charge(self, account_id: int, amount: Money) -> None:
        raise PaymentError("card declined")


class FailingSeatAllocator(FakeSeatAllocator):

    def reserve(self, account_id: int, seat_count: int) -> None:
        raise SeatReservationError("screen is sold out")
