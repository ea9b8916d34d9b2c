"""Stand-in SeatAllocator that records the reservation in the log."""

from __future__ import annotations

from loguru import logger

from boxoffice.domain.exceptions import SeatReservationError
from boxoffice.domain.gateway.seat_allocator import SeatAllocator


class LoggingSeatAllocator(SeatAllocator):

    # --- SeatAllocator interface ----------------------------------------------

    def reserve(self, account_id: int, seat_count: int) -> None:
        if account_id <= 0:
            raise SeatReservationError(f"Unknown account {account_id}")
        if seat_count <= 0:
            raise SeatReservationError(
                f"Seat count must be positive, got {seat_count}"
            )
        logger.info("Reserved {} seats for account {}", seat_count, account_id)
