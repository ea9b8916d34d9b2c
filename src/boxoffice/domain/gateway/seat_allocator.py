"""Abstract gateway to the third-party seat reservation service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatAllocator(ABC):

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account.  Raises on failure."""
