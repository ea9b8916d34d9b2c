"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from boxoffice.domain.model.value_objects import Money

CONFIRMATION_MESSAGE = "Congratulation! Successfully booked your seat."


@dataclass(frozen=True)
class TicketSpec:
    """Input: what the customer asked for (ticket type name + count)."""

    type_name: str
    count: int


@dataclass(frozen=True)
class PurchaseConfirmation:
    """Output: the outcome of a successful purchase."""

    account_id: int
    total_amount: Money
    total_seats: int
    total_tickets_booked: int
    message: str = CONFIRMATION_MESSAGE
