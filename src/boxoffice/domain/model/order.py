"""AggregatedOrder — the totals derived from a list of ticket requests.

The aggregate is transient: it is computed fresh for every purchase and
never stored.  All of the purchase business rules are enforced here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from boxoffice.domain.exceptions import PurchaseRejected
from boxoffice.domain.model.ticket_request import TicketRequest, TicketType
from boxoffice.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
ADULT_PRICE = Money.of("25.00")
CHILD_PRICE = Money.of("15.00")
INFANT_PRICE = Money.of("0.00")
MAX_TICKETS_PER_PURCHASE = 25

TICKET_PRICES: dict[TicketType, Money] = {
    TicketType.ADULT: ADULT_PRICE,
    TicketType.CHILD: CHILD_PRICE,
    TicketType.INFANT: INFANT_PRICE,
}


@dataclass(frozen=True)
class AggregatedOrder:
    """Per-type ticket counts with the derived totals.

    Invariants:
    - ``total_seats`` excludes infants, who sit on an adult's lap
    - ``total_amount`` is adults and children at their fixed prices
    """

    adult_count: int = 0
    child_count: int = 0
    infant_count: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_requests(requests: Iterable[TicketRequest]) -> AggregatedOrder:
        """Sum the requested counts per ticket type.

        Pure: no rule is checked here beyond the ticket type being known,
        so the same requests always produce the same aggregate.
        """
        adults = children = infants = 0
        for request in requests:
            if request.type is TicketType.ADULT:
                adults += request.count
            elif request.type is TicketType.CHILD:
                children += request.count
            elif request.type is TicketType.INFANT:
                infants += request.count
            else:
                raise PurchaseRejected(f"Unknown ticket type: {request.type!r}")
        return AggregatedOrder(
            adult_count=adults, child_count=children, infant_count=infants
        )

    # --- Business rules -------------------------------------------------------

    def validate(self) -> None:
        """Check the purchase cap first, then the accompaniment rule."""
        if self.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise PurchaseRejected(
                f"Maximum of {MAX_TICKETS_PER_PURCHASE} tickets are allowed at a time!"
            )
        if self.adult_count == 0 and self.accompanied_count > 0:
            raise PurchaseRejected(
                "At least one adult ticket is required when purchasing "
                "Child or Infant tickets."
            )

    # --- Computed properties --------------------------------------------------

    @property
    def total_tickets(self) -> int:
        return self.adult_count + self.child_count + self.infant_count

    @property
    def total_seats(self) -> int:
        return self.adult_count + self.child_count

    @property
    def accompanied_count(self) -> int:
        """Tickets that may only be bought alongside an adult ticket."""
        return self.child_count + self.infant_count

    @property
    def total_amount(self) -> Money:
        return (
            TICKET_PRICES[TicketType.ADULT] * self.adult_count
            + TICKET_PRICES[TicketType.CHILD] * self.child_count
            + TICKET_PRICES[TicketType.INFANT] * self.infant_count
        )
