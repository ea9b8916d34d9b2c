"""Application service: Purchase Tickets use case.

Validates the request, lets the AggregatedOrder enforce the business
rules, then takes the payment and reserves the seats.  Nothing outside
this handler is touched until every check has passed.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from boxoffice.application.dto import PurchaseConfirmation
from boxoffice.domain.exceptions import PurchaseRejected
from boxoffice.domain.gateway.payment_processor import PaymentProcessor
from boxoffice.domain.gateway.seat_allocator import SeatAllocator
from boxoffice.domain.model.order import AggregatedOrder
from boxoffice.domain.model.ticket_request import TicketRequest
from boxoffice.domain.model.value_objects import AccountId


class PurchaseOrchestrator:

    def __init__(
        self,
        payment_processor: PaymentProcessor,
        seat_allocator: SeatAllocator,
    ) -> None:
        if not isinstance(payment_processor, PaymentProcessor):
            raise PurchaseRejected(
                "Invalid dependency: payment_processor must be a PaymentProcessor"
            )
        if not isinstance(seat_allocator, SeatAllocator):
            raise PurchaseRejected(
                "Invalid dependency: seat_allocator must be a SeatAllocator"
            )
        self._payment_processor = payment_processor
        self._seat_allocator = seat_allocator

    def purchase(
        self, account_id: int, requests: Iterable[TicketRequest]
    ) -> PurchaseConfirmation:
        """Buy the requested tickets for an account.

        Steps:
        1. Validate the account id and the shape of the request list.
        2. Aggregate the requests and check the cap and adult rules.
        3. Charge the account, then reserve the seats.
        4. Return a confirmation with the computed totals.

        Raises PurchaseRejected on the first failed check or on any
        collaborator failure.
        """
        try:
            account, order = self.prepare(account_id, requests)
        except PurchaseRejected as exc:
            logger.info("Purchase rejected for account {}: {}", account_id, exc.reason)
            raise

        self._charge(account, order)
        self._reserve(account, order)

        logger.info(
            "Booked {} tickets ({} seats) for account {}, paid {}",
            order.total_tickets,
            order.total_seats,
            account.value,
            order.total_amount,
        )
        return PurchaseConfirmation(
            account_id=account.value,
            total_amount=order.total_amount,
            total_seats=order.total_seats,
            total_tickets_booked=order.total_tickets,
        )

    @staticmethod
    def prepare(
        account_id: int, requests: Iterable[TicketRequest]
    ) -> tuple[AccountId, AggregatedOrder]:
        """Run every validation step and return the account and aggregate.

        Pure: no collaborator is called, so it is safe to use for a quote.
        Any non-string iterable of requests is accepted.
        """
        account = AccountId(account_id)

        if requests is None:
            requests = []
        if isinstance(requests, (str, bytes)) or not isinstance(requests, Iterable):
            raise PurchaseRejected(
                "Invalid ticket request! Ticket requests must be given as a collection."
            )
        requests = list(requests)
        if not requests:
            raise PurchaseRejected(
                "Invalid ticket request! At least one ticket request is required."
            )
        for request in requests:
            if not isinstance(request, TicketRequest):
                raise PurchaseRejected(
                    "Invalid ticket! Requested ticket is not a TicketRequest."
                )

        order = AggregatedOrder.from_requests(requests)
        logger.debug(
            "Aggregated {} tickets, {} seats, {} adults, amount {}",
            order.total_tickets,
            order.total_seats,
            order.adult_count,
            order.total_amount,
        )
        order.validate()
        return account, order

    # --- Collaborator calls ---------------------------------------------------

    def _charge(self, account: AccountId, order: AggregatedOrder) -> None:
        try:
            self._payment_processor.charge(account.value, order.total_amount)
        except PurchaseRejected:
            raise
        except Exception as exc:
            logger.warning("Payment failed for account {}: {}", account.value, exc)
            raise PurchaseRejected(f"Payment failed: {exc}") from exc

    def _reserve(self, account: AccountId, order: AggregatedOrder) -> None:
        try:
            self._seat_allocator.reserve(account.value, order.total_seats)
        except PurchaseRejected:
            raise
        except Exception as exc:
            logger.warning(
                "Seat reservation failed for account {}: {}", account.value, exc
            )
            raise PurchaseRejected(f"Seat reservation failed: {exc}") from exc
