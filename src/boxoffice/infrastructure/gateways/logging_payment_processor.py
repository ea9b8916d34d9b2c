"""Stand-in PaymentProcessor that records the charge in the log."""

from __future__ import annotations

from loguru import logger

from boxoffice.domain.exceptions import PaymentError
from boxoffice.domain.gateway.payment_processor import PaymentProcessor
from boxoffice.domain.model.value_objects import Money


class LoggingPaymentProcessor(PaymentProcessor):

    # --- PaymentProcessor interface -------------------------------------------

    def charge(self, account_id: int, amount: Money) -> None:
        if account_id <= 0:
            raise PaymentError(f"Unknown account {account_id}")
        if amount.is_zero:
            raise PaymentError("Refusing to take a zero payment")
        logger.info("Charged {} to account {}", amount, account_id)
