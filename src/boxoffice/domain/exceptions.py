"""Domain-level exceptions.

Every rejected purchase is expressed as a PurchaseRejected so the CLI layer
can catch it uniformly and show the reason to the customer.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class PurchaseRejected(DomainException):
    """A ticket purchase could not be completed.

    Raised for every validation failure and for any failure of the payment
    or seat reservation collaborators.  ``reason`` is safe to show to the
    end user.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class GatewayError(Exception):
    """Raised by a third-party gateway adapter when a call fails."""


class PaymentError(GatewayError):
    """The payment processor refused or failed to take the payment."""


class SeatReservationError(GatewayError):
    """The seat allocator refused or failed to reserve the seats."""
