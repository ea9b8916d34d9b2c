"""Abstract gateway to the third-party payment service.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete adapters live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from boxoffice.domain.model.value_objects import Money


class PaymentProcessor(ABC):

    @abstractmethod
    def charge(self, account_id: int, amount: Money) -> None:
        """Take ``amount`` from the account.  Raises if the payment fails."""
