"""Ticket types and the immutable request for a number of tickets of one type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from boxoffice.domain.exceptions import PurchaseRejected
from boxoffice.domain.model.value_objects import is_positive_int

INVALID_TYPE_MESSAGE = "type must be ADULT, CHILD, or INFANT"


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @staticmethod
    def parse(name: str) -> TicketType:
        """Resolve a case-insensitive type name such as ``"child"``."""
        if not isinstance(name, str):
            raise PurchaseRejected(INVALID_TYPE_MESSAGE)
        try:
            return TicketType(name.strip().upper())
        except ValueError as exc:
            raise PurchaseRejected(INVALID_TYPE_MESSAGE) from exc


@dataclass(frozen=True)
class TicketRequest:
    """A request for ``count`` tickets of a single ``type``.

    Several requests of the same type may appear in one purchase; they are
    summed when the order is aggregated.
    """

    type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.type, TicketType):
            raise PurchaseRejected(INVALID_TYPE_MESSAGE)
        if not is_positive_int(self.count):
            raise PurchaseRejected(
                f"Invalid number of tickets! Got {self.count!r} {self.type.value} "
                f"tickets, expected a positive integer."
            )

    @staticmethod
    def of(type_name: str, count: int) -> TicketRequest:
        return TicketRequest(type=TicketType.parse(type_name), count=count)

    def __str__(self) -> str:
        return f"{self.count} x {self.type.value}"
