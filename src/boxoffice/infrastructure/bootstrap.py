"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from boxoffice.application.purchase_tickets import PurchaseOrchestrator
from boxoffice.infrastructure.gateways.logging_payment_processor import (
    LoggingPaymentProcessor,
)
from boxoffice.infrastructure.gateways.logging_seat_allocator import (
    LoggingSeatAllocator,
)


def payment_processor() -> LoggingPaymentProcessor:
    return LoggingPaymentProcessor()


def seat_allocator() -> LoggingSeatAllocator:
    return LoggingSeatAllocator()


def purchase_orchestrator() -> PurchaseOrchestrator:
    return PurchaseOrchestrator(
        payment_processor=payment_processor(),
        seat_allocator=seat_allocator(),
    )
