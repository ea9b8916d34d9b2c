"""CLI commands for buying tickets."""

from __future__ import annotations

import click

from boxoffice.application.dto import TicketSpec
from boxoffice.domain.exceptions import DomainException
from boxoffice.domain.model.order import MAX_TICKETS_PER_PURCHASE, TICKET_PRICES
from boxoffice.domain.model.ticket_request import TicketRequest
from boxoffice.infrastructure.bootstrap import purchase_orchestrator


def _parse_tickets(raw: str) -> list[TicketSpec]:
    """Parse 'ADULT:2,CHILD:4' into a TicketSpec list."""
    specs: list[TicketSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'Type:Count'."
            )
        name, count_str = pair.rsplit(":", 1)
        try:
            count = int(count_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid count '{count_str}' for ticket type '{name}'."
            )
        specs.append(TicketSpec(type_name=name.strip(), count=count))
    return specs


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID paying for the tickets.")
@click.option("--tickets", required=True, help="Tickets as 'Type:Count,Type:Count'.")
def purchase(account_id: int, tickets: str) -> None:
    """Buy tickets and reserve seats for an account."""
    specs = _parse_tickets(tickets)
    orchestrator = purchase_orchestrator()

    try:
        requests = [TicketRequest.of(spec.type_name, spec.count) for spec in specs]
        confirmation = orchestrator.purchase(account_id, requests)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(confirmation.message)
    click.echo(f"Account:  {confirmation.account_id}")
    click.echo(f"Tickets:  {confirmation.total_tickets_booked}")
    click.echo(f"Seats:    {confirmation.total_seats}")
    click.echo(f"Paid:     {confirmation.total_amount}")


@click.command("prices")
def prices() -> None:
    """Show ticket prices and the per-purchase limit."""
    click.echo(f"{'Type':<10} {'Price':>10}")
    click.echo("-" * 21)
    for ticket_type, price in TICKET_PRICES.items():
        click.echo(f"{ticket_type.value:<10} {str(price):>10}")
    click.echo()
    click.echo(f"Maximum {MAX_TICKETS_PER_PURCHASE} tickets per purchase.")
