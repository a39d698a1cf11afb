"""
Startup wiring for the support desk.

The HelpDesk owns the long-lived state of a run: both repositories, the
audit sink and the notification broadcaster. Services get these by
reference, so there are no hidden module-level singletons and a test can
build as many independent desks as it likes.
"""

from dataclasses import dataclass
from typing import Optional

from helpdesk.audit import AuditLogger, AuditSink
from helpdesk.broadcaster import NotificationBroadcaster
from helpdesk.channels import build_channel
from helpdesk.config import DeskConfig
from helpdesk.repositories import InMemoryCustomerRepository, InMemoryTicketRepository
from helpdesk.services.customer import CustomerService
from helpdesk.services.ticket import TicketService


@dataclass
class HelpDesk:
    """Everything a running desk needs, created together."""
    config: DeskConfig
    audit: AuditSink
    customer_repository: InMemoryCustomerRepository
    ticket_repository: InMemoryTicketRepository
    broadcaster: NotificationBroadcaster
    customers: CustomerService
    tickets: TicketService


def build_help_desk(
    config: Optional[DeskConfig] = None,
    audit: Optional[AuditSink] = None,
) -> HelpDesk:
    """
    Create a fully wired desk.

    Args:
        config: Settings; defaults to DeskConfig()
        audit: Audit sink; defaults to a new AuditLogger

    Returns:
        A HelpDesk with channels registered in configured order
    """
    config = config or DeskConfig()
    audit = audit or AuditLogger()

    customer_repository = InMemoryCustomerRepository()
    ticket_repository = InMemoryTicketRepository()

    broadcaster = NotificationBroadcaster(audit=audit)
    for name in config.channels:
        broadcaster.add_channel(build_channel(name, fail_rate=config.channel_fail_rate))

    customers = CustomerService(
        repository=customer_repository,
        audit=audit,
        counter_start=config.counter_start,
    )
    tickets = TicketService(
        ticket_repository=ticket_repository,
        customer_repository=customer_repository,
        broadcaster=broadcaster,
        audit=audit,
        counter_start=config.counter_start,
    )

    return HelpDesk(
        config=config,
        audit=audit,
        customer_repository=customer_repository,
        ticket_repository=ticket_repository,
        broadcaster=broadcaster,
        customers=customers,
        tickets=tickets,
    )
