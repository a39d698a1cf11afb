"""
Ticket service.

Handles ticket creation and status changes. Both operations notify the
owning customer through the NotificationBroadcaster and write an audit line.

Business rules applied at creation:
- High and Critical tickets are assigned to an agent straight away
- Every ticket is tagged "new", plus one tag chosen by category
- Status always starts at Open

Failures (unknown customer, unknown ticket) are reported through the return
value - "" from create_ticket, False from update_ticket_status - together
with an audit line. Nothing is raised.
"""

import logging
from typing import Optional

from helpdesk.audit import AuditSink
from helpdesk.broadcaster import NotificationBroadcaster
from helpdesk.models import Priority, Ticket, TicketCategory, TicketStatus
from helpdesk.repositories import CustomerRepository, TicketRepository

logger = logging.getLogger("ticket_service")

TICKET_ID_PREFIX = "TKT-"

# Returned by create_ticket when the customer does not exist
NO_TICKET = ""

AUTO_ASSIGNED_AGENTS = {
    Priority.CRITICAL: "Senior-Agent-001",
    Priority.HIGH: "Agent-002",
}

CATEGORY_TAGS = {
    TicketCategory.TECHNICAL: "technical-support",
    TicketCategory.BILLING: "finance",
    TicketCategory.COMPLAINT: "urgent",
    TicketCategory.FEATURE_REQUEST: "product",
}


def auto_assigned_agent(priority: Priority) -> str:
    """Agent a new ticket goes to, or "" when it stays unassigned."""
    return AUTO_ASSIGNED_AGENTS.get(priority, "")


def default_tags(category: TicketCategory) -> list[str]:
    """Tags every new ticket starts with: "new" then the category tag, if any."""
    tags = ["new"]
    if category in CATEGORY_TAGS:
        tags.append(CATEGORY_TAGS[category])
    return tags


class TicketService:
    """
    Ticket creation, status updates and listing.

    Example:
        service = TicketService(tickets, customers, broadcaster, audit)

        ticket_id = service.create_ticket("CUST-1001", "printer broken", Priority.HIGH)
        service.update_ticket_status(ticket_id, TicketStatus.RESOLVED)
    """

    def __init__(
        self,
        ticket_repository: TicketRepository,
        customer_repository: CustomerRepository,
        broadcaster: NotificationBroadcaster,
        audit: AuditSink,
        counter_start: int = 1000,
    ):
        """
        Args:
            ticket_repository: Where tickets are stored
            customer_repository: Used to check the owner and find their email
            broadcaster: Delivers customer notifications
            audit: Sink for audit lines
            counter_start: Last "used" number; the first ID is counter_start + 1
        """
        self.tickets = ticket_repository
        self.customers = customer_repository
        self.broadcaster = broadcaster
        self.audit = audit
        self._counter = counter_start

    def _next_id(self) -> str:
        self._counter += 1
        return f"{TICKET_ID_PREFIX}{self._counter}"

    def create_ticket(
        self,
        customer_id: str,
        description: str,
        priority: Priority = Priority.MEDIUM,
        category: TicketCategory = TicketCategory.GENERAL,
    ) -> str:
        """
        Open a ticket for an existing customer and notify them.

        Args:
            customer_id: Owner of the ticket; must already be registered
            description: Free text problem statement
            priority: Ticket urgency
            category: Ticket category

        Returns:
            The new ticket ID, or NO_TICKET ("") if the customer is unknown.
            A failed call does not use up an ID.
        """
        customer = self.customers.find_by_id(customer_id)
        if not customer:
            self.audit.log(f"Failed to create ticket: Customer not found - {customer_id}")
            return NO_TICKET

        ticket_id = self._next_id()
        ticket = Ticket(
            id=ticket_id,
            customer_id=customer_id,
            description=description,
            status=TicketStatus.OPEN,
            priority=priority,
            category=category,
            assigned_to=auto_assigned_agent(priority),
            tags=default_tags(category),
        )
        self.tickets.save(ticket)
        self.audit.log(
            f"Ticket created: {ticket_id} for customer {customer.name} "
            f"(Category: {ticket.category.value}, Priority: {ticket.priority.value})"
        )

        message = (
            f"Your ticket {ticket_id} has been created. "
            f"Category: {ticket.category.value}. "
            f"Description: {description}"
        )
        self.broadcaster.notify(customer.email, message)
        return ticket_id

    def update_ticket_status(self, ticket_id: str, new_status: TicketStatus) -> bool:
        """
        Move a ticket to `new_status` and tell the customer.

        Any status may follow any other. If the ticket's customer can no
        longer be found the update still happens, only the notification is
        skipped.

        Returns:
            True if the ticket was updated, False if it does not exist
        """
        ticket = self.tickets.find_by_id(ticket_id)
        if not ticket:
            self.audit.log(f"Failed to update ticket: Ticket not found - {ticket_id}")
            return False

        previous_status = ticket.status
        ticket.status = new_status
        self.tickets.save(ticket)
        logger.debug(f"Ticket {ticket_id}: {previous_status.value} -> {ticket.status.value}")

        customer = self.customers.find_by_id(ticket.customer_id)
        if customer:
            message = f"Your ticket {ticket_id} status has been updated to: {ticket.status.value}"
            self.broadcaster.notify(customer.email, message)

        self.audit.log(f"Ticket status updated: {ticket_id} to {ticket.status.value}")
        return True

    def get_ticket(self, ticket_id: str) -> Optional[Ticket]:
        return self.tickets.find_by_id(ticket_id)

    def get_all_tickets(self) -> list[Ticket]:
        return self.tickets.find_all()
