"""
Scripted demonstration of the support desk.

Walks through a typical support flow without any user input so the audit
trail and notifications can be watched in the logs.
"""

from dataclasses import dataclass
from typing import Optional

from helpdesk.channels import NotificationResult
from helpdesk.desk import HelpDesk, build_help_desk
from helpdesk.formatting import format_customer, format_ticket
from helpdesk.models import CustomerType, Priority, TicketCategory, TicketStatus


@dataclass
class DemoOutcome:
    """What the demo produced, for callers that want to check it."""
    customer_id: str
    ticket_id: str
    status_updated: bool
    notifications: list[NotificationResult]
    audit_lines: list[str]


def run_support_demo(desk: Optional[HelpDesk] = None) -> DemoOutcome:
    """
    Demonstrate registration, ticket creation and a status change.

    This shows:
    1. CustomerService registers Alice and assigns CUST-1001
    2. TicketService opens a High/Technical ticket, auto-assigns Agent-002
       and tags it "new", "technical-support"
    3. The broadcaster notifies Alice on every channel
    4. The ticket moves to In Progress and Alice is notified again
    """
    desk = desk or build_help_desk()
    notifications: list[NotificationResult] = []

    print("\n" + "=" * 70)
    print("SUPPORT DESK DEMO: Register, open a ticket, work on it")
    print("=" * 70 + "\n")

    customer_id = desk.customers.register_customer(
        "Alice", "a@x.com", "555-0001", CustomerType.REGULAR
    )

    print("-" * 70)
    print(f"ACTION: Opening a ticket for {customer_id}")
    print("-" * 70 + "\n")

    ticket_id = desk.tickets.create_ticket(
        customer_id, "printer broken", Priority.HIGH, TicketCategory.TECHNICAL
    )
    status_updated = desk.tickets.update_ticket_status(ticket_id, TicketStatus.IN_PROGRESS)

    for channel in desk.broadcaster.channels:
        notifications.extend(getattr(channel, "sent_messages", []))

    print("\nCustomer:")
    print(format_customer(desk.customers.get_customer(customer_id)))
    print("Ticket:")
    print(format_ticket(desk.tickets.get_ticket(ticket_id)))

    print("Notifications sent:")
    for msg in notifications:
        print(f"  {msg}")

    return DemoOutcome(
        customer_id=customer_id,
        ticket_id=ticket_id,
        status_updated=status_updated,
        notifications=notifications,
        audit_lines=list(getattr(desk.audit, "entries", [])),
    )
