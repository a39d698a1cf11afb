"""
Plain-text rendering of customers and tickets for the console.

Each record becomes a block of "Label: value" lines closed by a separator
line of dashes.
"""

from helpdesk.models import Customer, Ticket

SEPARATOR = "-" * 35


def format_customer(customer: Customer) -> str:
    lines = [
        f"Customer ID: {customer.id}",
        f"Name: {customer.name}",
        f"Email: {customer.email}",
        f"Phone: {customer.phone}",
        f"Type: {customer.type.value}",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def format_ticket(ticket: Ticket) -> str:
    """Assigned To and Tags lines appear only when they have a value."""
    lines = [
        f"Ticket ID: {ticket.id}",
        f"Customer ID: {ticket.customer_id}",
        f"Description: {ticket.description}",
        f"Category: {ticket.category.value}",
        f"Priority: {ticket.priority.value}",
        f"Status: {ticket.status.value}",
    ]
    if ticket.is_assigned:
        lines.append(f"Assigned To: {ticket.assigned_to}")
    if ticket.tags:
        lines.append(f"Tags: {', '.join(ticket.tags)}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"
