"""
Application services for the support desk.

- CustomerService: registration and customer lookup
- TicketService: ticket creation, status updates and notifications
"""

from helpdesk.services.customer import CustomerService
from helpdesk.services.ticket import TicketService, NO_TICKET

__all__ = [
    "CustomerService",
    "TicketService",
    "NO_TICKET",
]
