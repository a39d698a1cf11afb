"""
Customer support desk.

This package contains the whole domain core:
- Domain models (Customer, Ticket and their enums)
- In-memory repositories
- Mock notification channels and the broadcaster that fans out to them
- Customer and ticket services
- Wiring (build_help_desk) that creates and owns all of the above
"""

from helpdesk.models import (
    Customer,
    CustomerType,
    Ticket,
    TicketStatus,
    Priority,
    TicketCategory,
)
from helpdesk.repositories import InMemoryCustomerRepository, InMemoryTicketRepository
from helpdesk.audit import AuditLogger
from helpdesk.channels import (
    EmailChannel,
    SMSChannel,
    PushChannel,
    ConsoleChannel,
    NotificationResult,
    build_channel,
)
from helpdesk.broadcaster import NotificationBroadcaster
from helpdesk.services import CustomerService, TicketService, NO_TICKET
from helpdesk.config import DeskConfig
from helpdesk.desk import HelpDesk, build_help_desk

__all__ = [
    "Customer",
    "CustomerType",
    "Ticket",
    "TicketStatus",
    "Priority",
    "TicketCategory",
    "InMemoryCustomerRepository",
    "InMemoryTicketRepository",
    "AuditLogger",
    "EmailChannel",
    "SMSChannel",
    "PushChannel",
    "ConsoleChannel",
    "NotificationResult",
    "build_channel",
    "NotificationBroadcaster",
    "CustomerService",
    "TicketService",
    "NO_TICKET",
    "DeskConfig",
    "HelpDesk",
    "build_help_desk",
]
