"""
Shared pytest fixtures for the support desk tests.

Every fixture builds fresh objects so tests don't interfere with each other.
"""

import pytest

from helpdesk.audit import AuditLogger
from helpdesk.broadcaster import NotificationBroadcaster
from helpdesk.channels import EmailChannel, SMSChannel, PushChannel
from helpdesk.config import DeskConfig
from helpdesk.desk import HelpDesk, build_help_desk
from helpdesk.models import CustomerType
from helpdesk.repositories import InMemoryCustomerRepository, InMemoryTicketRepository
from helpdesk.services.customer import CustomerService
from helpdesk.services.ticket import TicketService


@pytest.fixture
def audit() -> AuditLogger:
    """Fresh audit sink that records every line."""
    return AuditLogger()


@pytest.fixture
def customer_repo() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def ticket_repo() -> InMemoryTicketRepository:
    return InMemoryTicketRepository()


@pytest.fixture
def email_channel() -> EmailChannel:
    """Fresh EmailChannel for each test."""
    return EmailChannel(fail_rate=0.0)


@pytest.fixture
def sms_channel() -> SMSChannel:
    """Fresh SMSChannel for each test."""
    return SMSChannel(fail_rate=0.0)


@pytest.fixture
def push_channel() -> PushChannel:
    """Fresh PushChannel for each test."""
    return PushChannel(fail_rate=0.0)


@pytest.fixture
def broadcaster(audit, email_channel, sms_channel) -> NotificationBroadcaster:
    """Broadcaster with email then SMS registered."""
    b = NotificationBroadcaster(audit=audit)
    b.add_channel(email_channel)
    b.add_channel(sms_channel)
    return b


@pytest.fixture
def customer_service(customer_repo, audit) -> CustomerService:
    return CustomerService(repository=customer_repo, audit=audit)


@pytest.fixture
def ticket_service(ticket_repo, customer_repo, broadcaster, audit) -> TicketService:
    return TicketService(
        ticket_repository=ticket_repo,
        customer_repository=customer_repo,
        broadcaster=broadcaster,
        audit=audit,
    )


@pytest.fixture
def desk() -> HelpDesk:
    """Fully wired desk with the default channels (email, sms, push)."""
    return build_help_desk(DeskConfig())


# =============================================================================
# Customer Fixtures
# =============================================================================

@pytest.fixture
def alice_id(customer_service: CustomerService) -> str:
    """Alice, a Regular customer registered first (CUST-1001)."""
    return customer_service.register_customer(
        "Alice", "a@x.com", "555-0001", CustomerType.REGULAR
    )


@pytest.fixture
def vip_id(customer_service: CustomerService) -> str:
    """Jane, a VIP customer."""
    return customer_service.register_customer(
        "Jane", "jane@example.com", "555-0002", CustomerType.VIP
    )
