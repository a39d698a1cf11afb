"""
Tests for TicketService.

Covers ticket creation rules (IDs, auto-assignment, default tags), the
customer-not-found path, status updates and the notifications both send.
"""

import pytest

from helpdesk.broadcaster import NotificationBroadcaster
from helpdesk.channels import EmailChannel, SMSChannel
from helpdesk.models import CustomerType, Priority, Ticket, TicketCategory, TicketStatus
from helpdesk.services.ticket import (
    NO_TICKET,
    TicketService,
    auto_assigned_agent,
    default_tags,
)


class TestCreateTicket:

    def test_scenario_alice(self, ticket_service, alice_id, email_channel, sms_channel):
        """Register Alice, open a High/Technical ticket, check everything."""
        assert alice_id == "CUST-1001"

        ticket_id = ticket_service.create_ticket(
            alice_id, "printer broken", Priority.HIGH, TicketCategory.TECHNICAL
        )

        assert ticket_id == "TKT-1001"
        ticket = ticket_service.get_ticket(ticket_id)
        assert ticket.assigned_to == "Agent-002"
        assert ticket.tags == ["new", "technical-support"]
        assert ticket.status == TicketStatus.OPEN
        assert ticket.customer_id == alice_id

        email = email_channel.find_message_to("a@x.com")
        assert email is not None
        assert email.body == (
            "Your ticket TKT-1001 has been created. "
            "Category: Technical. Description: printer broken"
        )
        assert sms_channel.find_message_to("a@x.com") is not None

    def test_ids_increase(self, ticket_service, alice_id):
        ids = [ticket_service.create_ticket(alice_id, f"issue {n}") for n in range(3)]
        assert ids == ["TKT-1001", "TKT-1002", "TKT-1003"]

    def test_default_priority_and_category(self, ticket_service, alice_id):
        ticket = ticket_service.get_ticket(ticket_service.create_ticket(alice_id, "question"))

        assert ticket.priority == Priority.MEDIUM
        assert ticket.category == TicketCategory.GENERAL
        assert ticket.assigned_to == ""
        assert ticket.tags == ["new"]

    @pytest.mark.parametrize("priority,agent", [
        (Priority.CRITICAL, "Senior-Agent-001"),
        (Priority.HIGH, "Agent-002"),
        (Priority.MEDIUM, ""),
        (Priority.LOW, ""),
    ])
    def test_auto_assignment(self, ticket_service, alice_id, priority, agent):
        ticket_id = ticket_service.create_ticket(alice_id, "x", priority)

        assert ticket_service.get_ticket(ticket_id).assigned_to == agent
        assert auto_assigned_agent(priority) == agent

    @pytest.mark.parametrize("category,tags", [
        (TicketCategory.TECHNICAL, ["new", "technical-support"]),
        (TicketCategory.BILLING, ["new", "finance"]),
        (TicketCategory.COMPLAINT, ["new", "urgent"]),
        (TicketCategory.FEATURE_REQUEST, ["new", "product"]),
        (TicketCategory.GENERAL, ["new"]),
    ])
    def test_default_tags(self, ticket_service, alice_id, category, tags):
        ticket_id = ticket_service.create_ticket(alice_id, "x", Priority.LOW, category)

        assert ticket_service.get_ticket(ticket_id).tags == tags
        assert default_tags(category) == tags

    def test_creation_is_audited(self, ticket_service, alice_id, audit):
        audit.clear()

        ticket_service.create_ticket(alice_id, "x", Priority.CRITICAL, TicketCategory.BILLING)

        assert audit.entries[0] == (
            "Ticket created: TKT-1001 for customer Alice (Category: Billing, Priority: Critical)"
        )

    def test_audit_uses_display_name(self, ticket_service, vip_id, audit):
        ticket_service.create_ticket(vip_id, "x")
        assert audit.contains("for customer [VIP] Jane")


class TestCreateTicketUnknownCustomer:

    def test_returns_sentinel(self, ticket_service):
        assert ticket_service.create_ticket("CUST-404", "x") == NO_TICKET

    def test_no_side_effects(self, ticket_service, ticket_repo, email_channel, sms_channel, audit):
        audit.clear()

        ticket_service.create_ticket("CUST-404", "x", Priority.CRITICAL)

        assert ticket_repo.find_all() == []
        assert email_channel.get_sent_count() == 0
        assert sms_channel.get_sent_count() == 0
        assert audit.entries == ["Failed to create ticket: Customer not found - CUST-404"]

    def test_does_not_consume_an_id(self, ticket_service, alice_id):
        first = ticket_service.create_ticket(alice_id, "x")
        ticket_service.create_ticket("CUST-404", "x")
        second = ticket_service.create_ticket(alice_id, "y")

        assert (first, second) == ("TKT-1001", "TKT-1002")


class TestUpdateTicketStatus:

    @pytest.fixture
    def ticket_id(self, ticket_service, alice_id) -> str:
        return ticket_service.create_ticket(alice_id, "printer broken", Priority.HIGH)

    def test_updates_status(self, ticket_service, ticket_id):
        assert ticket_service.update_ticket_status(ticket_id, TicketStatus.RESOLVED) is True
        assert ticket_service.get_ticket(ticket_id).status == TicketStatus.RESOLVED

    def test_any_transition_allowed(self, ticket_service, ticket_id):
        """Closed -> Open is allowed; transitions aren't restricted."""
        ticket_service.update_ticket_status(ticket_id, TicketStatus.CLOSED)
        ticket_service.update_ticket_status(ticket_id, TicketStatus.OPEN)

        assert ticket_service.get_ticket(ticket_id).status == TicketStatus.OPEN

    def test_other_fields_untouched(self, ticket_service, ticket_id):
        ticket_service.update_ticket_status(ticket_id, TicketStatus.IN_PROGRESS)

        ticket = ticket_service.get_ticket(ticket_id)
        assert ticket.assigned_to == "Agent-002"
        assert ticket.tags == ["new"]
        assert ticket.description == "printer broken"

    def test_customer_is_notified(self, ticket_service, ticket_id, email_channel):
        email_channel.clear_history()

        ticket_service.update_ticket_status(ticket_id, TicketStatus.IN_PROGRESS)

        assert email_channel.find_message_to("a@x.com").body == (
            f"Your ticket {ticket_id} status has been updated to: In Progress"
        )

    def test_update_is_audited_after_notification(self, ticket_service, ticket_id, audit):
        audit.clear()

        ticket_service.update_ticket_status(ticket_id, TicketStatus.CLOSED)

        assert audit.entries[-1] == f"Ticket status updated: {ticket_id} to Closed"
        assert audit.entries[0].startswith("Notification sent via Email")

    def test_missing_ticket(self, ticket_service, ticket_id, audit, email_channel):
        email_channel.clear_history()
        audit.clear()
        before = [t.model_copy(deep=True) for t in ticket_service.get_all_tickets()]

        assert ticket_service.update_ticket_status("TKT-404", TicketStatus.CLOSED) is False

        assert ticket_service.get_all_tickets() == before
        assert email_channel.get_sent_count() == 0
        assert audit.entries == ["Failed to update ticket: Ticket not found - TKT-404"]

    def test_orphaned_ticket_skips_notification(self, ticket_repo, customer_repo, broadcaster, audit,
                                                email_channel):
        """A ticket whose customer is gone is still updated, just not notified."""
        service = TicketService(ticket_repo, customer_repo, broadcaster, audit)
        ticket_repo.save(Ticket(id="TKT-9", customer_id="CUST-GONE", description="x"))

        assert service.update_ticket_status("TKT-9", TicketStatus.RESOLVED) is True

        assert ticket_repo.find_by_id("TKT-9").status == TicketStatus.RESOLVED
        assert email_channel.get_sent_count() == 0
        assert audit.entries[-1] == "Ticket status updated: TKT-9 to Resolved"


class TestListing:

    def test_get_all_tickets(self, ticket_service, alice_id):
        ticket_service.create_ticket(alice_id, "a")
        ticket_service.create_ticket(alice_id, "b")

        assert [t.description for t in ticket_service.get_all_tickets()] == ["a", "b"]

    def test_get_missing_ticket(self, ticket_service):
        assert ticket_service.get_ticket("TKT-404") is None


def test_premium_customer_end_to_end(customer_service, ticket_service, email_channel):
    customer_id = customer_service.register_customer(
        "Bob", "bob@example.com", "555-0003", CustomerType.PREMIUM
    )
    ticket_id = ticket_service.create_ticket(
        customer_id, "refund", Priority.LOW, TicketCategory.BILLING
    )

    assert ticket_id == "TKT-1001"
    assert email_channel.find_message_to("bob@example.com") is not None


class TestNotificationFailures:

    def test_raising_channel_does_not_lose_ticket(self, ticket_repo, customer_repo, audit, alice_id):
        """A channel that raises neither aborts creation nor starves later channels."""

        class BrokenChannel:
            name = "Broken"

            def send(self, recipient, message):
                raise ConnectionError("gateway down")

        email, sms = EmailChannel(), SMSChannel()
        broadcaster = NotificationBroadcaster(audit=audit)
        for channel in (email, BrokenChannel(), sms):
            broadcaster.add_channel(channel)
        service = TicketService(ticket_repo, customer_repo, broadcaster, audit)

        ticket_id = service.create_ticket(alice_id, "printer broken", Priority.HIGH)

        assert ticket_id == "TKT-1001"
        assert ticket_repo.find_by_id(ticket_id) is not None
        assert sms.find_message_to("a@x.com") is not None
        assert service.update_ticket_status(ticket_id, TicketStatus.CLOSED) is True


class TestPlainStringInputs:

    def test_labels_come_from_coerced_enums(self, ticket_service, alice_id, audit, email_channel):
        """Plain label strings are accepted for category, priority and status."""
        audit.clear()

        ticket_id = ticket_service.create_ticket(alice_id, "refund", "High", "Billing")

        assert ticket_id == "TKT-1001"
        ticket = ticket_service.get_ticket(ticket_id)
        assert ticket.category == TicketCategory.BILLING
        assert ticket.assigned_to == "Agent-002"
        assert audit.entries[0] == (
            "Ticket created: TKT-1001 for customer Alice (Category: Billing, Priority: High)"
        )
        assert "Category: Billing." in email_channel.find_message_to("a@x.com").body

        assert ticket_service.update_ticket_status(ticket_id, "Resolved") is True
        assert audit.entries[-1] == "Ticket status updated: TKT-1001 to Resolved"
