"""
In-memory repositories for customers and tickets.

Each repository is a keyed store: save inserts or overwrites by ID, lookups
return None for a missing key, and find_all returns records in the order
they were first saved.

Design decisions:
- Repositories are plain objects owned by the HelpDesk wiring, not
  module-level singletons; services receive them by reference
- save() stores a copy, so changing an object after saving it does not
  touch the store
- find_by_id() and find_all() return the stored objects themselves; a
  change made to one is visible in the store at once
- Overwriting an ID keeps its original position in find_all()
- No locking: the desk runs on a single thread of control
"""

from typing import Optional, Protocol

from helpdesk.models import Customer, Ticket


class CustomerRepository(Protocol):
    """Storage contract the customer service depends on."""

    def save(self, customer: Customer) -> None:
        ...

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        ...

    def find_all(self) -> list[Customer]:
        ...


class TicketRepository(Protocol):
    """Storage contract the ticket service depends on."""

    def save(self, ticket: Ticket) -> None:
        ...

    def find_by_id(self, ticket_id: str) -> Optional[Ticket]:
        ...

    def find_all(self) -> list[Ticket]:
        ...


class InMemoryCustomerRepository:
    """Process-lifetime customer store keyed by customer ID."""

    def __init__(self):
        self._customers: dict[str, Customer] = {}

    def save(self, customer: Customer) -> None:
        """Insert or replace the customer stored under `customer.id`."""
        self._customers[customer.id] = customer.model_copy()

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def find_all(self) -> list[Customer]:
        """All customers, in the order their IDs were first saved."""
        return list(self._customers.values())

    def __len__(self) -> int:
        return len(self._customers)


class InMemoryTicketRepository:
    """
    Process-lifetime ticket store keyed by ticket ID.

    find_by_id hands back the stored ticket itself; the ticket service
    mutates it and saves it again to record the change.
    """

    def __init__(self):
        self._tickets: dict[str, Ticket] = {}

    def save(self, ticket: Ticket) -> None:
        """Insert or replace the ticket stored under `ticket.id`."""
        self._tickets[ticket.id] = ticket.model_copy(deep=True)

    def find_by_id(self, ticket_id: str) -> Optional[Ticket]:
        return self._tickets.get(ticket_id)

    def find_all(self) -> list[Ticket]:
        """All tickets, in the order their IDs were first saved."""
        return list(self._tickets.values())

    def __len__(self) -> int:
        return len(self._tickets)
