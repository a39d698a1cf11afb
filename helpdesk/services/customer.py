"""
Customer service.

Registers customers and answers customer lookups. Registration assigns the
next CUST-<n> ID, decorates the name with the customer's tier prefix, stores
the record and writes one audit line.
"""

import logging
from typing import Optional

from helpdesk.audit import AuditSink
from helpdesk.models import Customer, CustomerType
from helpdesk.repositories import CustomerRepository

logger = logging.getLogger("customer_service")

CUSTOMER_ID_PREFIX = "CUST-"

# Tier -> text put in front of the customer's name
TYPE_PREFIXES = {
    CustomerType.VIP: "[VIP] ",
    CustomerType.PREMIUM: "[PREMIUM] ",
    CustomerType.REGULAR: "",
}


def display_name(name: str, customer_type: CustomerType) -> str:
    """Prefix `name` according to the customer tier ("[VIP] Jane")."""
    return TYPE_PREFIXES[customer_type] + name


class CustomerService:
    """
    Customer registration and lookup.

    The ID counter belongs to this instance: two services sharing one
    repository would hand out the same IDs.
    """

    def __init__(
        self,
        repository: CustomerRepository,
        audit: AuditSink,
        counter_start: int = 1000,
    ):
        """
        Args:
            repository: Where customers are stored
            audit: Sink for audit lines
            counter_start: Last "used" number; the first ID is counter_start + 1
        """
        self.repository = repository
        self.audit = audit
        self._counter = counter_start

    def _next_id(self) -> str:
        self._counter += 1
        return f"{CUSTOMER_ID_PREFIX}{self._counter}"

    def register_customer(
        self,
        name: str,
        email: str,
        phone: str,
        customer_type: CustomerType = CustomerType.REGULAR,
    ) -> str:
        """
        Register a new customer.

        No format checks are made on name, email or phone, so registration
        always succeeds.

        Returns:
            The new customer's ID
        """
        customer_id = self._next_id()
        customer = Customer(
            id=customer_id,
            name=display_name(name, customer_type),
            email=email,
            phone=phone,
            type=customer_type,
        )
        self.repository.save(customer)
        self.audit.log(
            f"Customer registered: {customer_id} - {name} (Type: {customer_type.value})"
        )
        logger.debug(f"Stored {customer_id} as {customer.name!r}")
        return customer_id

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.repository.find_by_id(customer_id)

    def get_all_customers(self) -> list[Customer]:
        return self.repository.find_all()
