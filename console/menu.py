"""
Text-menu front end for the support desk.

Two layouts are available over the same services:
- nested: main menu with Customer Management and Ticket Management submenus
- flat: one numbered menu covering both

Invalid selector input (customer type, category, priority, status) is
always replaced by a default and the user is told which one. Unknown menu
choices re-prompt. End of input behaves like choosing Exit.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO, TypeVar

from helpdesk.desk import HelpDesk
from helpdesk.formatting import format_customer, format_ticket
from helpdesk.models import CustomerType, Priority, TicketCategory, TicketStatus
from helpdesk.services.ticket import NO_TICKET

logger = logging.getLogger("console")

E = TypeVar("E", bound=Enum)

RULE = "=" * 40

CUSTOMER_TYPE_CHOICES = [CustomerType.REGULAR, CustomerType.PREMIUM, CustomerType.VIP]
CATEGORY_CHOICES = [
    TicketCategory.TECHNICAL,
    TicketCategory.BILLING,
    TicketCategory.GENERAL,
    TicketCategory.COMPLAINT,
    TicketCategory.FEATURE_REQUEST,
]
PRIORITY_CHOICES = [Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.CRITICAL]
STATUS_CHOICES = [
    TicketStatus.OPEN,
    TicketStatus.IN_PROGRESS,
    TicketStatus.RESOLVED,
    TicketStatus.CLOSED,
]


class EndOfInput(Exception):
    """Raised internally when the input stream is exhausted."""


class ConsoleMenu:
    """
    Interactive menu loop.

    Streams are injectable so the loop can be driven from tests:

        menu = ConsoleMenu(desk, stdin=io.StringIO("3\\n0\\n"), stdout=io.StringIO())
        menu.run()
    """

    def __init__(
        self,
        desk: HelpDesk,
        layout: str = "nested",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        if layout not in ("nested", "flat"):
            raise ValueError(f"Unknown menu layout: {layout}")
        self.desk = desk
        self.layout = layout
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # =========================================================================
    # I/O helpers
    # =========================================================================

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _prompt(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line.strip()

    def _read_int(self, text: str) -> Optional[int]:
        raw = self._prompt(text)
        try:
            return int(raw)
        except ValueError:
            return None

    def _select(self, title: str, options: list[E], default: E) -> E:
        """
        Show a numbered list of enum options and read the user's pick.

        Anything that isn't a listed number falls back to `default`.
        """
        self._print(f"\n{title}:")
        for number, option in enumerate(options, start=1):
            self._print(f"{number}. {option.value}")
        choice = self._read_int(f"Enter choice (1-{len(options)}): ")
        if choice is None or not 1 <= choice <= len(options):
            self._print(f"Invalid choice. Using {default.value}.")
            return default
        return options[choice - 1]

    # =========================================================================
    # Actions
    # =========================================================================

    def register_customer(self) -> None:
        self._print("\n--- Register New Customer ---")
        name = self._prompt("Enter customer name: ")
        email = self._prompt("Enter email: ")
        phone = self._prompt("Enter phone: ")
        customer_type = self._select(
            "Select Customer Type", CUSTOMER_TYPE_CHOICES, CustomerType.REGULAR
        )

        customer_id = self.desk.customers.register_customer(name, email, phone, customer_type)
        self._print("\nCustomer registered successfully!")
        self._print(f"Customer ID: {customer_id}")

    def find_customer(self) -> None:
        self._print("\n--- Find Customer ---")
        customer_id = self._prompt("Enter customer ID: ")
        customer = self.desk.customers.get_customer(customer_id)
        if customer:
            self._print("\n" + format_customer(customer))
        else:
            self._print("\nCustomer not found!")

    def create_ticket(self) -> None:
        self._print("\n--- Create New Ticket ---")
        customer_id = self._prompt("Enter customer ID: ")
        description = self._prompt("Enter ticket description: ")
        category = self._select("Select Category", CATEGORY_CHOICES, TicketCategory.GENERAL)
        priority = self._select("Select Priority", PRIORITY_CHOICES, Priority.MEDIUM)

        ticket_id = self.desk.tickets.create_ticket(customer_id, description, priority, category)
        if ticket_id != NO_TICKET:
            self._print("\nTicket created successfully!")
            self._print(f"Ticket ID: {ticket_id}")
        else:
            self._print("\nFailed to create ticket. Customer not found.")

    def update_ticket_status(self) -> None:
        self._print("\n--- Update Ticket Status ---")
        ticket_id = self._prompt("Enter ticket ID: ")
        status = self._select("Select New Status", STATUS_CHOICES, TicketStatus.OPEN)

        if self.desk.tickets.update_ticket_status(ticket_id, status):
            self._print("\nTicket status updated successfully!")
        else:
            self._print("\nFailed to update ticket. Ticket not found.")

    def find_ticket(self) -> None:
        self._print("\n--- Find Ticket ---")
        ticket_id = self._prompt("Enter ticket ID: ")
        ticket = self.desk.tickets.get_ticket(ticket_id)
        if ticket:
            self._print("\n" + format_ticket(ticket))
        else:
            self._print("\nTicket not found!")

    def list_customers(self) -> None:
        self._print("\n========== All Customers ==========")
        customers = self.desk.customers.get_all_customers()
        if not customers:
            self._print("No customers registered yet.")
        for customer in customers:
            self.stdout.write(format_customer(customer))

    def list_tickets(self) -> None:
        self._print("\n========== All Tickets ==========")
        tickets = self.desk.tickets.get_all_tickets()
        if not tickets:
            self._print("No tickets created yet.")
        for ticket in tickets:
            self.stdout.write(format_ticket(ticket))

    # =========================================================================
    # Menus
    # =========================================================================

    def _menu_loop(self, render, actions: dict) -> None:
        """Show a menu until the user picks 0. Other choices map to actions."""
        while True:
            render()
            choice = self._read_int("Enter your choice: ")
            if choice == 0:
                return
            action = actions.get(choice)
            if action is None:
                self._print("Invalid choice. Please try again.")
                continue
            action()

    def _render_main_menu(self) -> None:
        self._print(f"\n{RULE}")
        self._print("   Customer Service Management System")
        self._print(RULE)
        self._print("1. Customer Management")
        self._print("2. Ticket Management")
        self._print("3. View All Customers")
        self._print("4. View All Tickets")
        self._print("0. Exit")
        self._print(RULE)

    def _render_customer_menu(self) -> None:
        self._print("\n--- Customer Management ---")
        self._print("1. Register New Customer")
        self._print("2. Find Customer by ID")
        self._print("0. Back to Main Menu")

    def _render_ticket_menu(self) -> None:
        self._print("\n--- Ticket Management ---")
        self._print("1. Create New Ticket")
        self._print("2. Update Ticket Status")
        self._print("3. Find Ticket by ID")
        self._print("0. Back to Main Menu")

    def _render_flat_menu(self) -> None:
        self._print("\n===== CUSTOMER & TICKET MANAGEMENT =====")
        self._print("1. Register Customer")
        self._print("2. List Customers")
        self._print("3. Create Ticket")
        self._print("4. List Tickets")
        self._print("5. Update Ticket Status")
        self._print("0. Exit")

    def customer_management(self) -> None:
        self._menu_loop(self._render_customer_menu, {
            1: self.register_customer,
            2: self.find_customer,
        })

    def ticket_management(self) -> None:
        self._menu_loop(self._render_ticket_menu, {
            1: self.create_ticket,
            2: self.update_ticket_status,
            3: self.find_ticket,
        })

    def run(self) -> int:
        """
        Run the menu until the user exits or input runs out.

        Returns:
            Process exit code (always 0)
        """
        self._print(" Welcome to Customer Service System ")
        logger.debug(f"Starting console menu ({self.layout} layout)")

        if self.layout == "flat":
            render, actions = self._render_flat_menu, {
                1: self.register_customer,
                2: self.list_customers,
                3: self.create_ticket,
                4: self.list_tickets,
                5: self.update_ticket_status,
            }
        else:
            render, actions = self._render_main_menu, {
                1: self.customer_management,
                2: self.ticket_management,
                3: self.list_customers,
                4: self.list_tickets,
            }

        try:
            self._menu_loop(render, actions)
        except EndOfInput:
            logger.debug("Input closed, leaving menu")

        self._print("\nThank you for using Customer Service System!")
        self._print("Goodbye!\n")
        return 0
