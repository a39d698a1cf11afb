"""
Domain models for the support desk.

Two entities live here: the Customer who raises tickets and the Ticket
itself. The enums double as display labels - each member's value is the
text shown to users and written to the audit log.

Design decisions:
- Using Pydantic for validation and construction with defaults
- Customer is frozen; it is never changed after registration
- Ticket keeps status, priority, assignment and tags mutable
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


# =============================================================================
# Enums - closed value sets used across the domain
# =============================================================================

class CustomerType(str, Enum):
    """Customer tiers. VIP and Premium customers get a name prefix."""
    REGULAR = "Regular"
    PREMIUM = "Premium"
    VIP = "VIP"


class TicketStatus(str, Enum):
    """
    Ticket lifecycle states.
    Any state may move to any other; no transition is forbidden.
    """
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class Priority(str, Enum):
    """Ticket urgency. Drives automatic agent assignment."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class TicketCategory(str, Enum):
    """What the ticket is about. Drives the default tags."""
    TECHNICAL = "Technical"
    BILLING = "Billing"
    GENERAL = "General"
    COMPLAINT = "Complaint"
    FEATURE_REQUEST = "Feature Request"


# =============================================================================
# Core Domain Models
# =============================================================================

class Customer(BaseModel):
    """
    Customer entity - the owner of tickets and recipient of notifications.

    The name is stored as displayed, i.e. already carrying the tier prefix
    added at registration ("[VIP] Jane").
    """
    id: str = Field(..., description="Unique customer identifier (CUST-<n>)")
    name: str = Field(..., description="Display name, tier prefix included")
    email: str = Field(..., description="Address notifications are sent to")
    phone: str = Field(..., description="Contact phone number")
    type: CustomerType = Field(default=CustomerType.REGULAR)

    model_config = ConfigDict(frozen=True)


class Ticket(BaseModel):
    """
    Support ticket raised on behalf of a customer.

    `customer_id` must point at an existing customer when the ticket is
    created; nothing re-checks it afterwards.
    """
    id: str = Field(..., description="Unique ticket identifier (TKT-<n>)")
    customer_id: str = Field(..., description="Reference to customer")
    description: str = Field(..., description="Free text problem statement")
    status: TicketStatus = Field(default=TicketStatus.OPEN)
    priority: Priority = Field(default=Priority.MEDIUM)
    category: TicketCategory = Field(default=TicketCategory.GENERAL)
    created_at: datetime = Field(default_factory=datetime.now)
    assigned_to: str = Field(default="", description="Agent handle, empty if unassigned")
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(validate_assignment=True)

    @property
    def is_assigned(self) -> bool:
        return bool(self.assigned_to)

    def add_tag(self, tag: str) -> None:
        """Append a tag. Tags are never removed or reordered."""
        self.tags.append(tag)
