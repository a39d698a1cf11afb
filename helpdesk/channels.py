"""
Mock notification channels for the support desk.

These channels simulate delivering a message by logging it. In a real
system they would integrate with services like:
- Email: SendGrid, AWS SES, Mailgun
- SMS: Twilio, AWS SNS
- Push: Firebase Cloud Messaging, APNs

Design decisions:
- All sends are logged to the `notifications` logger for visibility
- Channels track sent messages for test assertions
- Channel failures can be simulated for testing
- Every channel takes the same (recipient, message) pair; the broadcaster
  does not know which kind of channel it is talking to
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger("notifications")


class ChannelType(str, Enum):
    """Supported notification channels. Values are the configured names."""
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    CONSOLE = "console"


@dataclass
class NotificationResult:
    """
    Result of a notification send attempt.

    Captures success/failure and metadata for debugging and testing.
    """
    success: bool
    channel: ChannelType
    recipient: str
    body: str
    timestamp: datetime = field(default_factory=datetime.now)
    error: Optional[str] = None

    def __str__(self) -> str:
        status = "✓" if self.success else "✗"
        preview = self.body if len(self.body) <= 50 else self.body[:50] + "..."
        return f"{status} {self.channel.name} to {self.recipient}: {preview}"


class NotificationChannel(Protocol):
    """What the broadcaster needs from a channel."""

    name: str

    def send(self, recipient: str, message: str) -> NotificationResult:
        ...


class SimulatedChannel:
    """
    Shared behaviour of the mock channels.

    Subclasses only set their display name and channel type.
    """

    name: str = "Simulated"
    channel_type: ChannelType = ChannelType.CONSOLE

    def __init__(self, fail_rate: float = 0.0):
        """
        Initialize the channel.

        Args:
            fail_rate: Probability of send failure (0.0 to 1.0), for testing.
        """
        if not 0.0 <= fail_rate <= 1.0:
            raise ValueError(f"fail_rate must be between 0.0 and 1.0, got {fail_rate}")
        self.fail_rate = fail_rate
        self.sent_messages: list[NotificationResult] = []

    def send(self, recipient: str, message: str) -> NotificationResult:
        """
        Deliver a message (mock implementation).

        Args:
            recipient: Address the message is for
            message: Message content

        Returns:
            NotificationResult indicating success/failure
        """
        tag = self.channel_type.name
        if random.random() < self.fail_rate:
            result = NotificationResult(
                success=False,
                channel=self.channel_type,
                recipient=recipient,
                body=message,
                error=f"Simulated {self.name} delivery failure",
            )
            logger.error(f"[{tag} FAILED] To: {recipient} | Error: {result.error}")
        else:
            result = NotificationResult(
                success=True,
                channel=self.channel_type,
                recipient=recipient,
                body=message,
            )
            logger.info(f"[{tag}] To: {recipient} | Message: {message}")

        self.sent_messages.append(result)
        return result

    def get_sent_count(self) -> int:
        """Get the number of messages sent (for testing)."""
        return len(self.sent_messages)

    def get_successful_sends(self) -> list[NotificationResult]:
        """Get all successful sends."""
        return [m for m in self.sent_messages if m.success]

    def clear_history(self):
        """Clear sent message history (useful between tests)."""
        self.sent_messages.clear()

    def find_message_to(self, recipient: str) -> Optional[NotificationResult]:
        """Find a message sent to a specific recipient."""
        for msg in self.sent_messages:
            if msg.recipient == recipient:
                return msg
        return None


class EmailChannel(SimulatedChannel):
    """Mock email channel."""
    name = "Email"
    channel_type = ChannelType.EMAIL


class SMSChannel(SimulatedChannel):
    """
    Mock SMS channel.

    SMS messages are typically shorter than emails; longer ones are still
    sent but produce a warning.
    """
    name = "SMS"
    channel_type = ChannelType.SMS

    MAX_LENGTH = 160

    def send(self, recipient: str, message: str) -> NotificationResult:
        if len(message) > self.MAX_LENGTH:
            logger.warning(
                f"[SMS] Message length ({len(message)}) exceeds {self.MAX_LENGTH} chars, "
                "may be split into multiple messages"
            )
        return super().send(recipient, message)


class PushChannel(SimulatedChannel):
    """Mock mobile push channel."""
    name = "Push"
    channel_type = ChannelType.PUSH


class ConsoleChannel(SimulatedChannel):
    """Writes notifications to the log only; handy for local runs."""
    name = "Console"
    channel_type = ChannelType.CONSOLE


_CHANNEL_CLASSES: dict[ChannelType, type[SimulatedChannel]] = {
    ChannelType.EMAIL: EmailChannel,
    ChannelType.SMS: SMSChannel,
    ChannelType.PUSH: PushChannel,
    ChannelType.CONSOLE: ConsoleChannel,
}


def build_channel(name: str, fail_rate: float = 0.0) -> SimulatedChannel:
    """
    Create a channel from its configured name.

    Args:
        name: "email", "sms", "push" or "console" (case-insensitive)
        fail_rate: Simulated failure rate for the new channel

    Raises:
        ValueError: If the channel name is not recognized
    """
    try:
        channel_type = ChannelType(name.lower())
    except ValueError:
        raise ValueError(f"Unknown channel: {name}") from None
    return _CHANNEL_CLASSES[channel_type](fail_rate=fail_rate)
