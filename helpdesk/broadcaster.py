"""
Notification fan-out.

The broadcaster holds an ordered list of channels and sends every message
to all of them. Delivery is best effort: a channel that fails is skipped
over without retry, and nothing is raised to the caller.
"""

import logging
from typing import Optional

from helpdesk.audit import AuditSink
from helpdesk.channels import ChannelType, NotificationChannel, NotificationResult

logger = logging.getLogger("broadcaster")


class NotificationBroadcaster:
    """
    Sends one message to every registered channel.

    Example:
        broadcaster = NotificationBroadcaster(audit=AuditLogger())
        broadcaster.add_channel(EmailChannel())
        broadcaster.add_channel(SMSChannel())

        # Both channels receive the message, email first
        broadcaster.notify("a@x.com", "Your ticket TKT-1001 has been created.")
    """

    def __init__(self, audit: Optional[AuditSink] = None):
        """
        Initialize with no channels.

        Args:
            audit: Sink for "channel added" / "notification sent" lines.
                   When omitted, nothing is audited.
        """
        self.audit = audit
        self._channels: list[NotificationChannel] = []

    @property
    def channels(self) -> list[NotificationChannel]:
        """Registered channels in registration order (a copy)."""
        return list(self._channels)

    def add_channel(self, channel: NotificationChannel) -> None:
        """
        Register a channel at the end of the list.

        The same channel may be added twice; it will then receive every
        message twice.
        """
        self._channels.append(channel)
        if self.audit is not None:
            self.audit.log(f"Added notification channel: {channel.name}")

    def notify(self, recipient: str, message: str) -> list[NotificationResult]:
        """
        Send `message` to `recipient` through every channel, in order.

        Only successful sends are audited. Failures, including a channel
        raising from send(), are recorded in the returned results and
        otherwise ignored; later channels still get the message.

        Returns:
            One NotificationResult per channel, in registration order
        """
        if not self._channels:
            logger.warning(f"No channels registered, dropping notification to {recipient}")

        results = []
        for channel in self._channels:
            try:
                result = channel.send(recipient, message)
            except Exception as e:
                logger.exception(f"{channel.name} raised while notifying {recipient}")
                result = NotificationResult(
                    success=False,
                    channel=getattr(channel, "channel_type", ChannelType.CONSOLE),
                    recipient=recipient,
                    body=message,
                    error=str(e),
                )
            results.append(result)
            if result.success:
                if self.audit is not None:
                    self.audit.log(f"Notification sent via {channel.name} to {recipient}")
            else:
                logger.debug(f"{channel.name} failed for {recipient}: {result.error}")
        return results
