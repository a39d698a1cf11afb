"""
Audit trail for service-level actions.

Services report what they did as one human-readable line per action
("Customer registered: CUST-1001 - Alice (Type: Regular)"). The sink has a
single method and no levels; lines go to the standard `audit` logger.
"""

import logging
from typing import Protocol


class AuditSink(Protocol):
    """Anything that accepts audit lines."""

    def log(self, message: str) -> None:
        ...


class AuditLogger:
    """
    Audit sink backed by the `audit` logger.

    Keeps every line it has written in `entries` so callers (and tests) can
    see what happened without scraping log output.
    """

    def __init__(self, logger_name: str = "audit"):
        self._logger = logging.getLogger(logger_name)
        self.entries: list[str] = []

    def log(self, message: str) -> None:
        self.entries.append(message)
        self._logger.info(message)

    def clear(self):
        """Forget recorded lines (useful between tests)."""
        self.entries.clear()

    def contains(self, fragment: str) -> bool:
        """Check whether any recorded line contains `fragment`."""
        return any(fragment in entry for entry in self.entries)
