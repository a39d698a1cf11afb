"""
Runtime settings for the support desk.

Everything is supplied on the command line; there are no config files or
environment variables. Pydantic validates the values, so a bad setting
fails fast with a ValidationError (a ValueError subclass).
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from helpdesk.channels import ChannelType

LOG_FORMAT = "%(asctime)s | %(name)-16s | %(levelname)-5s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class DeskConfig(BaseModel):
    """Settings used to wire up a HelpDesk."""
    counter_start: int = Field(
        default=1000,
        ge=0,
        description="Both ID counters start here; first IDs are counter_start + 1",
    )
    channels: list[str] = Field(
        default_factory=lambda: ["email", "sms", "push"],
        description="Notification channels, in broadcast order",
    )
    channel_fail_rate: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Simulated failure rate applied to every channel",
    )
    log_level: str = Field(default="INFO")
    menu_layout: Literal["nested", "flat"] = Field(default="nested")

    @field_validator("channels")
    @classmethod
    def _known_channels(cls, value: list[str]) -> list[str]:
        known = {c.value for c in ChannelType}
        normalized = [name.lower() for name in value]
        unknown = [name for name in normalized if name not in known]
        if unknown:
            raise ValueError(f"Unknown channel(s): {', '.join(unknown)}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
