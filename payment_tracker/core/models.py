"""Pydantic models for the Telegram Payment Tracker.

This module defines the transient models that flow through the message pipeline: the
normalized inbound chat message, the request sent to the extraction agent, and the
structured result parsed from the agent's JSON output.
"""

from datetime import datetime
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator

DETAIL_LABELS = {
    "location": "Location",
    "merchant": "Merchant",
    "payment_method": "Payment Method",
    "notes": "Notes",
}


class PhotoVariant(BaseModel):
    """One resolution of a photo attached to a chat message."""

    file_id: str
    width: int = 0
    height: int = 0


class InboundMessage(BaseModel):
    """A chat message reduced to the fields the pipeline needs."""

    chat_id: int
    text: str | None = None
    photos: list[PhotoVariant] = Field(default_factory=list)


class ExtractionRequest(BaseModel):
    """Prompt plus optional inline image sent to the extraction agent."""

    prompt: str
    image_base64: str | None = None
    mime_type: str | None = None

    @property
    def has_image(self) -> bool:
        """Whether an encoded image accompanies the prompt."""
        return self.image_base64 is not None


class ExtractionResult(BaseModel):
    """Financial data extracted from a message. A null value means nothing was found."""

    value: float | None = None
    description: str | None = None
    category: str | None = None
    payed_at: datetime | None = None
    data: dict[str, str | None] | None = None

    @field_validator("payed_at", mode="before")
    @classmethod
    def blank_payed_at_is_missing(cls, value: object) -> object:
        """Treat an empty or blank date as not provided."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def has_payment(self) -> bool:
        """Whether the result qualifies for persistence."""
        return self.value is not None


@runtime_checkable
class Transport(Protocol):
    """Chat transport used by the pipeline for file resolution and replies."""

    async def resolve_file_url(self, file_id: str) -> str:
        """Resolve a file id to a downloadable URL."""
        ...

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send a text reply to a chat."""
        ...


class Outcome(StrEnum):
    """Terminal state of one handled message."""

    STORED = "stored"
    NO_DATA = "no_data"
    NOT_UNDERSTOOD = "not_understood"
    SAVE_FAILED = "save_failed"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"
