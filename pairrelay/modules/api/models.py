"""
Pairrelay shared data models.

These models define the frames exchanged over the relay socket and the
responses of the HTTP status surface.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Enums


class InboundEvent(str, Enum):
    """Events a client may send."""

    START_SEARCH = "start-search"
    OFFER = "offer"
    ANSWER = "answer"
    ICE_CANDIDATE = "ice-candidate"
    CHAT_MESSAGE = "chat-message"
    NEXT = "next"
    STOP_SEARCH = "stop-search"


class OutboundEvent(str, Enum):
    """Events the server sends."""

    CONNECTED = "connected"
    SEARCHING = "searching"
    PAIRED = "paired"
    OFFER = "offer"
    ANSWER = "answer"
    ICE_CANDIDATE = "ice-candidate"
    CHAT_MESSAGE = "chat-message"
    PARTNER_DISCONNECTED = "partner-disconnected"


# Socket frames


class Envelope(BaseModel):
    """One frame on the relay socket, in either direction."""

    event: str = Field(..., description="Event name", min_length=1)
    data: Optional[Dict[str, Any]] = Field(None, description="Event payload")


class _RelayPayload(BaseModel):
    # Clients may attach extra fields; only the named one is relayed
    model_config = ConfigDict(extra="ignore")


class OfferPayload(_RelayPayload):
    """SDP offer, relayed verbatim."""

    offer: Any = Field(..., description="Session description offer")


class AnswerPayload(_RelayPayload):
    """SDP answer, relayed verbatim."""

    answer: Any = Field(..., description="Session description answer")


class CandidatePayload(_RelayPayload):
    """ICE candidate, relayed verbatim."""

    candidate: Any = Field(..., description="ICE candidate")


class ChatPayload(_RelayPayload):
    """Chat text."""

    message: Any = Field(..., description="Chat message text")


# Response Models (API Output)


class UserCounts(BaseModel):
    """Session counts reported by /status."""

    waiting: int = Field(..., description="Sessions waiting for a partner", ge=0)
    active: int = Field(..., description="Active pairs", ge=0)


class StatusResponse(BaseModel):
    """Response of the status endpoint."""

    status: str = Field(default="online", description="Service state")
    users: UserCounts
    timestamp: datetime = Field(..., description="Time of the snapshot (UTC)")
