"""
API Module - Black Box Interface

Purpose: Wire-level data shapes
Interface: Event names, inbound payload models, outbound envelope, status model
Hidden: Validation rules

Payload contents stay opaque: models check that the expected field is
present, never what it contains.
"""

from .models import (
    AnswerPayload,
    CandidatePayload,
    ChatPayload,
    Envelope,
    InboundEvent,
    OfferPayload,
    OutboundEvent,
    StatusResponse,
    UserCounts,
)

__all__ = [
    "InboundEvent",
    "OutboundEvent",
    "Envelope",
    "OfferPayload",
    "AnswerPayload",
    "CandidatePayload",
    "ChatPayload",
    "StatusResponse",
    "UserCounts",
]
