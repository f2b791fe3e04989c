"""
Router Module - Black Box Interface

Purpose: Forward opaque payloads from a session to its partner
Interface: relay()
Hidden: Partner lookup, payload tagging

Messages from unpaired senders are dropped without error.
"""

from .router import CHAT_SENDER_LABEL, MessageRouter, epoch_millis

__all__ = ["MessageRouter", "CHAT_SENDER_LABEL", "epoch_millis"]
