"""
Registry Module - Black Box Interface

Purpose: Track every currently connected session
Interface: register(), lookup(), unregister(), deliver()
Hidden: Storage of session handles

Sessions are anything satisfying the Transport protocol, so the rest of
the system never depends on a concrete transport library.
"""

from .registry import SessionRegistry, Transport, deliver

__all__ = ["SessionRegistry", "Transport", "deliver"]
