import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Capability interface for a connected client."""

    id: str

    def send(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """Queue an event for delivery to the client. Must not block."""
        ...


def deliver(session: Transport, event: str, payload: Optional[Dict[str, Any]] = None) -> bool:
    """
    Fire-and-forget send to a session.

    Delivery failures are logged and swallowed so that a stale partner
    handle never breaks the flow of the session that triggered the send.

    Returns:
        True if the transport accepted the event
    """
    try:
        session.send(event, payload)
        return True
    except Exception as e:
        logger.debug(f"Dropped '{getattr(event, 'value', event)}' for session {session.id}: {e}")
        return False


class SessionRegistry:
    def __init__(self):
        """Initialize an empty registry."""
        self._sessions: Dict[str, Transport] = {}

    def register(self, session: Transport) -> None:
        """
        Add a live session keyed by its identifier.

        Raises:
            ValueError: If the identifier is already registered
        """
        if session.id in self._sessions:
            raise ValueError(f"Session already registered: {session.id}")
        self._sessions[session.id] = session

    def lookup(self, session_id: str) -> Optional[Transport]:
        """Return the session for this identifier, or None."""
        return self._sessions.get(session_id)

    def unregister(self, session_id: str) -> Optional[Transport]:
        """Remove a session. Unknown identifiers are a no-op."""
        return self._sessions.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
