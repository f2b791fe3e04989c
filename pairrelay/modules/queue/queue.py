from collections import deque
from typing import Deque, List, Optional, Set, Tuple

from pairrelay.modules.registry import Transport


class WaitingQueue:
    def __init__(self):
        """Initialize an empty waiting queue."""
        self._entries: Deque[Transport] = deque()
        self._ids: Set[str] = set()

    def enqueue(self, session: Transport) -> None:
        """
        Append a session to the tail of the queue.

        Callers must remove the session from the queue and the pair
        table first (see teardown).

        Raises:
            ValueError: If the session is already waiting
        """
        if session.id in self._ids:
            raise ValueError(f"Session already waiting: {session.id}")
        self._entries.append(session)
        self._ids.add(session.id)

    def dequeue_pair(self) -> Optional[Tuple[Transport, Transport]]:
        """
        Remove and return the two oldest sessions.

        Returns:
            (first, second) in arrival order, or None if fewer than two wait

        Both sessions are taken in one step, so a session can never be
        handed out twice or dropped between the two pops.
        """
        if len(self._entries) < 2:
            return None

        first = self._entries.popleft()
        second = self._entries.popleft()
        self._ids.discard(first.id)
        self._ids.discard(second.id)
        return first, second

    def remove(self, session_id: str) -> bool:
        """
        Remove a session by identifier, keeping the order of the rest.

        Returns:
            True if the session was waiting
        """
        if session_id not in self._ids:
            return False

        self._entries = deque(s for s in self._entries if s.id != session_id)
        self._ids.discard(session_id)
        return True

    def ids(self) -> List[str]:
        """Snapshot of waiting session ids, oldest first."""
        return [s.id for s in self._entries]

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._ids

    def __len__(self) -> int:
        return len(self._entries)
