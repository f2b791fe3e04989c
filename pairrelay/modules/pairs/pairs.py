from typing import Dict, Optional


class ActivePairTable:
    def __init__(self):
        """Initialize an empty pair table."""
        self._partners: Dict[str, str] = {}

    def get_partner(self, session_id: str) -> Optional[str]:
        """Return the partner id, or None if the session is not paired."""
        return self._partners.get(session_id)

    def insert_pair(self, a: str, b: str) -> None:
        """
        Pair two sessions in both directions.

        Raises:
            ValueError: On self-pairing or if either side is already paired
        """
        if a == b:
            raise ValueError(f"Cannot pair session with itself: {a}")
        for session_id in (a, b):
            if session_id in self._partners:
                raise ValueError(f"Session already paired: {session_id}")

        self._partners[a] = b
        self._partners[b] = a

    def remove(self, session_id: str) -> Optional[str]:
        """
        Dissolve the pair containing this session.

        Returns:
            The former partner id, or None if the session was not paired
        """
        partner_id = self._partners.pop(session_id, None)
        if partner_id is None:
            return None

        self._partners.pop(partner_id, None)
        return partner_id

    def pair_count(self) -> int:
        """Number of active pairs."""
        return len(self._partners) // 2

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._partners

    def __len__(self) -> int:
        return len(self._partners)
