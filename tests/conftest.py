"""
Shared pytest fixtures for Pairrelay tests.

This module provides common fixtures including:
- FakeTransport: records every event sent to a session
- FailingTransport: raises on every send, like a socket that already closed
- RelayService instances with a fixed chat clock
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pairrelay.modules.relay import RelayService

FIXED_TIMESTAMP = 1_700_000_000_000


@dataclass
class FakeTransport:
    """Transport double that records sent events in order."""

    id: str
    sent: List[Tuple[str, Optional[Dict[str, Any]]]] = field(default_factory=list)

    def send(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        self.sent.append((event, payload))

    @property
    def events(self) -> List[str]:
        """Names of received events, in order."""
        return [event for event, _ in self.sent]

    def last(self, event: str) -> Optional[Dict[str, Any]]:
        """Payload of the most recent event with this name."""
        for name, payload in reversed(self.sent):
            if name == event:
                return payload
        raise AssertionError(f"{self.id} never received '{event}', got {self.events}")

    def clear(self):
        self.sent = []


class FailingTransport:
    """Transport whose every send fails."""

    def __init__(self, session_id: str):
        self.id = session_id
        self.attempts = 0

    def send(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        self.attempts += 1
        raise ConnectionError("socket closed")


def assert_invariants(service: RelayService):
    """Pair table symmetric and even; queue and table disjoint."""
    partners = dict(service.pairs._partners)
    assert len(partners) % 2 == 0
    for a, b in partners.items():
        assert partners.get(b) == a
    for waiting_id in service.waiting.ids():
        assert waiting_id not in service.pairs
    assert len(set(service.waiting.ids())) == len(service.waiting)


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances with readable ids."""

    def _make(session_id: str) -> FakeTransport:
        return FakeTransport(id=session_id)

    return _make


@pytest.fixture
def relay_service():
    """RelayService with a fixed chat clock."""
    return RelayService(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def connected(relay_service, make_transport):
    """Factory that connects a FakeTransport to the relay service."""

    def _connect(session_id: str) -> FakeTransport:
        transport = make_transport(session_id)
        relay_service.connect(transport)
        return transport

    return _connect
