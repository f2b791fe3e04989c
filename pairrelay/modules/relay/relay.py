import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from pairrelay.modules.api import (
    AnswerPayload,
    CandidatePayload,
    ChatPayload,
    InboundEvent,
    OfferPayload,
    OutboundEvent,
)
from pairrelay.modules.pairing import PairingEngine
from pairrelay.modules.pairs import ActivePairTable
from pairrelay.modules.queue import WaitingQueue
from pairrelay.modules.registry import SessionRegistry, Transport, deliver
from pairrelay.modules.router import MessageRouter, epoch_millis
from pairrelay.modules.teardown import TeardownCoordinator

logger = logging.getLogger(__name__)

# Inbound relay events: payload model and the outbound event they become
RELAY_EVENTS: Dict[InboundEvent, tuple] = {
    InboundEvent.OFFER: (OfferPayload, OutboundEvent.OFFER),
    InboundEvent.ANSWER: (AnswerPayload, OutboundEvent.ANSWER),
    InboundEvent.ICE_CANDIDATE: (CandidatePayload, OutboundEvent.ICE_CANDIDATE),
    InboundEvent.CHAT_MESSAGE: (ChatPayload, OutboundEvent.CHAT_MESSAGE),
}


@dataclass
class RelaySnapshot:
    """Point-in-time counts for the status endpoint."""

    connected: int
    waiting: int
    active_pairs: int


class RelayService:
    def __init__(self, clock: Callable[[], int] = epoch_millis):
        """
        Initialize relay service with empty state.

        Args:
            clock: Chat timestamp source in milliseconds
        """
        self.registry = SessionRegistry()
        self.waiting = WaitingQueue()
        self.pairs = ActivePairTable()

        self.pairing = PairingEngine(self.waiting, self.pairs)
        self.teardown = TeardownCoordinator(self.registry, self.waiting, self.pairs)
        self.router = MessageRouter(self.registry, self.pairs, clock=clock)

        # Every operation touching the queue or the pair table runs under this lock
        self._lock = threading.RLock()

    # Connection lifecycle

    def connect(self, session: Transport) -> None:
        """Register a newly connected session and tell it its id."""
        with self._lock:
            self.registry.register(session)
        deliver(session, OutboundEvent.CONNECTED, {"sessionId": session.id})
        logger.info(f"User connected: {session.id}")

    def disconnect(self, session_id: str) -> None:
        """Tear down a session's queue/pair state and forget it."""
        with self._lock:
            self.teardown.leave(session_id)
            self.registry.unregister(session_id)
        logger.info(f"User disconnected: {session_id}")

    # Matchmaking

    def start_search(self, session_id: str) -> None:
        """Put a session at the back of the queue and pair what can be paired."""
        with self._lock:
            self._requeue(session_id)
        logger.info(f"User {session_id} started searching")

    def next_partner(self, session_id: str) -> None:
        """Leave the current partner and immediately search for another."""
        with self._lock:
            self._requeue(session_id)
        logger.info(f"User {session_id} requested next partner")

    def stop_search(self, session_id: str) -> None:
        """Leave the queue or the current pair without searching again."""
        with self._lock:
            self.teardown.leave(session_id)
        logger.info(f"User {session_id} stopped searching")

    def _requeue(self, session_id: str) -> None:
        # Caller holds the lock, so the session is never observed outside
        # both the queue and the pair table
        self.teardown.leave(session_id)

        session = self.registry.lookup(session_id)
        if session is None:
            logger.debug(f"Not queueing unregistered session {session_id}")
            return

        self.waiting.enqueue(session)
        deliver(session, OutboundEvent.SEARCHING)
        self.pairing.try_pair_all()

    # Relay

    def relay(self, session_id: str, event: InboundEvent, data: Optional[Dict[str, Any]]) -> bool:
        """
        Validate a relay payload and forward it to the partner.

        Returns:
            True if forwarded; False if malformed or the sender is unpaired
        """
        model, outbound = RELAY_EVENTS[event]
        payload = self._validate(session_id, event, model, data)
        if payload is None:
            return False

        with self._lock:
            return self.router.relay(session_id, outbound, payload.model_dump())

    @staticmethod
    def _validate(
        session_id: str, event: InboundEvent, model: Type[BaseModel], data: Optional[Dict[str, Any]]
    ) -> Optional[BaseModel]:
        try:
            return model.model_validate(data if data is not None else {})
        except ValidationError as e:
            logger.warning(
                f"Dropped malformed {event.value} from {session_id}: {e.error_count()} error(s)"
            )
            return None

    # Dispatch

    def handle(self, session_id: str, event_name: str, data: Optional[Dict[str, Any]] = None) -> None:
        """
        Dispatch one inbound client event.

        Unknown event names are dropped with a warning.
        """
        try:
            event = InboundEvent(event_name)
        except ValueError:
            logger.warning(f"Dropped unknown event '{event_name}' from {session_id}")
            return

        if event is InboundEvent.START_SEARCH:
            self.start_search(session_id)
        elif event is InboundEvent.NEXT:
            self.next_partner(session_id)
        elif event is InboundEvent.STOP_SEARCH:
            self.stop_search(session_id)
        else:
            self.relay(session_id, event, data)

    # Monitoring

    def snapshot(self) -> RelaySnapshot:
        """Counts of connected, waiting and paired sessions."""
        with self._lock:
            return RelaySnapshot(
                connected=len(self.registry),
                waiting=len(self.waiting),
                active_pairs=self.pairs.pair_count(),
            )
