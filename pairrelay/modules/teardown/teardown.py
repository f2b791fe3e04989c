import logging
from typing import Optional

from pairrelay.modules.api import OutboundEvent
from pairrelay.modules.pairs import ActivePairTable
from pairrelay.modules.queue import WaitingQueue
from pairrelay.modules.registry import SessionRegistry, deliver

logger = logging.getLogger(__name__)


class TeardownCoordinator:
    def __init__(self, registry: SessionRegistry, waiting: WaitingQueue, pairs: ActivePairTable):
        self.registry = registry
        self.waiting = waiting
        self.pairs = pairs

    def leave(self, session_id: str) -> Optional[str]:
        """
        Return a session to the idle state.

        Args:
            session_id: Session leaving the queue or its pair

        Returns:
            The former partner id, or None if the session was not paired

        Logic:
        1. Drop the session from the waiting queue
        2. Dissolve its pair, if any
        3. Tell the former partner, if it is still connected
        """
        if self.waiting.remove(session_id):
            logger.debug(f"Session {session_id} left the waiting queue")

        partner_id = self.pairs.remove(session_id)
        if partner_id is None:
            return None

        partner = self.registry.lookup(partner_id)
        if partner is not None:
            deliver(partner, OutboundEvent.PARTNER_DISCONNECTED)

        logger.info(f"Session {session_id} disconnected from {partner_id}")
        return partner_id
