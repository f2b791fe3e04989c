import logging
from typing import List, Tuple

from pairrelay.modules.api import OutboundEvent
from pairrelay.modules.pairs import ActivePairTable
from pairrelay.modules.queue import WaitingQueue
from pairrelay.modules.registry import deliver

logger = logging.getLogger(__name__)


class PairingEngine:
    def __init__(self, waiting: WaitingQueue, pairs: ActivePairTable):
        """
        Initialize pairing engine.

        Args:
            waiting: Queue to drain
            pairs: Table receiving the new pairs
        """
        self.waiting = waiting
        self.pairs = pairs

    def try_pair_all(self) -> List[Tuple[str, str]]:
        """
        Pair waiting sessions two at a time until fewer than two remain.

        Returns:
            List of (first_id, second_id) pairs formed, in arrival order

        Logic:
        1. Take the two oldest waiting sessions
        2. Record the pair in both directions
        3. Tell each side who its partner is
        4. Repeat until the queue holds at most one session
        """
        formed = []

        while True:
            pair = self.waiting.dequeue_pair()
            if pair is None:
                break

            first, second = pair
            self.pairs.insert_pair(first.id, second.id)

            deliver(first, OutboundEvent.PAIRED, {"partnerId": second.id})
            deliver(second, OutboundEvent.PAIRED, {"partnerId": first.id})

            logger.info(f"Paired: {first.id} <-> {second.id}")
            formed.append((first.id, second.id))

        return formed
