import logging
import time
from typing import Any, Callable, Dict

from pairrelay.modules.api import OutboundEvent
from pairrelay.modules.pairs import ActivePairTable
from pairrelay.modules.registry import SessionRegistry, deliver

logger = logging.getLogger(__name__)

# Chat never reveals the partner's session id
CHAT_SENDER_LABEL = "Stranger"

NEGOTIATION_EVENTS = frozenset(
    {OutboundEvent.OFFER, OutboundEvent.ANSWER, OutboundEvent.ICE_CANDIDATE}
)


def epoch_millis() -> int:
    """Current time in milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


class MessageRouter:
    def __init__(
        self,
        registry: SessionRegistry,
        pairs: ActivePairTable,
        clock: Callable[[], int] = epoch_millis,
    ):
        """
        Initialize message router.

        Args:
            registry: Resolves partner ids to transports
            pairs: Source of partner lookups
            clock: Timestamp source for chat messages
        """
        self.registry = registry
        self.pairs = pairs
        self.clock = clock

    def relay(self, sender_id: str, event: OutboundEvent, payload: Dict[str, Any]) -> bool:
        """
        Forward a payload to the sender's partner.

        Args:
            sender_id: Session that sent the message
            event: offer, answer, ice-candidate or chat-message
            payload: Validated inbound fields, forwarded verbatim

        Returns:
            True if the message was handed to the partner's transport

        Negotiation payloads are tagged with the sender id; chat is tagged
        with a fixed label and a timestamp instead.
        """
        partner_id = self.pairs.get_partner(sender_id)
        if partner_id is None:
            logger.debug(f"Dropped {event.value} from unpaired session {sender_id}")
            return False

        partner = self.registry.lookup(partner_id)
        if partner is None:
            logger.debug(f"Dropped {event.value} for vanished partner {partner_id}")
            return False

        if event in NEGOTIATION_EVENTS:
            message = {**payload, "from": sender_id}
        elif event is OutboundEvent.CHAT_MESSAGE:
            message = {
                "message": payload.get("message"),
                "from": CHAT_SENDER_LABEL,
                "timestamp": self.clock(),
            }
        else:
            raise ValueError(f"Event is not relayable: {event.value}")

        logger.debug(f"{event.value} sent from {sender_id} to {partner_id}")
        return deliver(partner, event, message)
