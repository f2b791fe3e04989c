import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import WebSocket
from pydantic import ValidationError

from pairrelay.modules.api import Envelope

logger = logging.getLogger(__name__)


class WebSocketTransport:
    def __init__(self, websocket: WebSocket, session_id: str):
        """
        Initialize transport for one accepted WebSocket.

        Args:
            websocket: Accepted FastAPI WebSocket
            session_id: Identifier of the session this socket carries
        """
        self.id = session_id
        self._websocket = websocket
        self._outbox: asyncio.Queue = asyncio.Queue()
        self._closed = False

    def send(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """Queue an event for the writer task. Dropped once closed."""
        if self._closed:
            return

        envelope = Envelope(event=getattr(event, "value", event), data=payload)
        self._outbox.put_nowait(envelope.model_dump(mode="json"))

    async def run_writer(self) -> None:
        """
        Drain the outbox onto the socket until closed.

        A failed send marks the transport closed; later events are discarded.
        """
        while True:
            frame = await self._outbox.get()
            if frame is None:
                break

            try:
                await self._websocket.send_json(frame)
            except Exception as e:
                logger.debug(f"Send to {self.id} failed, closing transport: {e}")
                self._closed = True
                break

    def close(self) -> None:
        """Stop accepting events and let the writer finish what is queued."""
        if self._closed:
            return
        self._closed = True
        self._outbox.put_nowait(None)


def decode_frame(session_id: str, text: str) -> Optional[Envelope]:
    """
    Parse one inbound text frame.

    Returns:
        The envelope, or None if the frame is not a valid event object
    """
    try:
        return Envelope.model_validate_json(text)
    except ValidationError as e:
        logger.warning(f"Dropped malformed frame from {session_id}: {e.error_count()} error(s)")
        return None
