"""
Transport Module - Black Box Interface

Purpose: Deliver outbound events to a WebSocket client
Interface: WebSocketTransport.send(), run_writer(), close(), decode_frame()
Hidden: Outbox queue, JSON framing, send failure handling

send() never blocks; a per-connection writer task drains the outbox.
"""

from .websocket import WebSocketTransport, decode_frame

__all__ = ["WebSocketTransport", "decode_frame"]
