"""
Pairrelay - Matchmaking and Signaling Relay

Pairs anonymous clients into two-party sessions and relays WebRTC
negotiation messages and chat text between the members of a pair.

Architecture:
- Each module is self-contained with a narrow interface
- Modules never reach into each other's internals
- All queue/pair state lives in one explicit RelayService instance

Modules:
- registry: Connected session bookkeeping
- queue: FIFO of sessions waiting for a partner
- pairs: Symmetric session -> partner table
- pairing: Drains the queue into active pairs
- router: Forwards payloads to a session's partner
- teardown: Leave/disconnect cleanup and partner notification
- relay: Event dispatch and state ownership
- transport: WebSocket delivery
- api: Wire models
"""

__version__ = "1.0.0"
