#!/usr/bin/env python3
"""
Pairrelay - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Creates the relay state
3. Exposes the relay socket and the status endpoints

All matchmaking logic is in the modules, following black box principles.
"""

import asyncio
import logging
import logging.config as log_config
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from pairrelay import __version__
from pairrelay.config.provider import ConfigProvider, EnvConfigProvider
from pairrelay.logging_config import get_logging_config

# Import modules through their black box interfaces
from pairrelay.modules.api import StatusResponse, UserCounts
from pairrelay.modules.relay import RelayService
from pairrelay.modules.transport import WebSocketTransport, decode_frame

# Configure logging with status poll suppression
log_config.dictConfig(get_logging_config(EnvConfigProvider().get_logging_config().level))
logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "Pairrelay signaling server is running!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    """
    logger.info("Starting Pairrelay signaling server...")

    yield

    # Sessions live only as long as the process
    snapshot = app.state.relay.snapshot()
    logger.info(f"Shutting down Pairrelay with {snapshot.connected} connected session(s)")


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    relay: Optional[RelayService] = None,
) -> FastAPI:
    """
    Build the FastAPI application around one relay state instance.

    Args:
        config_provider: Source of API configuration (environment by default)
        relay: Relay state to serve (a fresh, empty one by default)
    """
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()

    app = FastAPI(
        title="Pairrelay",
        description="Pairrelay - Random pairing and WebRTC signaling relay",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.relay = relay or RelayService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_methods=["GET", "POST"],
    )

    # Relay socket

    @app.websocket("/ws")
    async def relay_socket(websocket: WebSocket):
        """
        Event channel for one client.

        Frames are JSON objects {"event": ..., "data": ...} in both directions.
        """
        service: RelayService = websocket.app.state.relay

        await websocket.accept()
        transport = WebSocketTransport(websocket, session_id=str(uuid.uuid4()))
        writer = asyncio.create_task(transport.run_writer())
        service.connect(transport)

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))

                text = message.get("text")
                if text is None:
                    logger.warning(f"Dropped binary frame from {transport.id}")
                    continue

                envelope = decode_frame(transport.id, text)
                if envelope is not None:
                    service.handle(transport.id, envelope.event, envelope.data)
        except WebSocketDisconnect as e:
            logger.debug(f"Socket for {transport.id} closed with code {e.code}")
        finally:
            service.disconnect(transport.id)
            transport.close()
            writer.cancel()

    # Health/Monitoring Endpoints

    @app.get("/status", response_model=StatusResponse)
    async def status():
        """
        Report waiting sessions and active pairs.

        Returns:
            200: Current counts
        """
        snapshot = app.state.relay.snapshot()
        return StatusResponse(
            status="online",
            users=UserCounts(waiting=snapshot.waiting, active=snapshot.active_pairs),
            timestamp=datetime.now(timezone.utc),
        )

    @app.get("/healthz")
    async def healthz():
        """
        Minimal health check endpoint for readiness/liveness probes.

        Returns:
            200: Service is running
        """
        return {"status": "ok"}

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return LIVENESS_MESSAGE

    return app


app = create_app()


def main() -> None:
    """Run the server until terminated."""
    config_provider = EnvConfigProvider()
    api_config = config_provider.get_api_config()
    log_level = config_provider.get_logging_config().level

    uvicorn.run(
        "pairrelay.main:app",
        host=api_config.host,
        port=api_config.port,
        log_level=log_level.lower(),
        reload=api_config.debug,
        log_config=get_logging_config(log_level),
    )


if __name__ == "__main__":
    main()
