import asyncio
import json
from typing import Optional

import structlog
from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from traits_deck.api.schemas import ViewportSize, WebSocketMessage
from traits_deck.core import observability
from traits_deck.core.animation import (
    AsyncioFrameScheduler,
    FrameScheduler,
    ParticleAnimation,
    Viewport,
)
from traits_deck.core.config import settings
from traits_deck.core.particles import ParticleField
from traits_deck.core.surfaces import CommandSurface, surface_for

logger = structlog.get_logger(__name__)


def build_particle_field() -> ParticleField:
    return ParticleField(
        count=settings.particle_count,
        min_radius=settings.particle_min_radius,
        max_radius=settings.particle_max_radius,
        max_speed=settings.particle_max_speed,
        palette=settings.particle_palette,
        gradient=(settings.gradient_top, settings.gradient_bottom),
    )


class ParticleStream:
    """One browser canvas fed by a server-side particle animation.

    Frames go through a small queue to a sender task. When the client falls
    behind, new frames are dropped rather than buffered.
    """

    def __init__(
        self,
        websocket: WebSocket,
        scheduler: Optional[FrameScheduler] = None,
        field: Optional[ParticleField] = None,
    ) -> None:
        self.websocket = websocket
        self.scheduler = scheduler or AsyncioFrameScheduler(settings.frame_interval_sec)
        self.field = field or build_particle_field()
        self.viewport = Viewport()
        self.animation: Optional[ParticleAnimation] = None
        self._frames: asyncio.Queue[str] = asyncio.Queue(
            maxsize=settings.frame_queue_size
        )
        self._sender: Optional[asyncio.Task] = None

    async def run(self) -> None:
        await self.websocket.accept()
        self._sender = asyncio.create_task(self._send_frames())
        try:
            while True:
                raw = await self.websocket.receive_text()
                await self._handle_message(raw)
        except WebSocketDisconnect:
            logger.info("Particle stream disconnected by client")
        finally:
            await self.close()

    async def close(self) -> None:
        self._stop_animation()
        if self._sender is not None:
            self._sender.cancel()
            try:
                await self._sender
            except asyncio.CancelledError:
                pass
            self._sender = None

    def resize(self, width: float, height: float) -> None:
        surface = surface_for(width, height)
        if self.animation is not None and self.animation.running:
            if surface is not None:
                self.viewport.resize(width, height)
                return
            # Area gone: stop ticking until a later resize brings it back.
            self._stop_animation()
        self.viewport.resize(width, height)
        # (Re)mount: a viewport without area gives no surface and an inert handle.
        self.animation = ParticleAnimation.start(
            self.field,
            surface,
            self.viewport,
            self.scheduler,
            on_frame=self._enqueue,
        )
        if self.animation.running:
            observability.record_animation_started()

    def _stop_animation(self) -> None:
        if self.animation is None:
            return
        if self.animation.running:
            observability.record_animation_stopped()
        self.animation.cancel()
        self.animation = None

    def _enqueue(self, surface: CommandSurface) -> None:
        message = json.dumps({"type": "frame", "data": surface.frame()})
        try:
            self._frames.put_nowait(message)
        except asyncio.QueueFull:
            observability.record_frame(dropped=True)
            return
        observability.record_frame()

    async def _send_frames(self) -> None:
        while True:
            message = await self._frames.get()
            if self.websocket.client_state != WebSocketState.CONNECTED:
                return
            await self.websocket.send_text(message)

    async def _handle_message(self, raw: str) -> None:
        try:
            message = WebSocketMessage.model_validate_json(raw)
        except ValidationError:
            await self._send_error("Invalid JSON message")
            return

        if message.type == "resize":
            try:
                size = ViewportSize(**message.data)
            except ValidationError:
                await self._send_error("Resize needs non-negative width and height")
                return
            self.resize(size.width, size.height)
        elif message.type == "ping":
            await self._send({"type": "pong", "data": {}})
        else:
            await self._send_error(f"Unknown message type: {message.type}")

    async def _send(self, payload: dict) -> None:
        if self.websocket.client_state == WebSocketState.CONNECTED:
            await self.websocket.send_text(json.dumps(payload))

    async def _send_error(self, error_message: str) -> None:
        await self._send({"type": "error", "data": {"message": error_message}})


async def particles_endpoint(websocket: WebSocket) -> None:
    """WebSocket endpoint streaming particle frames for the backdrop canvas."""
    stream = ParticleStream(websocket)
    try:
        await stream.run()
    except Exception as e:
        logger.error("Particle stream error", error=str(e))
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.close(code=1011, reason="Internal server error")
