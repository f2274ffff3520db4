"""Self-rescheduling particle animation with an explicit cancel handle."""

import asyncio
from typing import Any, Callable, List, Optional, Protocol

from traits_deck.core.logging import get_logger
from traits_deck.core.particles import DrawingSurface, ParticleField

logger = get_logger(__name__)

ResizeListener = Callable[[float, float], None]
FrameCallback = Callable[[DrawingSurface], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> Any: ...

    def cancel_frame(self, token: Any) -> None: ...


class AsyncioFrameScheduler:
    """Runs frame callbacks on the event loop at a fixed interval."""

    def __init__(
        self,
        interval: float,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.interval = interval
        self._loop = loop

    def request_frame(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.interval, callback)

    def cancel_frame(self, token: asyncio.TimerHandle) -> None:
        token.cancel()


class Viewport:
    """Current drawing area size plus the listeners interested in resizes."""

    def __init__(self, width: float = 0, height: float = 0) -> None:
        self.width = float(width)
        self.height = float(height)
        self._listeners: List[ResizeListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_resize_listener(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        for listener in list(self._listeners):
            listener(self.width, self.height)


class ParticleAnimation:
    """Handle for a running particle loop.

    ``cancel()`` revokes the pending tick and removes the resize listener.
    After it returns no further tick runs. Calling it again does nothing.
    """

    def __init__(
        self,
        field: ParticleField,
        surface: Optional[DrawingSurface],
        viewport: Viewport,
        scheduler: FrameScheduler,
        on_frame: Optional[FrameCallback] = None,
    ) -> None:
        self.field = field
        self.surface = surface
        self.viewport = viewport
        self.scheduler = scheduler
        self.on_frame = on_frame
        self.frames = 0
        self._pending: Any = None
        self._running = False

    @classmethod
    def start(
        cls,
        field: ParticleField,
        surface: Optional[DrawingSurface],
        viewport: Viewport,
        scheduler: FrameScheduler,
        on_frame: Optional[FrameCallback] = None,
    ) -> "ParticleAnimation":
        animation = cls(field, surface, viewport, scheduler, on_frame)
        if surface is None:
            # Nothing to draw on; the handle stays inert.
            logger.debug("Particle animation skipped, no drawing surface")
            return animation

        viewport.add_resize_listener(animation._on_resize)
        animation._running = True
        try:
            field.reset(viewport.width, viewport.height)
            animation._pending = scheduler.request_frame(animation._tick)
        except Exception:
            animation.cancel()
            raise
        logger.debug(
            "Particle animation started",
            width=viewport.width,
            height=viewport.height,
            particles=len(field.particles),
        )
        return animation

    @property
    def running(self) -> bool:
        return self._running

    def cancel(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel_frame(self._pending)
            self._pending = None
        self.viewport.remove_resize_listener(self._on_resize)
        if self._running:
            self._running = False
            logger.debug("Particle animation cancelled", frames=self.frames)

    def __enter__(self) -> "ParticleAnimation":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()

    def _on_resize(self, width: float, height: float) -> None:
        self.surface.resize(width, height)
        self.field.reset(width, height)

    def _tick(self) -> None:
        self._pending = None
        if not self._running:
            return
        self.field.step(self.surface)
        self.frames += 1
        if self.on_frame is not None:
            self.on_frame(self.surface)
        # on_frame may have cancelled us
        if self._running:
            self._pending = self.scheduler.request_frame(self._tick)
