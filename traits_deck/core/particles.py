"""Decorative particle backdrop.

A field holds a fixed batch of circles drifting slowly over a vertical
gradient. Each tick draws every particle, moves it by its velocity and then
reflects the velocity on any axis where the circle pokes past the surface
edge. Positions are never clamped, so a particle may overlap an edge for a
tick before it turns around.
"""

import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

DEFAULT_PALETTE = (
    "rgba(59, 130, 246, 0.35)",
    "rgba(99, 102, 241, 0.30)",
    "rgba(14, 165, 233, 0.30)",
    "rgba(167, 139, 250, 0.25)",
)


def _between(rng: random.Random, low: float, high: float) -> float:
    # half-open [low, high), unlike Random.uniform
    return low + rng.random() * (high - low)


class DrawingSurface(Protocol):
    """Anything that can take the draw calls of one frame."""

    def resize(self, width: float, height: float) -> None: ...

    def clear(self) -> None: ...

    def fill_vertical_gradient(self, top: str, bottom: str) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None: ...


@dataclass
class Particle:
    x: float
    y: float
    radius: float
    vx: float
    vy: float
    color: str

    def advance(self, width: float, height: float) -> None:
        self.x += self.vx
        self.y += self.vy
        if self.x + self.radius > width or self.x - self.radius < 0:
            self.vx = -self.vx
        if self.y + self.radius > height or self.y - self.radius < 0:
            self.vy = -self.vy


class ParticleField:
    def __init__(
        self,
        count: int = 50,
        min_radius: float = 5.0,
        max_radius: float = 30.0,
        max_speed: float = 0.15,
        palette: Sequence[str] = DEFAULT_PALETTE,
        gradient: tuple[str, str] = ("#eff6ff", "#e0e7ff"),
        rng: Optional[random.Random] = None,
    ) -> None:
        if not palette:
            raise ValueError("Particle palette must not be empty")
        self.count = count
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.max_speed = max_speed
        self.palette = tuple(palette)
        self.gradient = gradient
        self.width = 0.0
        self.height = 0.0
        self.particles: list[Particle] = []
        self._rng = rng or random.Random()

    def reset(self, width: float, height: float) -> None:
        """Regenerate the whole batch for a surface of the given size."""
        self.width = float(width)
        self.height = float(height)
        rng = self._rng
        self.particles = [
            Particle(
                x=rng.random() * self.width,
                y=rng.random() * self.height,
                radius=_between(rng, self.min_radius, self.max_radius),
                vx=_between(rng, -self.max_speed, self.max_speed),
                vy=_between(rng, -self.max_speed, self.max_speed),
                color=rng.choice(self.palette),
            )
            for _ in range(self.count)
        ]

    def step(self, surface: DrawingSurface) -> None:
        """Draw one frame onto ``surface`` and advance every particle."""
        surface.clear()
        surface.fill_vertical_gradient(*self.gradient)
        for particle in self.particles:
            surface.fill_circle(
                particle.x, particle.y, particle.radius, particle.color
            )
            particle.advance(self.width, self.height)
