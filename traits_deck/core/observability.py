from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, generate_latest

# Prometheus metrics
ACTIVE_ANIMATIONS = Gauge(
    "traits_deck_particle_animations_active", "Number of running particle animations"
)

FRAMES_RENDERED = Counter(
    "traits_deck_frames_rendered_total", "Particle frames rendered"
)

FRAMES_DROPPED = Counter(
    "traits_deck_frames_dropped_total",
    "Particle frames dropped because the client fell behind",
)

SESSIONS_CREATED = Counter(
    "traits_deck_sessions_created_total", "Presentation sessions created"
)


metrics_router = APIRouter()


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


def record_animation_started() -> None:
    ACTIVE_ANIMATIONS.inc()


def record_animation_stopped() -> None:
    ACTIVE_ANIMATIONS.dec()


def record_frame(dropped: bool = False) -> None:
    if dropped:
        FRAMES_DROPPED.inc()
    else:
        FRAMES_RENDERED.inc()
