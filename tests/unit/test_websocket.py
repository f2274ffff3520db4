"""Unit tests for the particle WebSocket stream."""

import json
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import WebSocket
from starlette.websockets import WebSocketState

from traits_deck.api.websocket import ParticleStream, build_particle_field
from traits_deck.core.config import settings


@pytest.fixture
def mock_websocket():
    """Create mock WebSocket."""
    ws = Mock(spec=WebSocket)
    ws.accept = AsyncMock()
    ws.send_text = AsyncMock()
    ws.client_state = WebSocketState.CONNECTED
    return ws


@pytest.fixture
def stream(mock_websocket, scheduler, seeded_field) -> ParticleStream:
    return ParticleStream(mock_websocket, scheduler=scheduler, field=seeded_field)


class TestParticleStream:
    def test_field_built_from_settings(self):
        field = build_particle_field()
        assert field.count == settings.particle_count
        assert field.palette == tuple(settings.particle_palette)

    def test_zero_viewport_does_not_mount(self, stream, scheduler):
        stream.resize(0, 0)

        assert stream.animation is not None
        assert stream.animation.running is False
        assert scheduler.pending == {}
        assert stream.viewport.listener_count == 0

    def test_later_resize_mounts(self, stream, scheduler):
        stream.resize(0, 0)
        stream.resize(800, 600)

        assert stream.animation.running is True
        assert len(scheduler.pending) == 1

    def test_resize_while_running_regenerates(self, stream, seeded_field):
        stream.resize(800, 600)
        animation = stream.animation

        stream.resize(320, 200)

        assert stream.animation is animation
        assert len(seeded_field.particles) == 50
        assert all(0 <= p.x <= 320 and 0 <= p.y <= 200 for p in seeded_field.particles)

    def test_zero_resize_while_running_stops_ticking(self, stream, scheduler):
        stream.resize(800, 600)
        running = stream.animation

        stream.resize(0, 0)
        scheduler.run_frames(3)

        assert running.running is False
        assert stream.animation.running is False
        assert scheduler.pending == {}
        assert stream._frames.qsize() == 0
        assert stream.viewport.listener_count == 0

    def test_resize_after_zero_area_remounts(self, stream, scheduler, seeded_field):
        stream.resize(800, 600)
        stream.resize(0, 0)

        stream.resize(320, 200)
        assert all(0 <= p.x <= 320 and 0 <= p.y <= 200 for p in seeded_field.particles)
        scheduler.run_frame()

        assert stream.animation.running is True
        assert stream._frames.qsize() == 1

    def test_frames_are_queued_and_dropped_when_full(self, stream, scheduler):
        stream.resize(800, 600)

        scheduler.run_frames(settings.frame_queue_size + 3)

        assert stream._frames.qsize() == settings.frame_queue_size
        message = json.loads(stream._frames.get_nowait())
        assert message["type"] == "frame"
        assert message["data"]["width"] == 800
        assert len(message["data"]["ops"]) == 52

    @pytest.mark.asyncio
    async def test_close_cancels_animation(self, stream, scheduler):
        stream.resize(800, 600)
        animation = stream.animation

        await stream.close()

        assert animation.running is False
        assert scheduler.pending == {}
        assert stream.viewport.listener_count == 0
        assert stream.animation is None

    @pytest.mark.asyncio
    async def test_ping(self, stream, mock_websocket):
        await stream._handle_message(json.dumps({"type": "ping"}))

        sent = json.loads(mock_websocket.send_text.call_args.args[0])
        assert sent["type"] == "pong"

    @pytest.mark.asyncio
    async def test_invalid_json(self, stream, mock_websocket):
        await stream._handle_message("not json")

        sent = json.loads(mock_websocket.send_text.call_args.args[0])
        assert sent == {"type": "error", "data": {"message": "Invalid JSON message"}}

    @pytest.mark.asyncio
    async def test_bad_resize(self, stream, mock_websocket, scheduler):
        await stream._handle_message(
            json.dumps({"type": "resize", "data": {"width": -1, "height": 10}})
        )

        sent = json.loads(mock_websocket.send_text.call_args.args[0])
        assert sent["type"] == "error"
        assert scheduler.pending == {}

    @pytest.mark.asyncio
    async def test_unknown_type(self, stream, mock_websocket):
        await stream._handle_message(json.dumps({"type": "shout"}))

        sent = json.loads(mock_websocket.send_text.call_args.args[0])
        assert sent["data"]["message"] == "Unknown message type: shout"

    @pytest.mark.asyncio
    async def test_no_send_after_disconnect(self, stream, mock_websocket):
        mock_websocket.client_state = WebSocketState.DISCONNECTED
        await stream._handle_message(json.dumps({"type": "ping"}))
        mock_websocket.send_text.assert_not_called()


class TestParticleEndpoint:
    def test_streams_frames_after_resize(self, client):
        with client.websocket_connect("/ws/particles") as ws:
            ws.send_json({"type": "resize", "data": {"width": 640, "height": 480}})
            message = ws.receive_json()

        assert message["type"] == "frame"
        frame = message["data"]
        assert (frame["width"], frame["height"]) == (640, 480)
        ops = frame["ops"]
        assert ops[0] == {"op": "clear"}
        assert ops[1]["op"] == "gradient"
        circles = ops[2:]
        assert len(circles) == 50
        assert all(c["op"] == "circle" for c in circles)

    def test_no_frames_without_viewport(self, client):
        with client.websocket_connect("/ws/particles") as ws:
            ws.send_json({"type": "resize", "data": {"width": 0, "height": 0}})
            ws.send_json({"type": "ping"})
            message = ws.receive_json()

        assert message["type"] == "pong"

    def test_invalid_message_keeps_socket_open(self, client):
        with client.websocket_connect("/ws/particles") as ws:
            ws.send_text("{")
            error = ws.receive_json()
            ws.send_json({"type": "ping"})
            pong = ws.receive_json()

        assert error["type"] == "error"
        assert pong["type"] == "pong"
