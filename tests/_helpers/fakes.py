"""Fake frame scheduler and drawing surface for testing."""

from typing import Any, Callable, Dict, List, Tuple


class ManualFrameScheduler:
    """Frame scheduler that only runs callbacks when the test asks."""

    def __init__(self) -> None:
        self._next_token = 0
        self.pending: Dict[int, Callable[[], None]] = {}
        self.cancelled: List[int] = []

    def request_frame(self, callback: Callable[[], None]) -> int:
        token = self._next_token
        self._next_token += 1
        self.pending[token] = callback
        return token

    def cancel_frame(self, token: int) -> None:
        if self.pending.pop(token, None) is not None:
            self.cancelled.append(token)

    def run_frame(self) -> int:
        """Run every callback pending right now; returns how many ran."""
        callbacks = list(self.pending.values())
        self.pending.clear()
        for callback in callbacks:
            callback()
        return len(callbacks)

    def run_frames(self, count: int) -> None:
        for _ in range(count):
            self.run_frame()


class RecordingSurface:
    """Drawing surface that keeps every call for later assertions."""

    def __init__(self, width: float = 0, height: float = 0) -> None:
        self.width = width
        self.height = height
        self.calls: List[Tuple[str, Any]] = []

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.calls.append(("resize", (width, height)))

    def clear(self) -> None:
        self.calls.append(("clear", None))

    def fill_vertical_gradient(self, top: str, bottom: str) -> None:
        self.calls.append(("gradient", (top, bottom)))

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.calls.append(("circle", (x, y, radius, color)))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def reset(self) -> None:
        self.calls.clear()
