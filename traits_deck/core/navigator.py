from typing import Optional

from traits_deck.domain.value_objects.navigation import (
    BoundaryPolicy,
    Direction,
    NavigationState,
)


class Navigator:
    """Tracks the active slide index and moves it one step at a time.

    Clamped navigation saturates at both ends. Cyclic navigation wraps modulo
    the slide count. Every transition is total over the valid index range.
    """

    def __init__(
        self,
        count: int,
        policy: BoundaryPolicy = BoundaryPolicy.CLAMPED,
        start: int = 0,
    ) -> None:
        if count < 1:
            raise ValueError("Navigator needs at least one slide")
        if not 0 <= start < count:
            raise ValueError(f"Start index {start} is outside [0, {count - 1}]")
        self._count = count
        self._policy = BoundaryPolicy(policy)
        self._index = start
        self._direction: Optional[Direction] = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def policy(self) -> BoundaryPolicy:
        return self._policy

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def direction(self) -> Optional[Direction]:
        return self._direction

    @property
    def can_next(self) -> bool:
        return self._policy == BoundaryPolicy.CYCLIC or not self.state().is_last

    @property
    def can_previous(self) -> bool:
        return self._policy == BoundaryPolicy.CYCLIC or not self.state().is_first

    def next(self) -> int:
        if self._policy == BoundaryPolicy.CYCLIC:
            target = (self._index + 1) % self._count
        else:
            target = min(self._index + 1, self._count - 1)
        return self._move_to(target, Direction.FORWARD)

    def previous(self) -> int:
        if self._policy == BoundaryPolicy.CYCLIC:
            target = (self._index - 1 + self._count) % self._count
        else:
            target = max(self._index - 1, 0)
        return self._move_to(target, Direction.BACKWARD)

    def state(self) -> NavigationState:
        return NavigationState(
            current_index=self._index, count=self._count, direction=self._direction
        )

    def _move_to(self, target: int, direction: Direction) -> int:
        # A clamped no-op leaves the last direction untouched.
        if target != self._index:
            self._index = target
            self._direction = direction
        return self._index
