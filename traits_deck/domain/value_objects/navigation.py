"""Navigation value objects"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BoundaryPolicy(str, Enum):
    """What next/previous do at the ends of the deck"""

    CLAMPED = "clamped"
    CYCLIC = "cyclic"


class Direction(str, Enum):
    """Direction of the last transition, used for enter/exit animation"""

    FORWARD = "forward"
    BACKWARD = "backward"


class NavigationState(BaseModel):
    """Snapshot of a navigator"""

    model_config = ConfigDict(frozen=True)

    current_index: int
    count: int
    direction: Optional[Direction] = None

    @property
    def progress(self) -> float:
        """Fraction of the deck reached, counting the current slide"""
        return (self.current_index + 1) / self.count

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self.count - 1
