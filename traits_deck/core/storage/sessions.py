from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Optional
from uuid import uuid4

from traits_deck.content.ild_slides import build_registry
from traits_deck.core.config import settings
from traits_deck.core.logging import get_logger
from traits_deck.core.registry import SlideRegistry
from traits_deck.core.shell import PresentationShell
from traits_deck.domain.exceptions import SessionNotFoundException
from traits_deck.domain.value_objects.navigation import BoundaryPolicy

logger = get_logger(__name__)


class SessionStore(ABC):
    registry: SlideRegistry
    policy: BoundaryPolicy

    @abstractmethod
    def create(self) -> tuple[str, PresentationShell]: ...

    @abstractmethod
    def find(self, session_id: str) -> Optional[PresentationShell]: ...

    @abstractmethod
    def delete(self, session_id: str) -> bool: ...

    def get(self, session_id: str) -> PresentationShell:
        shell = self.find(session_id)
        if shell is None:
            raise SessionNotFoundException(session_id)
        return shell


class InMemorySessionStore(SessionStore):
    """Bounded map of viewer session id to shell; least recently used goes first."""

    def __init__(
        self,
        registry: SlideRegistry,
        policy: BoundaryPolicy = BoundaryPolicy.CLAMPED,
        max_sessions: int = 1000,
    ) -> None:
        self.registry = registry
        self.policy = policy
        self.max_sessions = max_sessions
        self._shells: OrderedDict[str, PresentationShell] = OrderedDict()

    def __len__(self) -> int:
        return len(self._shells)

    def create(self) -> tuple[str, PresentationShell]:
        session_id = uuid4().hex
        self._shells[session_id] = PresentationShell(self.registry, self.policy)
        while len(self._shells) > self.max_sessions:
            evicted, _ = self._shells.popitem(last=False)
            logger.info("Evicted presentation session", session_id=evicted)
        logger.debug("Created presentation session", session_id=session_id)
        return session_id, self._shells[session_id]

    def find(self, session_id: str) -> Optional[PresentationShell]:
        shell = self._shells.get(session_id)
        if shell is not None:
            self._shells.move_to_end(session_id)
        return shell

    def delete(self, session_id: str) -> bool:
        return self._shells.pop(session_id, None) is not None


_session_store_singleton: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    global _session_store_singleton
    if _session_store_singleton is None:
        _session_store_singleton = InMemorySessionStore(
            build_registry(),
            settings.navigation_policy,
            settings.max_sessions,
        )
        logger.info(
            "Initialized in-memory session store",
            policy=settings.navigation_policy.value,
            max_sessions=settings.max_sessions,
        )
    return _session_store_singleton


def reset_session_store(store: Optional[SessionStore] = None) -> None:
    """Replace the process-wide store (tests use this for isolation)."""
    global _session_store_singleton
    _session_store_singleton = store
