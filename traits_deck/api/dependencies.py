from fastapi import Depends

from traits_deck.core.shell import PresentationShell
from traits_deck.core.storage.sessions import SessionStore, get_session_store


def get_store() -> SessionStore:
    """Session store dependency."""
    return get_session_store()


def get_shell(session_id: str, store: SessionStore = Depends(get_store)) -> PresentationShell:
    """Resolve the shell for a session id in the path (404 via the domain handler)."""
    return store.get(session_id)
