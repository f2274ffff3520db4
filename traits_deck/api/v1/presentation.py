from fastapi import APIRouter, Depends, Response

from traits_deck.api.dependencies import get_shell, get_store
from traits_deck.api.schemas import (
    AccordionView,
    ShellView,
    SlideListResponse,
    SlideSummary,
)
from traits_deck.core.logging import get_logger
from traits_deck.core.observability import SESSIONS_CREATED
from traits_deck.core.shell import PresentationShell
from traits_deck.core.storage.sessions import SessionStore
from traits_deck.domain.exceptions import SessionNotFoundException

logger = get_logger(__name__)

router = APIRouter()


@router.get("/slides", response_model=SlideListResponse)
async def list_slides(store: SessionStore = Depends(get_store)) -> SlideListResponse:
    """List the deck in display order."""
    return SlideListResponse(
        slides=[
            SlideSummary(
                index=index, id=slide.id, title=slide.title, subtitle=slide.subtitle
            )
            for index, slide in enumerate(store.registry)
        ]
    )


@router.post("/sessions", response_model=ShellView, status_code=201)
async def create_session(store: SessionStore = Depends(get_store)) -> ShellView:
    session_id, shell = store.create()
    SESSIONS_CREATED.inc()
    logger.info("Presentation session created", session_id=session_id)
    return ShellView.from_shell(session_id, shell)


@router.get("/sessions/{session_id}", response_model=ShellView)
async def get_session(
    session_id: str, shell: PresentationShell = Depends(get_shell)
) -> ShellView:
    return ShellView.from_shell(session_id, shell)


@router.post("/sessions/{session_id}/next", response_model=ShellView)
async def next_slide(
    session_id: str, shell: PresentationShell = Depends(get_shell)
) -> ShellView:
    shell.next()
    logger.debug(
        "Navigated forward", session_id=session_id, index=shell.current_index
    )
    return ShellView.from_shell(session_id, shell)


@router.post("/sessions/{session_id}/previous", response_model=ShellView)
async def previous_slide(
    session_id: str, shell: PresentationShell = Depends(get_shell)
) -> ShellView:
    shell.previous()
    logger.debug(
        "Navigated backward", session_id=session_id, index=shell.current_index
    )
    return ShellView.from_shell(session_id, shell)


@router.post(
    "/sessions/{session_id}/accordions/{accordion_id}/toggle",
    response_model=AccordionView,
)
async def toggle_accordion(
    accordion_id: str, shell: PresentationShell = Depends(get_shell)
) -> AccordionView:
    return AccordionView.from_accordion(shell.toggle_accordion(accordion_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(
    session_id: str, store: SessionStore = Depends(get_store)
) -> Response:
    if not store.delete(session_id):
        raise SessionNotFoundException(session_id)
    logger.info("Presentation session deleted", session_id=session_id)
    return Response(status_code=204)
