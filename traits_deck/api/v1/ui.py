from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from jinja2 import Environment, FileSystemLoader, select_autoescape

from traits_deck.api.dependencies import get_store
from traits_deck.core.config import settings
from traits_deck.core.logging import get_logger
from traits_deck.core.observability import SESSIONS_CREATED
from traits_deck.core.shell import PresentationShell
from traits_deck.core.storage.sessions import SessionStore

logger = get_logger(__name__)

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "web" / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=select_autoescape(["html"])
)


def _viewer_shell(
    request: Request, store: SessionStore
) -> tuple[str, PresentationShell, bool]:
    """Shell for the session cookie, starting a new one when it is missing or gone."""
    session_id: Optional[str] = request.cookies.get(settings.session_cookie_name)
    if session_id:
        shell = store.find(session_id)
        if shell is not None:
            return session_id, shell, False
    session_id, shell = store.create()
    SESSIONS_CREATED.inc()
    logger.info("Viewer session started", session_id=session_id)
    return session_id, shell, True


def _html(content: str, session_id: str, created: bool) -> Response:
    response = Response(content=content, media_type="text/html")
    if created:
        response.set_cookie(
            settings.session_cookie_name, session_id, httponly=True, samesite="lax"
        )
    return response


@router.get("/", response_class=Response)
async def presentation_page(
    request: Request, store: SessionStore = Depends(get_store)
) -> Response:
    """Full presentation page: stage, progress bar and particle canvas."""
    session_id, shell, created = _viewer_shell(request, store)
    html = env.get_template("index.html").render(shell=shell)
    return _html(html, session_id, created)


@router.post("/ui/next", response_class=Response)
async def next_partial(
    request: Request, store: SessionStore = Depends(get_store)
) -> Response:
    """Advance and return the stage snippet (htmx-friendly)."""
    session_id, shell, created = _viewer_shell(request, store)
    shell.next()
    html = env.get_template("_stage.html").render(shell=shell)
    return _html(html, session_id, created)


@router.post("/ui/previous", response_class=Response)
async def previous_partial(
    request: Request, store: SessionStore = Depends(get_store)
) -> Response:
    """Go back and return the stage snippet (htmx-friendly)."""
    session_id, shell, created = _viewer_shell(request, store)
    shell.previous()
    html = env.get_template("_stage.html").render(shell=shell)
    return _html(html, session_id, created)


@router.post("/ui/accordions/{accordion_id}/toggle", response_class=Response)
async def toggle_accordion_partial(
    accordion_id: str, request: Request, store: SessionStore = Depends(get_store)
) -> Response:
    session_id, shell, created = _viewer_shell(request, store)
    accordion = shell.toggle_accordion(accordion_id)
    tmpl = env.get_template("_accordion.html")
    html = tmpl.render(accordion=accordion, hint=_accordion_hint(shell))
    return _html(html, session_id, created)


def _accordion_hint(shell: PresentationShell) -> Optional[str]:
    for block in shell.current_slide.body:
        if block.kind == "accordions":
            return block.hint
    return None
