from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from traits_deck.core.accordion import Accordion
from traits_deck.core.shell import PresentationShell
from traits_deck.domain.entities.slide import Slide
from traits_deck.domain.value_objects.navigation import BoundaryPolicy, Direction


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"


class MetaResponse(BaseModel):
    service: str
    version: str
    navigation_policy: BoundaryPolicy
    slide_count: int


class SlideSummary(BaseModel):
    index: int
    id: str
    title: str
    subtitle: Optional[str] = None


class SlideListResponse(BaseModel):
    slides: List[SlideSummary]


class AccordionView(BaseModel):
    id: str
    title: str
    is_open: bool

    @classmethod
    def from_accordion(cls, accordion: Accordion) -> "AccordionView":
        return cls(id=accordion.id, title=accordion.spec.title, is_open=accordion.is_open)


class ShellView(BaseModel):
    session_id: str
    policy: BoundaryPolicy
    current_index: int
    slide_count: int
    progress: float
    direction: Optional[Direction] = None
    can_previous: bool
    can_next: bool
    slide: Slide
    accordions: List[AccordionView] = Field(default_factory=list)

    @classmethod
    def from_shell(cls, session_id: str, shell: PresentationShell) -> "ShellView":
        state = shell.navigator.state()
        return cls(
            session_id=session_id,
            policy=shell.navigator.policy,
            current_index=state.current_index,
            slide_count=state.count,
            progress=state.progress,
            direction=state.direction,
            can_previous=shell.navigator.can_previous,
            can_next=shell.navigator.can_next,
            slide=shell.current_slide,
            accordions=[AccordionView.from_accordion(a) for a in shell.accordions],
        )


# WebSocket Message Schemas
class WebSocketMessage(BaseModel):
    type: str
    data: Dict[str, Any] = Field(default_factory=dict)


class ViewportSize(BaseModel):
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
