"""Slide domain records.

Slides and their content blocks are plain frozen records. They carry no
behavior; templates pick the markup for each block by its ``kind``.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Paragraph(_Record):
    kind: Literal["paragraph"] = "paragraph"
    text: str
    emphasis: bool = False


class Checklist(_Record):
    kind: Literal["checklist"] = "checklist"
    title: Optional[str] = None
    items: tuple[str, ...]


class Card(_Record):
    icon: str
    title: str
    text: str
    tone: str = "neutral"


class CardGrid(_Record):
    kind: Literal["cards"] = "cards"
    cards: tuple[Card, ...]


class AccordionSpec(_Record):
    """Static definition of one expandable block."""

    id: str
    title: str
    icon: Optional[str] = None
    tone: str = "neutral"
    lead: Optional[str] = None
    items: tuple[str, ...] = ()
    initially_open: bool = False


class AccordionGroup(_Record):
    kind: Literal["accordions"] = "accordions"
    hint: Optional[str] = None
    accordions: tuple[AccordionSpec, ...]


class Stage(_Record):
    label: str
    title: str
    text: str
    tone: str = "neutral"


class StageFlow(_Record):
    kind: Literal["stages"] = "stages"
    stages: tuple[Stage, ...]


class Callout(_Record):
    kind: Literal["callout"] = "callout"
    title: Optional[str] = None
    text: str
    tone: str = "neutral"


ContentBlock = Annotated[
    Union[Paragraph, Checklist, CardGrid, AccordionGroup, StageFlow, Callout],
    Field(discriminator="kind"),
]


class Slide(_Record):
    """One displayed unit of the deck."""

    id: str
    title: str
    subtitle: Optional[str] = None
    body: tuple[ContentBlock, ...] = ()
    background: str = "plain"
    decoration: Optional[str] = None
    particles: bool = False

    @property
    def accordion_specs(self) -> tuple[AccordionSpec, ...]:
        """All accordion definitions on this slide, in display order."""
        return tuple(
            spec
            for block in self.body
            if isinstance(block, AccordionGroup)
            for spec in block.accordions
        )
