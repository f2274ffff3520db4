from typing import Optional

from traits_deck.core.accordion import Accordion, mount_accordions
from traits_deck.core.logging import get_logger
from traits_deck.core.navigator import Navigator
from traits_deck.core.registry import SlideRegistry
from traits_deck.domain.entities.slide import Slide
from traits_deck.domain.exceptions import AccordionNotFoundException
from traits_deck.domain.value_objects.navigation import BoundaryPolicy, Direction

logger = get_logger(__name__)


class PresentationShell:
    """Per-viewer state: which slide is showing and which accordions are open.

    Only the mounted slide has accordion instances. Navigating away drops
    them, so returning to a slide starts from its default open flags.
    """

    def __init__(
        self,
        registry: SlideRegistry,
        policy: BoundaryPolicy = BoundaryPolicy.CLAMPED,
    ) -> None:
        self.registry = registry
        self.navigator = Navigator(len(registry), policy)
        self._accordions: dict[str, Accordion] = {}
        self._mount()

    @property
    def current_index(self) -> int:
        return self.navigator.current_index

    @property
    def current_slide(self) -> Slide:
        return self.registry[self.navigator.current_index]

    @property
    def slide_count(self) -> int:
        return len(self.registry)

    @property
    def progress(self) -> float:
        return self.navigator.state().progress

    @property
    def direction(self) -> Optional[Direction]:
        return self.navigator.direction

    @property
    def accordions(self) -> list[Accordion]:
        return list(self._accordions.values())

    def next(self) -> Slide:
        return self._move(self.navigator.next)

    def previous(self) -> Slide:
        return self._move(self.navigator.previous)

    def accordion(self, accordion_id: str) -> Accordion:
        try:
            return self._accordions[accordion_id]
        except KeyError:
            raise AccordionNotFoundException(
                accordion_id, self.current_slide.id
            ) from None

    def toggle_accordion(self, accordion_id: str) -> Accordion:
        accordion = self.accordion(accordion_id)
        accordion.toggle()
        logger.debug(
            "Accordion toggled",
            slide_id=self.current_slide.id,
            accordion_id=accordion_id,
            is_open=accordion.is_open,
        )
        return accordion

    def _move(self, step) -> Slide:
        before = self.navigator.current_index
        after = step()
        # A clamped no-op keeps the slide mounted with its accordion state.
        if after != before:
            self._mount()
        return self.current_slide

    def _mount(self) -> None:
        self._accordions = mount_accordions(self.current_slide.accordion_specs)
