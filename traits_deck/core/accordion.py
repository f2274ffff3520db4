from traits_deck.domain.entities.slide import AccordionSpec


class Accordion:
    """Expand/collapse state over one titled block."""

    def __init__(self, spec: AccordionSpec, is_open: bool | None = None) -> None:
        self.spec = spec
        self.is_open = spec.initially_open if is_open is None else is_open

    @property
    def id(self) -> str:
        return self.spec.id

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def __repr__(self) -> str:
        return f"Accordion(id={self.id!r}, is_open={self.is_open})"


def mount_accordions(specs: tuple[AccordionSpec, ...]) -> dict[str, Accordion]:
    """Fresh accordion instances for a slide that is being shown."""
    return {spec.id: Accordion(spec) for spec in specs}
