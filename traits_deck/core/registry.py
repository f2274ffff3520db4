from typing import Iterable, Iterator

from traits_deck.domain.entities.slide import Slide
from traits_deck.domain.exceptions import SlideNotFoundException


class SlideRegistry:
    """Ordered, fixed set of slides built once at startup."""

    def __init__(self, slides: Iterable[Slide]) -> None:
        self._slides: tuple[Slide, ...] = tuple(slides)
        if not self._slides:
            raise ValueError("A slide registry needs at least one slide")
        self._positions: dict[str, int] = {}
        for index, slide in enumerate(self._slides):
            if slide.id in self._positions:
                raise ValueError(f"Duplicate slide id: {slide.id}")
            self._positions[slide.id] = index

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)

    def __getitem__(self, index: int) -> Slide:
        return self._slides[index]

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(slide.id for slide in self._slides)

    def index_of(self, slide_id: str) -> int:
        try:
            return self._positions[slide_id]
        except KeyError:
            raise SlideNotFoundException(slide_id) from None
