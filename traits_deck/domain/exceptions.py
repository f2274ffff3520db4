class DomainException(Exception):
    pass


class SessionNotFoundException(DomainException):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Presentation session {session_id} not found")
        self.session_id = session_id


class SlideNotFoundException(DomainException):
    def __init__(self, slide_id: str) -> None:
        super().__init__(f"Slide with ID {slide_id} not found")
        self.slide_id = slide_id


class AccordionNotFoundException(DomainException):
    def __init__(self, accordion_id: str, slide_id: str) -> None:
        super().__init__(f"Accordion {accordion_id} is not on slide {slide_id}")
        self.accordion_id = accordion_id
        self.slide_id = slide_id
