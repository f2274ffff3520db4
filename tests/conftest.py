"""Global test configuration and fixtures."""

import os
import random

import pytest
from fastapi.testclient import TestClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "text"
os.environ["NAVIGATION_POLICY"] = "clamped"

from traits_deck.content.ild_slides import build_registry
from traits_deck.core.particles import ParticleField
from traits_deck.core.registry import SlideRegistry
from traits_deck.core.storage.sessions import reset_session_store
from traits_deck.domain.entities.slide import (
    AccordionGroup,
    AccordionSpec,
    Paragraph,
    Slide,
)
from tests._helpers.fakes import ManualFrameScheduler, RecordingSurface


# Domain fixtures
@pytest.fixture
def deck_registry() -> SlideRegistry:
    """The real ILD deck."""
    return build_registry()


@pytest.fixture
def five_slides() -> SlideRegistry:
    """Five plain slides; the third carries two accordions."""
    slides = [
        Slide(id=f"s{i}", title=f"Slide {i}", body=(Paragraph(text=f"Body {i}"),))
        for i in range(5)
    ]
    slides[2] = Slide(
        id="s2",
        title="Slide 2",
        body=(
            AccordionGroup(
                accordions=(
                    AccordionSpec(id="a", title="A", items=("a1", "a2")),
                    AccordionSpec(id="b", title="B", items=("b1",)),
                    AccordionSpec(
                        id="c", title="C", items=("c1",), initially_open=True
                    ),
                ),
            ),
        ),
    )
    return SlideRegistry(slides)


# Particle fixtures
@pytest.fixture
def seeded_field() -> ParticleField:
    return ParticleField(rng=random.Random(1234))


@pytest.fixture
def scheduler() -> ManualFrameScheduler:
    return ManualFrameScheduler()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


# API fixtures
@pytest.fixture
def test_app():
    """Fresh application with an empty session store."""
    from traits_deck.main import create_app

    reset_session_store()
    app = create_app()
    yield app
    reset_session_store()


@pytest.fixture
def client(test_app):
    """Create test client."""
    with TestClient(test_app) as test_client:
        yield test_client
