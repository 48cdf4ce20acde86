"""Shared fixtures. pygame runs headless for the rendering tests."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from ring_reflex import GameSession, InputRouter


@pytest.fixture
def session():
    """A seeded session laid out on an 800x650 canvas (ring r=200)."""
    s = GameSession(seed=42)
    s.resize(800, 650)
    return s


@pytest.fixture
def router(session):
    return InputRouter(session)
