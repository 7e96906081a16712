"""
Shared pytest setup for Classic Pong tests
"""

import os

import numpy as np
import pytest

# Headless SDL so the renderer can be exercised without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible launch directions"""
    return np.random.default_rng(1234)
