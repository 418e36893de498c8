import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import matplotlib

matplotlib.use("Agg")

import pytest

import logger
from quadtree import Rectangle, create_quad_tree


@pytest.fixture(autouse=True)
def reset_logger():
    logger.set_stopwatch(None)
    yield
    logger.set_stopwatch(None)


@pytest.fixture
def world():
    return Rectangle(0, 0, 100, 100)


@pytest.fixture
def small_tree(world):
    return create_quad_tree(world, capacity=4)
