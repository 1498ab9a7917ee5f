import numpy as np
import pytest

from framefx.models.image import Image


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def random_image(rng) -> Image:
    return Image(pixels=rng.integers(0, 256, size=(24, 32, 3), dtype=np.uint8))


@pytest.fixture
def empty_image() -> Image:
    return Image(pixels=np.zeros((0, 0, 3), dtype=np.uint8))
