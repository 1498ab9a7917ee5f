import numpy as np

from framefx.models.image import Image


def make_image(height: int, width: int, value=0, dtype=np.uint8) -> Image:
    """Uniform image of the given size."""
    return Image(pixels=np.full((height, width, 3), value, dtype=dtype))


def horizontal_ramp(height: int, width: int, step: int = 10) -> Image:
    """Each column holds step * x in every channel."""
    row = (np.arange(width) * step).astype(np.uint8)
    pixels = np.repeat(np.tile(row, (height, 1))[:, :, np.newaxis], 3, axis=2)
    return Image(pixels=pixels)


def vertical_ramp(height: int, width: int, step: int = 10) -> Image:
    """Each row holds step * y in every channel."""
    ramp = horizontal_ramp(width, height, step)
    return Image(pixels=np.ascontiguousarray(ramp.pixels.transpose(1, 0, 2)))
