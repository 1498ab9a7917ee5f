from __future__ import annotations
import logging

import numpy as np

from ..models.image import Image
from ..models.filter_result import FilterResult
from ..repositories.image_repository import ImageRepository
from .pixel_math import saturate_u8
from .guards import reject_unusable

logger = logging.getLogger(__name__)

# Rows produce (B, G, R); columns weigh input (B, G, R).
SEPIA_MATRIX = np.array([
    [0.131, 0.534, 0.272],
    [0.168, 0.686, 0.349],
    [0.189, 0.769, 0.393],
], dtype=np.float32)


class ColorTransformService:
    """Per-pixel recombination of the three channels."""

    def __init__(self):
        self.image_repository = ImageRepository()

    def greyscale_invert(self, src: Image) -> FilterResult:
        """
        Grey image from the inverted red channel: every channel becomes
        255 - red.
        """
        failure = reject_unusable("greyscale_invert", src)
        if failure:
            return failure
        logger.debug(f"greyscale_invert: {src.width}x{src.height}")
        inverted_red = 255 - src.pixels[:, :, 2].astype(np.int16)
        grey = np.repeat(inverted_red[:, :, np.newaxis], 3, axis=2).astype(np.uint8)
        return FilterResult.success(self.image_repository.create_image(grey))

    def sepia_tone(self, src: Image) -> FilterResult:
        failure = reject_unusable("sepia_tone", src)
        if failure:
            return failure
        logger.debug(f"sepia_tone: {src.width}x{src.height}")
        toned = src.pixels.astype(np.float32) @ SEPIA_MATRIX.T
        return FilterResult.success(self.image_repository.create_image(saturate_u8(toned)))
