from __future__ import annotations
import logging
import math

import numpy as np

from ..models.image import Image
from ..models.filter_result import FilterResult
from ..repositories.image_repository import ImageRepository
from .guards import reject_unusable, invalid_parameter
from .pixel_math import saturate_u8

logger = logging.getLogger(__name__)


class PointOperationService:
    """Per-pixel, per-channel arithmetic with no neighbour dependency."""

    def __init__(self):
        self.image_repository = ImageRepository()

    def brightness(self, src: Image, factor: float) -> FilterResult:
        """
        Scale every channel by *factor* and clamp to [0, 255].

        Negative factors are accepted and saturate to black.
        """
        failure = reject_unusable("brightness", src)
        if failure:
            return failure
        if not math.isfinite(factor):
            return invalid_parameter("brightness", f"factor must be finite, got {factor!r}")
        if factor < 0:
            logger.debug(f"brightness: negative factor {factor} saturates to 0")
        scaled = src.pixels.astype(np.float32) * np.float32(factor)
        return FilterResult.success(self.image_repository.create_image(saturate_u8(scaled)))

    def negative(self, src: Image) -> FilterResult:
        failure = reject_unusable("negative", src)
        if failure:
            return failure
        return FilterResult.success(self.image_repository.create_image(255 - src.pixels))
