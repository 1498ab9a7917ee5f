from __future__ import annotations
import logging
import numbers
import os

import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..models.filter_result import FilterResult
from ..repositories.image_repository import ImageRepository
from .convolution_service import ConvolutionService
from .guards import reject_empty, reject_mismatch, reject_layout, reject_unusable, invalid_parameter
from .pixel_math import saturate_u8

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

EMBOSS_WEIGHT = 0.7071  # cos 45° = sin 45°
EMBOSS_OFFSET = 128.0


class CompositeEffectService:
    """
    Effects built from two gradient buffers (magnitude, emboss), or from a
    blur followed by bucketing (quantize).
    """

    def __init__(self, convolution_service: ConvolutionService | None = None):
        self.convolution_service = convolution_service or ConvolutionService()
        self.image_repository = ImageRepository()
        self.default_levels = int(os.getenv("FRAMEFX_QUANTIZE_LEVELS", "10"))

    def magnitude(self, gx: Image, gy: Image) -> FilterResult:
        """Euclidean length of (gx, gy) per pixel and channel, as uint8."""
        failure = (reject_empty("magnitude", gx, gy) or reject_mismatch("magnitude", gx, gy)
                   or reject_layout("magnitude", gx, gy))
        if failure:
            return failure
        length = np.hypot(gx.pixels.astype(np.float32), gy.pixels.astype(np.float32))
        return FilterResult.success(self.image_repository.create_image(saturate_u8(length)))

    def emboss(self, gx: Image, gy: Image) -> FilterResult:
        """Project (gx, gy) onto the 45° direction around a mid-grey baseline."""
        failure = (reject_empty("emboss", gx, gy) or reject_mismatch("emboss", gx, gy)
                   or reject_layout("emboss", gx, gy))
        if failure:
            return failure
        shade = (EMBOSS_WEIGHT * gx.pixels.astype(np.float32)
                 + EMBOSS_WEIGHT * gy.pixels.astype(np.float32)
                 + EMBOSS_OFFSET)
        return FilterResult.success(self.image_repository.create_image(saturate_u8(shade)))

    def blur_quantize(self, src: Image, levels: int | None = None) -> FilterResult:
        """
        Blur with the separable 5x5 kernel, then snap every channel value
        down to the lower edge of one of *levels* equal-width buckets.
        The bucket index is capped at levels - 1, so 255 folds into the
        top bucket and white comes out as that bucket's floor (127 at
        levels=2).

        Args:
            src (Image): uint8 source frame.
            levels (int): Number of buckets over 0..255, at least 1.
                Defaults to FRAMEFX_QUANTIZE_LEVELS.

        Returns:
            FilterResult: uint8 image on success; INVALID_PARAMETER when
            levels < 1 or the frame is not 3-channel, EMPTY_INPUT on an
            empty frame.
        """
        levels = self.default_levels if levels is None else levels
        failure = reject_unusable("blur_quantize", src)
        if failure:
            return failure
        if isinstance(levels, bool) or not isinstance(levels, numbers.Integral) or levels < 1:
            return invalid_parameter("blur_quantize", f"levels must be a positive integer, got {levels!r}")
        levels = int(levels)

        blurred = self.convolution_service.blur5x5(src)
        if not blurred.ok:
            return blurred

        bucket = 255.0 / levels
        index = np.minimum(np.floor(blurred.image.pixels / bucket), levels - 1)
        quantized = (index * bucket).astype(np.uint8)
        return FilterResult.success(self.image_repository.create_image(quantized))
