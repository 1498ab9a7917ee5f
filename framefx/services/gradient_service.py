from __future__ import annotations
from typing import Tuple
import logging

import numpy as np

from ..models.image import Image
from ..models.kernel import Kernel, SOBEL_X_3X3, SOBEL_Y_3X3
from ..models.filter_result import FilterResult
from .convolution_service import ConvolutionService
from .guards import reject_unusable

logger = logging.getLogger(__name__)


class GradientService:
    """
    3x3 Sobel derivatives.  Output is int16, same size as the source, with
    the one-pixel border left at zero.
    """

    def __init__(self, convolution_service: ConvolutionService | None = None):
        self.convolution_service = convolution_service or ConvolutionService()

    def sobel_x(self, src: Image) -> FilterResult:
        """Horizontal derivative: positive where the image gets brighter to the right."""
        return self._derivative("sobel_x", src, SOBEL_X_3X3)

    def sobel_y(self, src: Image) -> FilterResult:
        """Vertical derivative: positive where the image gets brighter downwards."""
        return self._derivative("sobel_y", src, SOBEL_Y_3X3)

    def gradients(self, src: Image) -> Tuple[FilterResult, FilterResult]:
        """Both derivatives of the same frame, (gx, gy)."""
        return self.sobel_x(src), self.sobel_y(src)

    def _derivative(self, op: str, src: Image, kernel: Kernel) -> FilterResult:
        failure = reject_unusable(op, src)
        if failure:
            return failure
        return self.convolution_service.convolve(src, kernel, dtype=np.int16, copy_border=False)
