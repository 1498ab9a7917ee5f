from __future__ import annotations
from typing import Sequence
import logging

import numpy as np

from ..models.image import Image
from ..models.kernel import Kernel, BINOMIAL_1X5, PYRAMID_5X5
from ..models.filter_result import FilterResult
from ..repositories.image_repository import ImageRepository
from .guards import reject_unusable, invalid_parameter

logger = logging.getLogger(__name__)

_LIMITS = {
    np.dtype(np.uint8): (0, 255),
    np.dtype(np.int16): (-32768, 32767),
}


def truncating_divide(acc: np.ndarray, divisor: int) -> np.ndarray:
    """Integer division rounding toward zero, as C integer division does."""
    if divisor == 1:
        return acc
    quotient = np.abs(acc) // abs(divisor)
    return np.where((acc < 0) != (divisor < 0), -quotient, quotient)


def _correlate_2d(pixels: np.ndarray, weights: np.ndarray, divisor: int) -> np.ndarray:
    """Weighted sum over every full footprint; returns the interior, shape (H-2r, W-2r, C)."""
    k = weights.shape[0]
    out_h, out_w = pixels.shape[0] - k + 1, pixels.shape[1] - k + 1
    acc = np.zeros((out_h, out_w, pixels.shape[2]), dtype=np.int32)
    for ky in range(k):
        for kx in range(k):
            w = int(weights[ky, kx])
            if w:
                acc += w * pixels[ky:ky + out_h, kx:kx + out_w]
    return truncating_divide(acc, divisor)


def _horizontal_pass(pixels: np.ndarray, taps: Sequence[int], divisor: int) -> np.ndarray:
    """1-D pass along x over all rows; returns shape (H, W-2r, C)."""
    out_w = pixels.shape[1] - len(taps) + 1
    acc = np.zeros((pixels.shape[0], out_w, pixels.shape[2]), dtype=np.int32)
    for kx, w in enumerate(taps):
        if w:
            acc += w * pixels[:, kx:kx + out_w]
    return truncating_divide(acc, divisor)


def _vertical_pass(pixels: np.ndarray, taps: Sequence[int], divisor: int) -> np.ndarray:
    """1-D pass along y; returns shape (H-2r, W, C)."""
    out_h = pixels.shape[0] - len(taps) + 1
    acc = np.zeros((out_h, pixels.shape[1], pixels.shape[2]), dtype=np.int32)
    for ky, w in enumerate(taps):
        if w:
            acc += w * pixels[ky:ky + out_h]
    return truncating_divide(acc, divisor)


class ConvolutionService:
    """
    Neighbourhood-weighted sums over fixed integer kernels.

    Only interior pixels, whose whole footprint lies inside the image, are
    computed.  The border band (one kernel radius wide) is copied unchanged
    from the source, or zero-filled when ``copy_border`` is False.
    *   Pure functions of their inputs; nothing is cached between calls.
    *   The separable path is the production one; ``filter2d`` is the
        straightforward reference used to cross-check it.
    """

    def __init__(self):
        self.image_repository = ImageRepository()

    # ─── Public API ────────────────────────────────────────────────
    def filter2d(
        self,
        src: Image,
        kernel: Kernel,
        *,
        dtype=np.uint8,
        copy_border: bool = True,
    ) -> FilterResult:
        """
        Non-separable NxN pass.  A 1-D kernel is applied as its outer
        product with itself.
        """
        failure = reject_unusable("filter2d", src)
        if failure:
            return failure

        radius = kernel.radius
        interior = None
        if self._fits(src, radius, radius):
            interior = _correlate_2d(src.pixels.astype(np.int32), kernel.as_array(),
                                     kernel.effective_divisor())
        return FilterResult.success(self._compose(src, interior, radius, radius, dtype, copy_border))

    def separable_filter(
        self,
        src: Image,
        row_kernel: Kernel,
        column_kernel: Kernel | None = None,
        *,
        dtype=np.uint8,
        copy_border: bool = True,
    ) -> FilterResult:
        """
        Horizontal pass with *row_kernel*, then vertical pass with
        *column_kernel* (defaults to *row_kernel*).  Each pass truncates
        after its own division, so results can sit one below the
        non-separable answer.
        """
        failure = reject_unusable("separable_filter", src)
        if failure:
            return failure
        column_kernel = column_kernel or row_kernel
        if not (row_kernel.is_1d and column_kernel.is_1d):
            return invalid_parameter("separable_filter", "both passes need a 1-D kernel")

        r_x, r_y = row_kernel.radius, column_kernel.radius
        interior = None
        if self._fits(src, r_y, r_x):
            horizontal = _horizontal_pass(src.pixels.astype(np.int32), row_kernel.taps, row_kernel.divisor)
            interior = _vertical_pass(horizontal, column_kernel.taps, column_kernel.divisor)
        return FilterResult.success(self._compose(src, interior, r_y, r_x, dtype, copy_border))

    def convolve(
        self,
        src: Image,
        kernel: Kernel,
        *,
        dtype=np.uint8,
        copy_border: bool = True,
    ) -> FilterResult:
        """Apply *kernel*, through its 1-D factors whenever it has them."""
        if kernel.is_separable:
            return self.separable_filter(src, kernel.row, kernel.column,
                                         dtype=dtype, copy_border=copy_border)
        return self.filter2d(src, kernel, dtype=dtype, copy_border=copy_border)

    def blur5x5(self, src: Image) -> FilterResult:
        """Production 5x5 blur: [1 2 4 2 1]/10 horizontally, then vertically."""
        return self.separable_filter(src, BINOMIAL_1X5)

    def blur5x5_reference(self, src: Image) -> FilterResult:
        """Same blur through the full 5x5 pyramid kernel, divisor 100."""
        return self.filter2d(src, PYRAMID_5X5)

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _fits(src: Image, r_y: int, r_x: int) -> bool:
        fits = src.height > 2 * r_y and src.width > 2 * r_x
        if not fits:
            logger.debug(f"{src.width}x{src.height} image has no interior for radius ({r_y}, {r_x})")
        return fits

    def _compose(
        self,
        src: Image,
        interior: np.ndarray | None,
        r_y: int,
        r_x: int,
        dtype,
        copy_border: bool,
    ) -> Image:
        dtype = np.dtype(dtype)
        if copy_border:
            out = self.image_repository.create_image(src.pixels.astype(dtype, copy=True))
        else:
            out = self.image_repository.empty_like(src, dtype=dtype)
        if interior is not None:
            low, high = _LIMITS.get(dtype, (None, None))
            if low is not None:
                interior = np.clip(interior, low, high)
            out.pixels[r_y:src.height - r_y, r_x:src.width - r_x] = interior.astype(dtype)
        return out
