"""Precondition checks shared by the filter services."""
from __future__ import annotations
import logging

from ..models.image import Image
from ..models.filter_result import FilterResult, FilterStatus

logger = logging.getLogger(__name__)


def reject_empty(op: str, *images: Image) -> FilterResult | None:
    """Failure result if any of *images* carries no pixel data, else None."""
    for img in images:
        if img is None or img.is_empty:
            logger.warning(f"{op}: frame is empty")
            return FilterResult.failure(FilterStatus.EMPTY_INPUT, f"{op}: frame is empty")
    return None


def reject_mismatch(op: str, first: Image, second: Image) -> FilterResult | None:
    """Failure result if the two images differ in height, width or channels."""
    if not first.same_geometry(second):
        message = (f"{op}: {first.width}x{first.height}x{first.channels} vs "
                   f"{second.width}x{second.height}x{second.channels}")
        logger.warning(message)
        return FilterResult.failure(FilterStatus.DIMENSION_MISMATCH, message)
    return None


def invalid_parameter(op: str, message: str) -> FilterResult:
    logger.warning(f"{op}: {message}")
    return FilterResult.failure(FilterStatus.INVALID_PARAMETER, f"{op}: {message}")


def reject_layout(op: str, *images: Image) -> FilterResult | None:
    """Failure result unless every image is (H, W, 3)."""
    for img in images:
        if img.channels != Image.CHANNELS:
            return invalid_parameter(op, f"expected (H, W, {Image.CHANNELS}) pixels, got shape {img.pixels.shape}")
    return None


def reject_unusable(op: str, *images: Image) -> FilterResult | None:
    """Empty-input check followed by the channel layout check."""
    return reject_empty(op, *images) or reject_layout(op, *images)
