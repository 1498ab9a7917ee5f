"""
Frame Pipeline
Runs one frame through at most one structural transform, then the
brightness point operation.  Callers pick the transform with a FilterMode
instead of holding on/off flags.
"""

import logging

from ..models.image import Image
from ..models.filter_result import FilterResult
from ..models.frame_settings import FilterMode, FrameSettings
from ..services.image_service import ImageService
from ..services.color_transform_service import ColorTransformService
from ..services.convolution_service import ConvolutionService
from ..services.gradient_service import GradientService
from ..services.composite_effect_service import CompositeEffectService
from ..services.point_operation_service import PointOperationService

logger = logging.getLogger(__name__)

_convolution_service = ConvolutionService()


def process_frame(
    frame: Image,
    settings: FrameSettings = FrameSettings(),
    *,
    image_service: ImageService = ImageService(),
    color_service: ColorTransformService = ColorTransformService(),
    convolution_service: ConvolutionService = _convolution_service,
    gradient_service: GradientService = GradientService(_convolution_service),
    composite_service: CompositeEffectService = CompositeEffectService(_convolution_service),
    point_service: PointOperationService = PointOperationService(),
) -> FilterResult:
    """
    Apply *settings* to *frame* and return the displayable uint8 result.

    A failing step is returned as-is; the caller decides whether to keep
    showing its previous frame.

    Args:
        frame: Source frame (BGR, uint8).
        settings: Selected mode, brightness factor and quantize levels.

    Returns:
        FilterResult: OK with a new Image, or the first failure met.
    """
    mode = settings.mode

    if mode is FilterMode.NONE:
        result = point_service.brightness(frame, 1.0)
    elif mode is FilterMode.GREYSCALE_INVERT:
        result = color_service.greyscale_invert(frame)
    elif mode is FilterMode.SEPIA:
        result = color_service.sepia_tone(frame)
    elif mode is FilterMode.BLUR:
        result = convolution_service.blur5x5(frame)
    elif mode in (FilterMode.GRADIENT_X, FilterMode.GRADIENT_Y):
        result = (gradient_service.sobel_x(frame) if mode is FilterMode.GRADIENT_X
                  else gradient_service.sobel_y(frame))
        if result.ok:
            result = FilterResult.success(image_service.to_display(result.image))
    elif mode in (FilterMode.MAGNITUDE, FilterMode.EMBOSS):
        gx, gy = gradient_service.gradients(frame)
        if not gx.ok:
            return gx
        if not gy.ok:
            return gy
        combine = (composite_service.magnitude if mode is FilterMode.MAGNITUDE
                   else composite_service.emboss)
        result = combine(gx.image, gy.image)
    elif mode is FilterMode.BLUR_QUANTIZE:
        result = composite_service.blur_quantize(frame, settings.quantize_levels)
    elif mode is FilterMode.NEGATIVE:
        result = point_service.negative(frame)
    else:
        raise ValueError(f"Unknown filter mode: {mode}")

    if not result.ok:
        logger.info(f"{mode.value}: {result.status.name}, frame left unchanged")
        return result

    if settings.brightness != 1.0:
        result = point_service.brightness(result.image, settings.brightness)
    return result
