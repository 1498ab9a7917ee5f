"""
Pixel-level frame filters: colour transforms, convolution, Sobel gradients,
gradient composites and point operations over in-memory BGR images.
"""

from .models.image import Image
from .models.kernel import Kernel, PYRAMID_5X5, BINOMIAL_1X5, BINOMIAL_3X3, SOBEL_X_3X3, SOBEL_Y_3X3
from .models.filter_result import (
    FilterStatus,
    FilterResult,
    FilterError,
    EmptyInputError,
    DimensionMismatchError,
    InvalidParameterError,
)
from .models.frame_settings import FilterMode, FrameSettings

__version__ = "1.0.0"
