from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class FilterMode(str, Enum):
    """Structural transform applied to a frame before the point operation."""
    NONE = "none"
    GREYSCALE_INVERT = "greyscale-invert"
    SEPIA = "sepia"
    BLUR = "blur"
    GRADIENT_X = "gradient-x"
    GRADIENT_Y = "gradient-y"
    MAGNITUDE = "magnitude"
    BLUR_QUANTIZE = "blur-quantize"
    EMBOSS = "emboss"
    NEGATIVE = "negative"


def _default_levels() -> int:
    return int(os.getenv("FRAMEFX_QUANTIZE_LEVELS", "10"))


@dataclass(frozen=True)
class FrameSettings:
    """
    Value-object describing what to do with one frame.
    Replaces a set of mutually exclusive on/off flags with a single mode.
    """
    mode: FilterMode = FilterMode.NONE
    brightness: float = 1.0      # multiplier, 1.0 = unchanged
    quantize_levels: int = None  # falls back to FRAMEFX_QUANTIZE_LEVELS

    def __post_init__(self):
        if self.quantize_levels is None:
            object.__setattr__(self, "quantize_levels", _default_levels())
        object.__setattr__(self, "mode", FilterMode(self.mode))
