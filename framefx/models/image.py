from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: BGR pixels (+ optional source path for bookkeeping).
    No filtering logic in this file.
    """
    pixels: np.ndarray | None # Shape (H, W, 3), dtype uint8 or int16, BGR order.
    path: Path | None = None # Source of the image.

    CHANNELS = 3

    @property
    def is_empty(self) -> bool:
        return self.pixels is None or self.pixels.size == 0

    @property
    def height(self) -> int:
        return 0 if self.pixels is None else self.pixels.shape[0]

    @property
    def width(self) -> int:
        return 0 if self.pixels is None or self.pixels.ndim < 2 else self.pixels.shape[1]

    @property
    def channels(self) -> int:
        if self.pixels is None or self.pixels.ndim < 3:
            return 0
        return self.pixels.shape[2]

    @property
    def dtype(self):
        return None if self.pixels is None else self.pixels.dtype

    def same_geometry(self, other: Image) -> bool:
        """True when both images have the same height, width and channel count."""
        return (self.height, self.width, self.channels) == (other.height, other.width, other.channels)

    # ── Bounds-checked accessors ─────────────────────────────────────
    def row(self, y: int) -> np.ndarray:
        """Return a read-only view of row *y*, shape (W, 3)."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        view = self.pixels[y]
        view.flags.writeable = False
        return view

    def pixel(self, y: int, x: int) -> tuple[int, ...]:
        """Return the channel values at (y, x) as plain ints."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside image of width {self.width}")
        return tuple(int(v) for v in self.row(y)[x])
