from __future__ import annotations
from dataclasses import dataclass, field
from math import gcd
from functools import reduce
from typing import Sequence, Tuple
import numpy as np


@dataclass(frozen=True)
class Kernel:
    """
    Immutable integer convolution kernel.

    ``weights`` is a tuple of rows; a 1-D kernel is a single row.  The
    divisor defaults to the weight sum (1 when the weights cancel out).
    Separability is worked out once here, never per call: ``row`` and
    ``column`` hold the two 1-D factors whose outer product reproduces the
    weights and whose divisors multiply to this kernel's divisor.
    """
    name: str
    weights: Tuple[Tuple[int, ...], ...]
    divisor: int = 0
    row: Kernel | None = field(default=None, compare=False, repr=False)
    column: Kernel | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        rows = len(self.weights)
        cols = len(self.weights[0]) if rows else 0
        if rows == 0 or cols % 2 == 0 or any(len(r) != cols for r in self.weights):
            raise ValueError(f"Kernel {self.name!r} needs an odd, rectangular footprint")
        if rows != 1 and rows != cols:
            raise ValueError(f"Kernel {self.name!r} must be 1xN or NxN, got {rows}x{cols}")

        if self.divisor == 0:
            total = sum(sum(r) for r in self.weights)
            object.__setattr__(self, "divisor", total if total != 0 else 1)

        if rows == 1:
            object.__setattr__(self, "row", self)
            object.__setattr__(self, "column", self)
        else:
            factors = _factorise(self)
            if factors is not None:
                object.__setattr__(self, "column", factors[0])
                object.__setattr__(self, "row", factors[1])

    @classmethod
    def of(cls, name: str, weights: Sequence[Sequence[int]] | Sequence[int], divisor: int = 0) -> Kernel:
        """Build a kernel from nested lists (or a flat list for a 1-D kernel)."""
        if weights and not isinstance(weights[0], (list, tuple)):
            weights = [weights]
        return cls(name, tuple(tuple(int(w) for w in r) for r in weights), divisor)

    @property
    def size(self) -> int:
        return len(self.weights[0])

    @property
    def radius(self) -> int:
        return self.size // 2

    @property
    def is_1d(self) -> bool:
        return len(self.weights) == 1

    @property
    def is_separable(self) -> bool:
        return self.row is not None

    @property
    def taps(self) -> Tuple[int, ...]:
        """Weights of a 1-D kernel."""
        if not self.is_1d:
            raise ValueError(f"Kernel {self.name!r} is not 1-D")
        return self.weights[0]

    def as_array(self) -> np.ndarray:
        """2-D int32 array of weights; a 1-D kernel becomes its outer product with itself."""
        arr = np.array(self.weights, dtype=np.int32)
        if self.is_1d:
            return np.outer(arr[0], arr[0])
        return arr

    def effective_divisor(self) -> int:
        """Divisor of the 2-D kernel this one stands for."""
        return self.divisor * self.divisor if self.is_1d else self.divisor


def _factorise(kernel: Kernel) -> Tuple[Kernel, Kernel] | None:
    """Split a square kernel into (column, row) integer factors, or None."""
    arr = np.array(kernel.weights, dtype=np.int64)
    nonzero_rows = [i for i in range(arr.shape[0]) if arr[i].any()]
    if not nonzero_rows:
        return None

    base = arr[nonzero_rows[0]]
    common = reduce(gcd, (abs(int(v)) for v in base))
    row_taps = base // common
    pivot = int(np.flatnonzero(row_taps)[0])

    if np.any(arr[:, pivot] % row_taps[pivot]):
        return None
    col_taps = arr[:, pivot] // row_taps[pivot]
    if not np.array_equal(np.outer(col_taps, row_taps), arr):
        return None

    if kernel.divisor == 1:
        row_div = col_div = 1
    else:
        row_div, col_div = int(row_taps.sum()), int(col_taps.sum())
        if row_div * col_div != kernel.divisor:
            return None

    column = Kernel(f"{kernel.name}.column", (tuple(int(v) for v in col_taps),), col_div)
    row = Kernel(f"{kernel.name}.row", (tuple(int(v) for v in row_taps),), row_div)
    return column, row


# ─── Catalogue ────────────────────────────────────────────────────────
PYRAMID_5X5 = Kernel.of("pyramid5x5", [
    [1, 2, 4, 2, 1],
    [2, 4, 8, 4, 2],
    [4, 8, 16, 8, 4],
    [2, 4, 8, 4, 2],
    [1, 2, 4, 2, 1],
], divisor=100)

BINOMIAL_1X5 = Kernel.of("binomial1x5", [1, 2, 4, 2, 1], divisor=10)

BINOMIAL_3X3 = Kernel.of("binomial3x3", [
    [1, 2, 1],
    [2, 4, 2],
    [1, 2, 1],
], divisor=16)

SOBEL_X_3X3 = Kernel.of("sobelX3x3", [
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], divisor=1)

SOBEL_Y_3X3 = Kernel.of("sobelY3x3", [
    [-1, -2, -1],
    [0, 0, 0],
    [1, 2, 1],
], divisor=1)
