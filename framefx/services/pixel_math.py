import numpy as np


def saturate_u8(values: np.ndarray) -> np.ndarray:
    """Round to nearest and clamp into [0, 255]."""
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)
