from __future__ import annotations
from pathlib import Path
from typing import Union, Iterable, List, Iterator
import logging
import os

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".jpg,.jpeg,.png,.bmp")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def empty_like(img: Image, dtype=np.uint8) -> Image:
        """Zero-filled image with the geometry of *img*."""
        return Image(pixels=np.zeros((img.height, img.width, Image.CHANNELS), dtype=dtype))

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")
        logger.debug(f"Loaded {path} ({arr_bgr.shape[1]}x{arr_bgr.shape[0]})")
        return Image(pixels=arr_bgr, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path] = None) -> Path:
        path = Path(path or image.path)
        if image.is_empty:
            raise ValueError(f"Refusing to save an empty image to {path}")
        pixels = image.pixels
        if pixels.dtype != np.uint8:
            pixels = cv2.convertScaleAbs(pixels)
        PILImage.fromarray(np.ascontiguousarray(pixels[:, :, ::-1])).save(path)
        logger.debug(f"Saved {path}")
        return path

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Image]:
        """
        Yield Image objects one at a time.  Nothing accumulates in memory.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if p.suffix.lower() not in allowed or not p.is_file():
                logger.debug(f"Skipping {p}")
                continue
            try:
                yield self.load(p)
            except FileNotFoundError as err:
                logger.warning(f"Skipping {p.name}: {err}")

    def load_dir(
        self, folder: Union[str, Path], *, recursive=False, exts=None
    ) -> List[Image]:
        return list(self.iter_dir(folder, recursive=recursive, exts=exts))
