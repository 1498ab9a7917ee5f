from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Union
import logging

import cv2
import numpy as np

from ..models.image import Image
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O and conversion helpers.  No filtering logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def stream_folder(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Image]:
        """
        Yield images lazily instead of returning a gigantic list.
        """
        return self.image_repository.iter_dir(folder, recursive=recursive, exts=exts)

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the image, by default to its own path.
        """
        return self.image_repository.save(image, path)

    def to_display(self, img: Image) -> Image:
        """
        Convert a signed gradient image into something a screen can show:
        absolute value, saturated to uint8.
        """
        if img.pixels.dtype == np.uint8:
            return self.create_image(img.pixels.copy(), img.path)
        return self.create_image(cv2.convertScaleAbs(img.pixels), img.path)
