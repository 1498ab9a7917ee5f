"""
Times the separable production blur against the full 5x5 reference pass
on one image, and reports how far the two drift apart.
"""
import os
import sys
import time
import logging
import argparse
from typing import Callable

import numpy as np
from tqdm import trange
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.image import Image
from ..models.filter_result import FilterResult
from ..services.image_service import ImageService
from ..services.convolution_service import ConvolutionService
from .apply_filter import configure_logging

logger = logging.getLogger(__name__)

BENCH_ITERATIONS = int(os.getenv("FRAMEFX_BENCH_ITERATIONS", "10"))


def time_blur(blur: Callable[[Image], FilterResult], img: Image, iterations: int, desc: str):
    """Run *blur* on *img* repeatedly; return (seconds per image, last result)."""
    result = None
    start = time.perf_counter()
    for _ in trange(iterations, desc=desc, ncols=70):
        result = blur(img)
    elapsed = (time.perf_counter() - start) / iterations
    return elapsed, result


def max_divergence(first: Image, second: Image) -> int:
    return int(np.abs(first.pixels.astype(np.int16) - second.pixels.astype(np.int16)).max())


def main(argv=None) -> int:
    configure_logging()
    ap = argparse.ArgumentParser(prog="benchmark-blur", description=__doc__)
    ap.add_argument("input", help="image to blur")
    ap.add_argument("--iterations", type=int, default=BENCH_ITERATIONS)
    args = ap.parse_args(argv)
    if args.iterations < 1:
        ap.error("--iterations must be at least 1")

    img = ImageService().load(args.input)
    convolution_service = ConvolutionService()

    sep_time, separable = time_blur(convolution_service.blur5x5, img, args.iterations, "separable")
    ref_time, reference = time_blur(convolution_service.blur5x5_reference, img, args.iterations, "reference")
    if not (separable.ok and reference.ok):
        logger.error(f"Blur failed: {separable.status.name} / {reference.status.name}")
        return 1

    logger.info(f"separable 1x5 x2 : {sep_time:.4f} s per image")
    logger.info(f"reference 5x5    : {ref_time:.4f} s per image")
    logger.info(f"max per-channel divergence: {max_divergence(separable.image, reference.image)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
