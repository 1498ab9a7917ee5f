import os
import sys
import logging
import argparse
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.image import Image
from ..models.frame_settings import FilterMode, FrameSettings
from ..pipeline.frame_pipeline import process_frame
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="apply-filter",
        description="Apply one frame filter to image files and write the results.",
    )
    ap.add_argument("input", help="image, or folder of images, to read")
    ap.add_argument("output", help="output image, or output folder when INPUT is a folder")
    ap.add_argument("--mode", choices=[m.value for m in FilterMode], default=FilterMode.NONE.value)
    ap.add_argument("--brightness", type=float, default=1.0, help="multiplier applied last (default 1.0)")
    ap.add_argument("--levels", type=int, default=None, help="buckets for blur-quantize")
    return ap


def filter_frame(image_service: ImageService, frame: Image, dst: Path, settings: FrameSettings) -> bool:
    logger.info(f"Filtering {frame.path}: {frame.width}x{frame.height}")

    result = process_frame(frame, settings)
    if not result.ok:
        logger.error(f"{settings.mode.value} failed on {frame.path} with status {result.code}: {result.message}")
        return False

    saved = image_service.save(result.image, dst)
    logger.info(f"Saved {settings.mode.value} result to {saved}")
    return True


def main(argv=None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    image_service = ImageService()
    settings = FrameSettings(mode=FilterMode(args.mode),
                             brightness=args.brightness,
                             quantize_levels=args.levels)
    src, dst = Path(args.input), Path(args.output)

    if not src.is_dir():
        try:
            frame = image_service.load(src)
        except FileNotFoundError as err:
            logger.error(f"Cannot read {src}: {err}")
            return 1
        return 0 if filter_frame(image_service, frame, dst, settings) else 1

    # Folder in, folder out: same file names, one frame at a time
    dst.mkdir(parents=True, exist_ok=True)
    failures = 0
    for frame in image_service.stream_folder(src):
        if not filter_frame(image_service, frame, dst / frame.path.name, settings):
            failures += 1
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
