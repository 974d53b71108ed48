import argparse
import os
import sys
from typing import List, Optional

from loguru import logger

from letterbox import __version__, config
from letterbox.aspect import parse_aspect
from letterbox.discovery import list_images
from letterbox.errors import LetterboxError
from letterbox.logger import setup_logging
from letterbox.pipeline.dispatcher import Dispatcher
from letterbox.pipeline.request import RunOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="letterbox",
        description="Pad images to a fixed aspect ratio with solid bars and save them as JPEG.",
    )
    parser.add_argument("paths", nargs="*", help="Images to convert (default: *.jpg/*.jpeg in the current directory)")
    parser.add_argument("--output", default=config.DEFAULT_OUTPUT_DIR, help="Image output directory")
    parser.add_argument("--white", action="store_true", help="Output a white letterbox")
    parser.add_argument("--aspect", default=config.DEFAULT_ASPECT, help="Output aspect ratio")
    parser.add_argument("--concurrency", type=int, default=config.default_concurrency(),
                        help="Concurrency of image processing")
    parser.add_argument("--force", action="store_true", help="Force image reprocess when already exists")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        os.makedirs(args.output, mode=0o755, exist_ok=True)
    except OSError as e:
        logger.error(f"error creating output directory: {e}")
        return 1

    try:
        ratio = parse_aspect(args.aspect)
    except LetterboxError as e:
        logger.error(f"error parsing aspect ratio: {e}")
        return 1

    images = args.paths
    if not images:
        try:
            images = list_images(".")
        except LetterboxError as e:
            logger.error(f"error listing images: {e}")
            return 1

    options = RunOptions(output_dir=args.output, white=args.white, ratio=ratio, force=args.force)
    try:
        Dispatcher(args.concurrency).run(images, options)
    except LetterboxError as e:
        logger.error(str(e))
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
