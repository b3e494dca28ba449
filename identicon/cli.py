"""Command line entry point.

``identicon alice`` writes ``alice.png`` to the current directory (or to
``$IDENTICON_OUTPUT_DIR``). Pass ``-`` to read the input from stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from PIL import Image as PILImageModule

from identicon.config import (
    DEFAULT_FORMAT,
    DEFAULT_HASH,
    LOG_LEVELS,
    CliConfig,
    resolve_cli_config,
)
from identicon.hashing import HASH_FN_REGISTRY, get_hash_fn
from identicon.pipeline import identicon_bytes
from identicon.writer import save_image

logger = logging.getLogger(__name__)


def writable_formats() -> List[str]:
    """Return the image formats the installed Pillow can encode."""
    PILImageModule.init()
    return sorted(PILImageModule.SAVE)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon", description="Generate an identicon PNG from a string."
    )
    parser.add_argument("input", help="Text to derive the identicon from ('-' for stdin)")
    parser.add_argument("-o", "--output", help="Destination file path")
    parser.add_argument("--output-dir", help="Directory for the default <input>.png name")
    parser.add_argument(
        "--hash", dest="hash_name", default=DEFAULT_HASH, choices=sorted(HASH_FN_REGISTRY)
    )
    parser.add_argument(
        "--format",
        dest="image_format",
        default=DEFAULT_FORMAT,
        type=str.upper,
        choices=writable_formats(),
        metavar="FORMAT",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(config: CliConfig) -> int:
    """Generate, encode and write one identicon; return the exit status."""
    data = identicon_bytes(
        config.input, format=config.image_format, hash_fn=get_hash_fn(config.hash_name)
    )
    result = save_image(data, config.output)
    if not result.ok:
        print(f"identicon: {result.error}", file=sys.stderr)
        return 1
    print(result.path)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    text = sys.stdin.readline().rstrip("\n") if args.input == "-" else args.input
    try:
        config = resolve_cli_config(
            text,
            output=args.output,
            output_dir=args.output_dir,
            hash_name=args.hash_name,
            image_format=args.image_format,
            log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(config.log_level)
    logger.debug("Resolved config: %s", config)
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
