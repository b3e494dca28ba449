"""Layout constants and CLI runtime settings.

The layout values are fixed: a 5×5 grid of 50px cells, each painted square
inset by a 2px gutter, on a 250×250 canvas. ``CliConfig`` resolves the
command line wrapper's settings from arguments with environment fallbacks.
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, Optional

from identicon.types import RGB

DIGEST_SIZE = 16
GRID_SIZE = 5
GRID_CELLS = GRID_SIZE * GRID_SIZE
ROW_SEED_LENGTH = 3
CELL_SIZE = 50
CELL_MARGIN = 2
SQUARE_SIZE = CELL_SIZE - 2 * CELL_MARGIN
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
BACKGROUND: RGB = (255, 255, 255)

DEFAULT_FORMAT = "PNG"
DEFAULT_HASH = "md5"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

OUTPUT_DIR_ENV = "IDENTICON_OUTPUT_DIR"
LOG_LEVEL_ENV = "IDENTICON_LOG_LEVEL"


@dataclass(frozen=True)
class CliConfig:
    """Resolved settings for one CLI invocation.

    Attributes:
        input: Text the identicon is derived from.
        output: Destination file path.
        hash_name: Key into ``HASH_FN_REGISTRY``.
        image_format: Pillow format name used for encoding.
        log_level: Name of the root logging level.
    """

    input: str
    output: Path
    hash_name: str = DEFAULT_HASH
    image_format: str = DEFAULT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


def default_output_path(
    input: str, output_dir: Optional[str], image_format: str = DEFAULT_FORMAT
) -> Path:
    """Return ``<output_dir>/<input>.<ext>``; the current directory if unset.

    Raises:
        ValueError: If ``input`` is empty or contains a path separator, since it
            cannot name a file directly; pass an explicit output path instead.
    """
    separators = [sep for sep in (os.sep, os.altsep) if sep]
    if not input or any(sep in input for sep in separators):
        raise ValueError(
            f"Cannot derive a file name from input {input!r}; pass an explicit output path"
        )
    base = Path(output_dir) if output_dir else Path(".")
    return base / f"{input}.{image_format.lower()}"


def resolve_cli_config(
    input: str,
    output: Optional[str] = None,
    output_dir: Optional[str] = None,
    hash_name: str = DEFAULT_HASH,
    image_format: str = DEFAULT_FORMAT,
    log_level: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CliConfig:
    """Merge explicit arguments with ``IDENTICON_*`` environment variables.

    Explicit arguments win over the environment, which wins over defaults.
    """
    env = os.environ if environ is None else environ
    if output is not None:
        output_path = Path(output)
    else:
        output_path = default_output_path(
            input, output_dir or env.get(OUTPUT_DIR_ENV), image_format
        )
    level = (log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {list(LOG_LEVELS)}")
    return CliConfig(
        input=input,
        output=output_path,
        hash_name=hash_name,
        image_format=image_format.upper(),
        log_level=level,
    )
