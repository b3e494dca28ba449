"""File writer for encoded identicons.

The only place an error can occur at runtime. ``save_image`` writes to a
temporary sibling and renames it into place, so a destination is either the
complete new file or untouched. Failures are reported in the returned
``WriteResult`` rather than raised.
"""

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a write.

    Attributes:
        path: Destination written, or ``None`` on failure.
        error: Failure reason, or ``None`` on success.
    """

    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _target_mode(destination: Path) -> int:
    """Mode of an existing destination, else the umask-derived default."""
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_image(data: bytes, path: Union[str, Path]) -> WriteResult:
    """Atomically write ``data`` to ``path``.

    Args:
        data: Encoded image bytes.
        path: Destination file. Its parent directory must exist.

    Returns:
        WriteResult: ``path`` set on success, ``error`` set on any ``OSError``.
    """
    destination = Path(path)
    tmp_name: Optional[str] = None
    try:
        mode = _target_mode(destination)
        fd, tmp_name = tempfile.mkstemp(
            dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        # mkstemp creates 0600 files
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, destination)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.warning("Failed to write %s: %s", destination, exc)
        return WriteResult(error=f"{destination}: {exc.strerror or exc}")
    logger.info("Wrote %d bytes to %s", len(data), destination)
    return WriteResult(path=destination)
