import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

_PREFIX = "cliptext-"


class TransferFile:
    """Temporary file used to move clipboard bytes to and from an external utility."""

    def __init__(self, path: Path):
        self.path = path

    def write_bytes(self, payload: bytes) -> None:
        self.path.write_bytes(payload)

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""

    def __str__(self) -> str:
        return str(self.path)


@contextmanager
def transfer_file(base_dir: Optional[Path] = None) -> Iterator[TransferFile]:
    """
    Create an empty transfer file and delete it when the block exits,
    whether it completed or raised.
    """
    if base_dir is not None:
        base_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(
        prefix=_PREFIX, suffix=".txt", dir=str(base_dir) if base_dir else None)
    os.close(fd)
    path = Path(name)
    logger.debug(f"Created transfer file {path}")
    try:
        yield TransferFile(path)
    finally:
        try:
            path.unlink()
            logger.debug(f"Removed transfer file {path}")
        except FileNotFoundError:
            pass
