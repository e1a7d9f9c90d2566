"""Write targets: raw descriptor and buffered stream handles."""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Union

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class RawTarget:
    """Target written through an OS file descriptor with os.write()."""

    mode = "raw"

    def __init__(self, path: str):
        self.path = path
        # No O_TRUNC: block devices and existing files are overwritten in place
        self.fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o600)

    def write(self, buf) -> int:
        return os.write(self.fd, buf)

    def sync(self) -> None:
        """Force written data to durable storage."""
        _fsync(self.fd, self.path)

    def close(self) -> None:
        os.close(self.fd)


class BufferedTarget:
    """Target written through Python's buffered file object."""

    mode = "buffered"

    def __init__(self, path: str):
        self.path = path
        self.stream = open(path, "wb")

    def write(self, buf) -> int:
        return self.stream.write(buf)

    def sync(self) -> None:
        """Flush user-space buffering, then the kernel cache."""
        logger.debug(f"Flushing {self.path}")
        try:
            self.stream.flush()
        except OSError as e:
            logger.warning(f"Flush failed on {self.path}: {e}")
        _fsync(self.stream.fileno(), self.path)

    def close(self) -> None:
        self.stream.close()


Target = Union[RawTarget, BufferedTarget]


def _fsync(fd: int, path: str) -> None:
    try:
        os.fsync(fd)
    except OSError as e:
        # Character devices such as /dev/null reject fsync
        logger.warning(f"fsync not supported on {path}: {e}")


@contextmanager
def open_target(path: str, buffered: bool = False) -> Generator[Target, None, None]:
    """
    Context manager for a write target.

    Ensures the handle is closed even if the write loop fails.

    Usage:
        with open_target("/dev/sdb") as target:
            target.write(buf)

    Raises:
        InvalidArgumentError: If the target cannot be opened for writing
    """
    try:
        target = BufferedTarget(path) if buffered else RawTarget(path)
    except OSError as e:
        raise InvalidArgumentError(f"Unable to open {path}") from e

    try:
        yield target
    finally:
        try:
            target.close()
        except OSError as e:
            # The descriptor is released even when the final flush fails
            logger.warning(f"Close failed on {path}: {e}")
