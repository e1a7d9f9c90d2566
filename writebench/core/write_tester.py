"""Core write benchmarking functionality."""

import logging
import time
from datetime import datetime
from typing import Callable, Optional

from .errors import OutOfMemoryError, WriteError
from .models import WriteConfig, WriteResult
from .targets import open_target

# Larger than any realistic single write
MIN_WRITE_SENTINEL = 9999.0


def elapsed_seconds(start_ns: int, stop_ns: int) -> float:
    """Convert a pair of nanosecond timestamps to fractional seconds."""
    return (stop_ns - start_ns) / 1e9


class WriteTester:
    """
    Write benchmark for a single target.

    Writes a fixed-size buffer `count` times, timing every write call and
    the final flush/sync step separately.

    Supports two write modes:
    - Raw: os.write() on a file descriptor
    - Buffered: write() on a buffered file object, flushed before sync
    """

    def __init__(
        self, config: WriteConfig, clock: Callable[[], int] = time.perf_counter_ns
    ):
        self.config = config
        self.clock = clock
        self.start_time: Optional[datetime] = None

        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger(__name__)

    def run(self) -> WriteResult:
        """
        Run the benchmark.

        Raises:
            InvalidArgumentError: If the config is invalid or the target cannot be opened
            OutOfMemoryError: If the buffer or sample list cannot be allocated
            WriteError: If any write call fails or is short
        """
        config = self.config
        config.validate()

        print(f"writting {config.count} x {config.size}-byte to {config.target}...")
        self.logger.info(
            f"Starting {config.mode} write test on {config.target} "
            f"(sync {'disabled' if config.nosync else 'enabled'})"
        )

        self.start_time = datetime.now()
        with open_target(config.target, buffered=config.buffered) as target:
            try:
                buf = bytearray(config.size)
                samples = [0.0] * config.count
            except (MemoryError, OverflowError) as e:
                raise OutOfMemoryError(
                    f"Unable to alloc {config.size}-byte buffer for {config.count} writes"
                ) from e

            min_write = MIN_WRITE_SENTINEL
            max_write = 0.0

            start_ns = self.clock()
            for i in range(config.count):
                start_w_ns = self.clock()
                try:
                    written = target.write(buf)
                except OSError as e:
                    raise WriteError(f"write error: {e}") from e
                stop_w_ns = self.clock()

                if written != config.size:
                    raise WriteError(
                        f"write error: short write ({written}/{config.size} bytes)"
                    )

                duration = elapsed_seconds(start_w_ns, stop_w_ns)
                samples[i] = duration
                min_write = min(min_write, duration)
                max_write = max(max_write, duration)

            sync_seconds = 0.0
            if not config.nosync:
                start_s_ns = self.clock()
                target.sync()
                stop_s_ns = self.clock()
                sync_seconds = elapsed_seconds(start_s_ns, stop_s_ns)

            stop_ns = self.clock()

        self.logger.info(
            f"Completed {config.count} writes: "
            f"min {min_write * 1000:.3f}ms, max {max_write * 1000:.3f}ms"
        )

        return WriteResult(
            target=config.target,
            mode=config.mode,
            size=config.size,
            count=config.count,
            total_seconds=elapsed_seconds(start_ns, stop_ns),
            sync_seconds=sync_seconds,
            min_write_seconds=min_write,
            max_write_seconds=max_write,
            synced=not config.nosync,
            start_timestamp=self.start_time,
            end_timestamp=datetime.now(),
            samples=samples,
        )

    def print_results(self, result: WriteResult):
        """Print the aggregate report."""
        print(f"written: {result.total_bytes} bytes")
        print(f"duration: {result.total_seconds:f} seconds")
        print(f"sync-duration: {result.sync_seconds:f} seconds")
        print(f"bitrate: {result.throughput_mb_per_second:f} MB/s")
