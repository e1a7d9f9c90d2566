"""Data models for write benchmarking."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from .errors import InvalidArgumentError

DEFAULT_SIZE = 1000000
DEFAULT_COUNT = 100


@dataclass(frozen=True)
class WriteConfig:
    """Configuration for a single write benchmark run."""

    target: str
    size: int = DEFAULT_SIZE
    count: int = DEFAULT_COUNT

    # Write mode: buffered stream (fwrite-like) or raw descriptor
    buffered: bool = False
    nosync: bool = False

    # Optional outputs
    stats_path: Optional[str] = None
    plot_path: Optional[str] = None

    @property
    def mode(self) -> str:
        """Name of the write mode."""
        return "buffered" if self.buffered else "raw"

    def validate(self) -> None:
        """Reject configurations the write loop cannot run."""
        if not self.target:
            raise InvalidArgumentError("no file path specified")
        if self.size < 0:
            raise InvalidArgumentError(f"invalid buffer size: {self.size}")
        if self.count < 1:
            raise InvalidArgumentError(f"invalid buffer count: {self.count}")


@dataclass
class WriteResult:
    """Results from a completed write benchmark run."""

    target: str
    mode: str  # "raw" or "buffered"
    size: int
    count: int

    # Timing (seconds)
    total_seconds: float
    sync_seconds: float
    min_write_seconds: float
    max_write_seconds: float

    # False when the sync step was skipped
    synced: bool = True

    start_timestamp: Optional[datetime] = None
    end_timestamp: Optional[datetime] = None

    # Per-call durations, indexed by write order
    samples: List[float] = field(default_factory=list, repr=False)

    @property
    def total_bytes(self) -> int:
        return self.size * self.count

    @property
    def throughput_mb_per_second(self) -> float:
        """Decimal megabytes per second over the whole run, sync included."""
        if self.total_seconds <= 0:
            return 0.0
        return self.total_bytes / 1e6 / self.total_seconds

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "target": self.target,
            "mode": self.mode,
            "size": self.size,
            "count": self.count,
            "total_bytes": self.total_bytes,
            "total_seconds": self.total_seconds,
            "sync_seconds": self.sync_seconds,
            "synced": self.synced,
            "min_write_seconds": self.min_write_seconds,
            "max_write_seconds": self.max_write_seconds,
            "throughput_mb_per_second": self.throughput_mb_per_second,
            "start_timestamp": (
                self.start_timestamp.isoformat() if self.start_timestamp else None
            ),
            "end_timestamp": (
                self.end_timestamp.isoformat() if self.end_timestamp else None
            ),
        }
