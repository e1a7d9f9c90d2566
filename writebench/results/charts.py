"""Chart generation for write benchmark results."""

import itertools
import logging
from datetime import datetime
from typing import Optional

import matplotlib.pyplot as plt

from ..core.models import WriteResult

logger = logging.getLogger(__name__)


def generate_latency_chart(
    result: WriteResult,
    output_path: Optional[str] = None,
    show: bool = False,
) -> Optional[str]:
    """
    Generate per-call latency charts from a write benchmark result.

    Args:
        result: Result of a completed run, samples included
        output_path: Path to save the chart (auto-generated if None)
        show: Whether to display the chart

    Returns:
        Path to saved chart file, or None if it could not be saved
    """
    if not result.samples:
        logger.warning("No write timings to chart.")
        return None

    x_values = list(range(len(result.samples)))
    latency_ms = [s * 1000 for s in result.samples]

    # Bytes written against time spent inside write calls
    elapsed = list(itertools.accumulate(result.samples))
    written_mb = [(i + 1) * result.size / 1e6 for i in x_values]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(15, 6))
    fig.suptitle(
        f"Write Benchmark: {result.count} x {result.size}-byte "
        f"to {result.target} ({result.mode})",
        fontsize=14,
        fontweight="bold",
    )

    # Per-call latency chart
    ax1.plot(x_values, latency_ms, "b-", linewidth=1)
    ax1.axhline(
        result.min_write_seconds * 1000, color="g", linestyle="--", label="Minimum"
    )
    ax1.axhline(
        result.max_write_seconds * 1000, color="r", linestyle="--", label="Maximum"
    )
    ax1.set_xlabel("Write Call")
    ax1.set_ylabel("Latency (ms)")
    ax1.set_title("Write Call Latency")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # Cumulative chart
    ax2.plot(elapsed, written_mb, "purple", linewidth=2)
    ax2.set_xlabel("Time in write calls (s)")
    ax2.set_ylabel("Written (MB)")
    ax2.set_title("Cumulative Bytes Written")
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    saved_path = output_path
    if not saved_path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        saved_path = f"write_latency_{timestamp}.png"

    try:
        plt.savefig(saved_path, dpi=150, bbox_inches="tight")
    except OSError as e:
        logger.warning(f"Unable to save chart to {saved_path}: {e}")
        plt.close(fig)
        return None

    logger.info(f"Chart saved as: {saved_path}")

    if show:
        plt.show()
    plt.close(fig)

    return saved_path
