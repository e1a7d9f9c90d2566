"""Per-call sample persistence."""

import logging
from typing import List

import pandas as pd

logger = logging.getLogger(__name__)


def samples_to_dataframe(samples: List[float]) -> pd.DataFrame:
    """Convert per-call durations to a DataFrame indexed by write order."""
    return pd.DataFrame({
        "index": range(len(samples)),
        "duration_s": samples,
    })


def save_samples(path: str, samples: List[float]) -> bool:
    """
    Save per-call write durations as `<index>\\t<seconds>` lines.

    Args:
        path: Output file path
        samples: Durations in seconds, in write order

    Returns:
        True if the file was written, False if it could not be opened
    """
    df = samples_to_dataframe(samples)
    try:
        df.to_csv(
            path,
            sep="\t",
            header=False,
            index=False,
            float_format="%f",
            lineterminator="\n",
        )
    except OSError as e:
        logger.warning(f"Unable to save write timings to {path}: {e}")
        return False

    logger.info(f"Saved {len(samples)} write timings to {path}")
    return True
