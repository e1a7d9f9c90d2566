"""Result persistence and charts."""

from .charts import generate_latency_chart
from .samples import save_samples, samples_to_dataframe

__all__ = ["generate_latency_chart", "save_samples", "samples_to_dataframe"]
