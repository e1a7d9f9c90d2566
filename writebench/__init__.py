"""Write throughput and latency benchmarking."""

__version__ = "0.1.0"
