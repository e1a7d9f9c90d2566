"""Core benchmarking components."""

from .errors import BenchmarkError, InvalidArgumentError, OutOfMemoryError, WriteError
from .models import WriteConfig, WriteResult
from .targets import open_target
from .write_tester import WriteTester

__all__ = [
    "BenchmarkError",
    "InvalidArgumentError",
    "OutOfMemoryError",
    "WriteError",
    "WriteConfig",
    "WriteResult",
    "WriteTester",
    "open_target",
]
