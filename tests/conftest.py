import matplotlib

matplotlib.use("Agg")

import pytest


class FakeClock:
    """Returns preset nanosecond timestamps, one per call."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def target(tmp_path):
    return str(tmp_path / "target.bin")
