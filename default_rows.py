import numpy as np

DEFAULT_COLUMN_COUNT = 10


def default_header(count: int = DEFAULT_COLUMN_COUNT) -> list[str]:
    return [f"Column {i}" for i in range(1, count + 1)]


class DefaultRowsInitializer:
    """Generates sample rows for the viewer when no file is given."""

    def __init__(self, seed=None, low: float = 100.0, high: float = 2350.0):
        self.rng = np.random.default_rng(seed)
        self.low = low
        self.high = high

    def create(self, count: int, columns: int = DEFAULT_COLUMN_COUNT) -> list[list[str]]:
        if count <= 0:
            return []
        values = self.rng.uniform(self.low, self.high, size=(count, columns))
        return [[f"{v:.2f}" for v in row] for row in values]
