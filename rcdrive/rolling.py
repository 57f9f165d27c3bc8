"""Fixed-size moving average."""

from __future__ import annotations

from collections import deque


class RollingAverage:
    """Mean of the last ``size`` values pushed."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._values: deque[float] = deque(maxlen=size)

    def __len__(self) -> int:
        return len(self._values)

    def push(self, value: float) -> None:
        self._values.append(float(value))

    def average(self) -> float:
        """Return the mean of the stored values, or 0.0 when empty."""
        if not self._values:
            return 0.0
        return sum(self._values) / len(self._values)