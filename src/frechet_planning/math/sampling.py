"""Define a closed real interval from which joint positions can be drawn."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class RealRange:
    """Closed bounds [low, high] on a single real-valued coordinate."""

    low: float
    high: float

    def __post_init__(self) -> None:
        """Reject bounds that are out of order (NaN bounds are left to `is_finite`)."""
        if self.high < self.low:
            raise ValueError(f"RealRange bounds are out of order: low={self.low}, high={self.high}")

    @property
    def width(self) -> float:
        """Retrieve the distance between the range's bounds."""
        return self.high - self.low

    @property
    def is_finite(self) -> bool:
        """Check whether both bounds are finite real numbers (not infinite or NaN)."""
        return bool(np.isfinite(self.low) and np.isfinite(self.high))

    def contains(self, x: float) -> bool:
        """Check whether a value lies within the range, bounds included."""
        return self.low <= x <= self.high

    def clamp(self, x: float) -> float:
        """Return the value in the range closest to x."""
        return min(max(float(x), self.low), self.high)

    def sample(self, rng: np.random.Generator) -> float:
        """Draw a value uniformly from the range using the given generator."""
        if self.width == 0.0:
            return self.low
        return float(rng.uniform(self.low, self.high))
