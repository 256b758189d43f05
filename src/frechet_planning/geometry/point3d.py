"""Define a class to represent end-effector positions in 3D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class Point3D:
    """A position (meters) along the x, y, and z axes of some reference frame."""

    x: float
    y: float
    z: float

    @classmethod
    def identity(cls) -> Point3D:
        """Construct the position of a frame's origin."""
        return Point3D(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Point3D:
        """Construct a Point3D from any array-like of three coordinates."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"A 3D position needs exactly three coordinates, got shape {arr.shape}")
        x, y, z = (float(v) for v in arr)
        return Point3D(x, y, z)

    def to_array(self) -> NDArray[np.float64]:
        """Convert the position into a new length-3 NumPy array."""
        return np.array(self.to_tuple())

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert the position into an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def approx_equal(self, other: Point3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Check whether another position matches this one within the given tolerances."""
        return bool(np.allclose(self.to_tuple(), other.to_tuple(), rtol=rtol, atol=atol))
