"""Define a dataclass holding the tuning parameters passed to a path-following search."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PathFollowingParams:
    """Tuning parameters for a search following a reference path of end-effector poses."""

    num_waypoints: int = 5
    """Number of reference-path poses treated as hard waypoints."""

    ik_multiplier: int = 10
    """Number of IK candidates requested per waypoint query."""

    num_nearest_neighbors: int = 10
    """Bound on the neighbor fan-out considered by the search."""

    discretization: int = 3
    """Number of interpolated configurations checked between consecutive waypoints."""

    def __post_init__(self) -> None:
        """Verify that every parameter is a positive integer."""
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"PathFollowingParams.{name} must be a positive integer, got {value!r}")
