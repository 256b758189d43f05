"""Define classes to represent reference paths and the joint trajectories planned to follow them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

from frechet_planning.spatial import Pose3D

if TYPE_CHECKING:
    from frechet_planning.kinematics import JointConfiguration

CartesianPath = Sequence[Pose3D]
"""An ordered sequence of end-effector poses to be followed."""


@dataclass(frozen=True, eq=False)
class TrajectoryPoint:
    """A planned configuration at a specified time in a trajectory."""

    time_s: float
    """Time (seconds) since the trajectory started."""

    positions: JointConfiguration

    def __post_init__(self) -> None:
        """Store a read-only copy of the point's joint positions."""
        positions = np.array(self.positions, dtype=np.float64)
        positions.setflags(write=False)
        object.__setattr__(self, "positions", positions)


@dataclass(frozen=True)
class Trajectory:
    """A sequence of planned configurations at non-decreasing times.

    An empty trajectory signals that planning found no solution.
    """

    joint_names: tuple[str, ...]
    points: tuple[TrajectoryPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Verify that every point fits the joint names and that time never runs backward."""
        object.__setattr__(self, "points", tuple(self.points))

        for p in self.points:
            if p.positions.shape != (len(self.joint_names),):
                raise ValueError(
                    f"Trajectory point has {p.positions.shape} positions for joints {self.joint_names}.",
                )

        times = [p.time_s for p in self.points]
        if any(t1 < t0 for t0, t1 in zip(times, times[1:])):
            raise ValueError(f"Trajectory times must be non-decreasing, got {times}.")

    def __len__(self) -> int:
        """Return the number of points in the trajectory."""
        return len(self.points)

    @classmethod
    def empty(cls, joint_names: Sequence[str]) -> Trajectory:
        """Construct an empty trajectory, signalling that no solution was found."""
        return Trajectory(tuple(joint_names))

    @classmethod
    def from_configurations(
        cls,
        joint_names: Sequence[str],
        configurations: Sequence[JointConfiguration],
        time_step_s: float = 1.0,
    ) -> Trajectory:
        """Construct a trajectory visiting the given configurations at uniform time steps.

        :param joint_names: Names of the joints, in the order used by each configuration
        :param configurations: Sequence of configurations to be visited in order
        :param time_step_s: Duration (seconds) between consecutive configurations
        :return: Constructed Trajectory starting at time zero
        """
        if time_step_s <= 0.0:
            raise ValueError(f"Trajectory time step must be positive, got {time_step_s}.")

        points = tuple(TrajectoryPoint(i * time_step_s, q) for i, q in enumerate(configurations))
        return Trajectory(tuple(joint_names), points)

    @property
    def is_empty(self) -> bool:
        """Check whether the trajectory contains no points."""
        return not self.points

    @property
    def start_time_s(self) -> float:
        """Retrieve the time (seconds) of the trajectory's first point."""
        if self.is_empty:
            raise ValueError("An empty trajectory has no start time.")
        return self.points[0].time_s

    @property
    def end_time_s(self) -> float:
        """Retrieve the time (seconds) of the trajectory's last point."""
        if self.is_empty:
            raise ValueError("An empty trajectory has no end time.")
        return self.points[-1].time_s

    def configurations(self) -> list[JointConfiguration]:
        """Retrieve copies of the configurations of all trajectory points, in order."""
        return [p.positions.copy() for p in self.points]

    def evaluate(self, time_s: float) -> JointConfiguration:
        """Evaluate the trajectory's configuration at the given time.

        Joint positions are linearly interpolated between points; times outside the trajectory's
            span are clamped to its first or last point.

        :param time_s: Time (seconds) at which the trajectory is evaluated
        :return: Interpolated joint configuration
        """
        if self.is_empty:
            raise ValueError("Cannot evaluate an empty trajectory.")

        if time_s <= self.start_time_s:
            return self.points[0].positions.copy()
        if time_s >= self.end_time_s:
            return self.points[-1].positions.copy()

        times = np.array([p.time_s for p in self.points])
        positions = np.stack([p.positions for p in self.points])
        return np.array([np.interp(time_s, times, positions[:, j]) for j in range(positions.shape[1])])

    def start_configuration(self) -> JointConfiguration:
        """Evaluate the trajectory's configuration at its start time."""
        return self.evaluate(self.start_time_s)
