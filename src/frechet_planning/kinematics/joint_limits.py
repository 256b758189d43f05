"""Define a class representing the position limits of a robot's joints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from frechet_planning.math import RealRange

if TYPE_CHECKING:
    from collections.abc import Sequence

    from frechet_planning.kinematics.configuration import JointConfiguration


class InvalidJointLimitsError(ValueError):
    """An error raised when joint limits don't define a bounded, non-empty sampling region."""


@dataclass(frozen=True)
class JointLimits:
    """Closed position ranges (rad or m), one per joint in canonical order."""

    ranges: tuple[RealRange, ...]

    def __post_init__(self) -> None:
        """Verify that the limits define a bounded region that can be sampled."""
        if not self.ranges:
            raise InvalidJointLimitsError("Joint limits must specify at least one joint.")

        for index, joint_range in enumerate(self.ranges):
            if not joint_range.is_finite:
                raise InvalidJointLimitsError(f"Joint {index} has unbounded limits: {joint_range}")

    @classmethod
    def from_bounds(cls, lower: Sequence[float], upper: Sequence[float]) -> JointLimits:
        """Construct joint limits from sequences of lower and upper bounds.

        :raises InvalidJointLimitsError: If the bounds mismatch in length or any lower > upper
        """
        if len(lower) != len(upper):
            raise InvalidJointLimitsError(f"Got {len(lower)} lower and {len(upper)} upper bounds.")

        ranges = []
        for index, (low, high) in enumerate(zip(lower, upper)):
            try:
                ranges.append(RealRange(float(low), float(high)))
            except ValueError as error:
                raise InvalidJointLimitsError(f"Joint {index} has invalid limits.") from error

        return JointLimits(tuple(ranges))

    @property
    def dof(self) -> int:
        """Retrieve the number of joints covered by the limits."""
        return len(self.ranges)

    @property
    def lower(self) -> JointConfiguration:
        """Retrieve the lower bounds of all joints as an array."""
        return np.array([r.low for r in self.ranges])

    @property
    def upper(self) -> JointConfiguration:
        """Retrieve the upper bounds of all joints as an array."""
        return np.array([r.high for r in self.ranges])

    def sample(self, rng: np.random.Generator) -> JointConfiguration:
        """Sample a configuration uniformly from within the joint limits."""
        return np.array([r.sample(rng) for r in self.ranges])

    def contains(self, configuration: JointConfiguration) -> bool:
        """Check whether the given configuration lies within the joint limits."""
        if len(configuration) != self.dof:
            return False
        return all(r.contains(float(q)) for r, q in zip(self.ranges, configuration))

    def clamp(self, configuration: JointConfiguration) -> JointConfiguration:
        """Clamp the given configuration into the joint limits."""
        return np.clip(configuration, self.lower, self.upper)
