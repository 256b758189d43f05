"""Define a dataclass to represent point-to-point motion planning queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from frechet_planning.kinematics import CollisionConstraint, JointConfiguration


@dataclass(frozen=True, eq=False)
class MotionPlanningQuery:
    """A query to move an arm from its current configuration to a target configuration."""

    target: JointConfiguration = field(repr=False)

    collision_free: CollisionConstraint | None = None
    """Optional constraint that every configuration along the motion must satisfy."""

    timeout_s: float = 15.0
    """Duration (seconds) after which planning and execution should be abandoned."""

    def __post_init__(self) -> None:
        """Store a read-only copy of the target configuration and check the timeout."""
        target = np.array(self.target, dtype=np.float64)
        target.setflags(write=False)
        object.__setattr__(self, "target", target)

        if self.timeout_s <= 0.0:
            raise ValueError(f"Motion planning timeout must be positive, got {self.timeout_s}.")
