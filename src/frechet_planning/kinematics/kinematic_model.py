"""Define an interface to the shared kinematic model of a robot arm."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:
    from frechet_planning.kinematics.configuration import JointConfiguration
    from frechet_planning.kinematics.joint_limits import JointLimits
    from frechet_planning.spatial import Pose3D


class KinematicModel(Protocol):
    """A mutable kinematic model of an arm, holding its current joint configuration."""

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the arm's joints in their canonical order."""
        ...

    @property
    def joint_limits(self) -> JointLimits:
        """Retrieve the position limits of the arm's joints."""
        ...

    def get_configuration(self) -> JointConfiguration:
        """Retrieve a copy of the model's current joint configuration."""
        ...

    def set_configuration(self, configuration: JointConfiguration) -> None:
        """Set the model's current joint configuration."""
        ...

    def get_ee_pose(self) -> Pose3D:
        """Compute the end-effector pose at the model's current configuration."""
        ...

    def solve_ik(self, target: Pose3D) -> bool:
        """Solve inverse kinematics for the target, seeded by the current configuration.

        :return: True if a solution was found (the model is left at it), else False
        """
        ...


@contextmanager
def preserved_configuration(model: KinematicModel) -> Iterator[KinematicModel]:
    """Borrow the model, restoring its configuration on exit (including when errors are raised)."""
    saved = model.get_configuration().copy()
    try:
        yield model
    finally:
        model.set_configuration(saved)
