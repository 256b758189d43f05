"""Define the interface to a physical arm that executes planned motions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frechet_planning.kinematics import JointConfiguration
    from frechet_planning.motion_planning import MotionPlanningQuery, Trajectory


class Manipulator(ABC):
    """An interface for a robot manipulator able to plan and execute its own motions."""

    def __init__(self, name: str) -> None:
        """Initialize the manipulator with its name."""
        self.name = name

    @property
    @abstractmethod
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the joint names, ordered as in the configurations the arm accepts."""
        ...

    @property
    @abstractmethod
    def configuration(self) -> JointConfiguration:
        """Retrieve the joint configuration the arm currently occupies."""
        ...

    @abstractmethod
    def move_to_configuration(self, query: MotionPlanningQuery) -> bool:
        """Plan and execute a collision-aware motion to the query's target configuration.

        :return: True if a motion was found and executed, else False
        """
        ...

    @abstractmethod
    def execute_trajectory(self, trajectory: Trajectory) -> bool:
        """Follow the given trajectory from its first point to its last.

        :return: True if the arm reached the end of the trajectory, else False
        """
        ...
