"""Define a function to move an arm to the start of a planned trajectory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frechet_planning.motion_planning.motion_planning_query import MotionPlanningQuery

if TYPE_CHECKING:
    from frechet_planning.kinematics import CollisionConstraint
    from frechet_planning.motion_planning.trajectories import Trajectory
    from frechet_planning.robots import Manipulator

logger = logging.getLogger(__name__)


def move_to_start(
    trajectory: Trajectory,
    manipulator: Manipulator,
    collision_free: CollisionConstraint | None = None,
    timeout_s: float = 15.0,
) -> bool:
    """Move the manipulator to the configuration at which the trajectory starts.

    Executing a path-following trajectory from any other configuration is unsafe, so callers
        must check the result before executing the trajectory itself.

    :param trajectory: Planned trajectory whose start configuration is the motion's target
    :param manipulator: Manipulator used to plan and execute the point-to-point motion
    :param collision_free: Optional collision constraint for the point-to-point motion
    :param timeout_s: Duration (seconds) given to the manipulator to plan and execute the motion
    :return: True if a motion was found and executed, else False (including for empty trajectories)
    """
    if trajectory.is_empty:
        logger.warning("Cannot move to the start of an empty trajectory.")
        return False

    query = MotionPlanningQuery(trajectory.start_configuration(), collision_free, timeout_s)
    success = manipulator.move_to_configuration(query)

    outcome_desc = "reached" if success else "failed to reach"
    logger.info(f"Manipulator '{manipulator.name}' {outcome_desc} the trajectory start.")
    return success
