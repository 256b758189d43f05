"""Define a planner that finds arm trajectories following a reference path of end-effector poses."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

import numpy as np

from frechet_planning.kinematics import preserved_configuration
from frechet_planning.motion_planning import Trajectory
from frechet_planning.planning.candidate_state import CandidateState
from frechet_planning.planning.fk_evaluator import StateGuardedFKEvaluator
from frechet_planning.planning.ik_sampler import SeededIKSampler
from frechet_planning.planning.params import PathFollowingParams
from frechet_planning.planning.search import PathSearchProblem
from frechet_planning.spatial import DistanceWeights, se3_distance

if TYPE_CHECKING:
    from frechet_planning.kinematics import CollisionConstraint, JointConfiguration, KinematicModel
    from frechet_planning.motion_planning import CartesianPath
    from frechet_planning.planning.search import PathSearchEngine
    from frechet_planning.spatial import Pose3D

logger = logging.getLogger(__name__)


class PlanningCallbackError(RuntimeError):
    """An error raised when an IK or FK callback fails during a path-following search."""


class PathFollowingPlanner:
    """Plans joint-space trajectories whose end-effector path follows a reference path.

    The planner supplies a search engine with a pose-distance metric, an IK sampler, and an FK
        evaluator, all sharing one kinematic model that is restored after every callback.
    """

    def __init__(
        self,
        model: KinematicModel,
        search_engine: PathSearchEngine,
        rng: np.random.Generator | None = None,
        max_ik_retries: int = 3,
        collision_free: CollisionConstraint | None = None,
    ) -> None:
        """Initialize the planner for a kinematic model and search engine.

        :param model: Shared kinematic model of the arm
        :param search_engine: Search engine exploring the arm's configuration space
        :param rng: Random number generator used to seed IK (defaults to an unseeded generator)
        :param max_ik_retries: Maximum number of seeds attempted per requested IK solution
        :param collision_free: Optional constraint rejecting configurations in collision
        """
        self._model = model
        self._search_engine = search_engine
        self._ik_sampler = SeededIKSampler(model, rng, max_ik_retries)
        self._fk_evaluator = StateGuardedFKEvaluator(model)
        self._collision_free = collision_free

    def is_feasible(self, configuration: JointConfiguration) -> bool:
        """Check whether a configuration respects the joint limits and collision constraint."""
        if not self._model.joint_limits.contains(configuration):
            return False
        return self._collision_free is None or self._collision_free(configuration)

    def _solve_ik(self, target: Pose3D, count: int) -> list[CandidateState]:
        """Sample IK solutions, converting any failure into a PlanningCallbackError."""
        try:
            return self._ik_sampler.sample_solutions(target, count)
        except Exception as error:
            raise PlanningCallbackError(f"IK sampling failed for target {target}.") from error

    def _evaluate_fk(self, state: CandidateState) -> Pose3D:
        """Evaluate FK, converting any failure into a PlanningCallbackError."""
        try:
            return self._fk_evaluator.evaluate(state)
        except Exception as error:
            raise PlanningCallbackError(f"FK evaluation failed for state {state}.") from error

    def plan(
        self,
        reference_path: CartesianPath,
        weights: DistanceWeights | None = None,
        params: PathFollowingParams | None = None,
    ) -> Trajectory:
        """Plan a trajectory whose end-effector poses follow the reference path.

        :param reference_path: Non-empty, ordered sequence of target end-effector poses
        :param weights: Weights for the pose-distance metric (defaults to all ones)
        :param params: Search parameters, passed to the search engine unchanged
        :return: Planned trajectory, or an empty trajectory if the search found no solution
        :raises ValueError: If the reference path is empty
        :raises PlanningCallbackError: If an IK or FK callback raised during the search
        """
        if not reference_path:
            raise ValueError("Cannot plan to follow an empty reference path.")

        weights = DistanceWeights() if weights is None else weights
        params = PathFollowingParams() if params is None else params
        joint_names = self._model.joint_names

        with preserved_configuration(self._model) as model:
            problem = PathSearchProblem(
                reference_path=tuple(reference_path),
                distance_fn=partial(se3_distance, weights=weights),
                ik_fn=self._solve_ik,
                fk_fn=self._evaluate_fk,
                is_feasible=self.is_feasible,
                params=params,
                start=CandidateState.from_configuration(model.get_configuration()),
            )
            solution = self._search_engine.search(problem)

        if not solution:
            logger.info(f"No trajectory found to follow the {len(reference_path)}-pose reference path.")
            return Trajectory.empty(joint_names)

        logger.info(f"Found a {len(solution)}-point trajectory following the reference path.")
        return Trajectory.from_configurations(joint_names, [s.to_configuration() for s in solution])
