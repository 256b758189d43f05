"""Define a class to sample inverse kinematics solutions from randomized seed configurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from frechet_planning.kinematics import preserved_configuration
from frechet_planning.planning.candidate_state import CandidateState

if TYPE_CHECKING:
    from frechet_planning.kinematics import KinematicModel
    from frechet_planning.spatial import Pose3D

logger = logging.getLogger(__name__)


class SeededIKSampler:
    """Samples IK solutions by solving from random seeds drawn within the arm's joint limits.

    Each requested solution gets its own budget of attempts. A solution whose attempts are all
        exhausted is skipped, so a batch may hold fewer solutions than were requested.
    """

    def __init__(
        self,
        model: KinematicModel,
        rng: np.random.Generator | None = None,
        max_retries: int = 3,
    ) -> None:
        """Initialize the sampler for the given kinematic model.

        :param model: Shared kinematic model used to solve IK (restored after every batch)
        :param rng: Parent random number generator; each batch draws from an independent child
        :param max_retries: Maximum number of seeds attempted per requested solution
        :raises ValueError: If `max_retries` is not positive
        :raises InvalidJointLimitsError: If the model's joint limits can't be sampled
        """
        if max_retries < 1:
            raise ValueError(f"IK sampling requires at least one attempt, got {max_retries}.")

        self._model = model
        self._limits = model.joint_limits  # Validated on construction; fails fast if malformed
        self._rng = np.random.default_rng() if rng is None else rng
        self.max_retries = max_retries

    def __call__(self, target: Pose3D, count: int) -> list[CandidateState]:
        """Sample up to `count` IK solutions for the target pose."""
        return self.sample_solutions(target, count)

    def sample_solutions(
        self,
        target: Pose3D,
        count: int,
        max_retries: int | None = None,
    ) -> list[CandidateState]:
        """Sample up to `count` IK solutions placing the end-effector at the target pose.

        :param target: Target pose of the end-effector
        :param count: Number of solutions requested
        :param max_retries: Seeds attempted per requested solution (defaults to the sampler's value)
        :return: List of at most `count` candidate states, each captured when its solve succeeded
        :raises ValueError: If `max_retries` is given but not positive
        """
        retries = self.max_retries if max_retries is None else max_retries
        if retries < 1:
            raise ValueError(f"IK sampling requires at least one attempt, got {retries}.")
        if count <= 0:
            return []

        (seed_rng,) = self._rng.spawn(1)
        solutions: list[CandidateState] = []

        with preserved_configuration(self._model) as model:
            for slot in range(count):
                for _ in range(retries):
                    model.set_configuration(self._limits.sample(seed_rng))
                    if model.solve_ik(target):
                        solutions.append(CandidateState.from_configuration(model.get_configuration()))
                        break
                else:
                    logger.debug(f"IK slot {slot} exhausted {retries} attempts for {target}.")

        return solutions
