"""Define a class to evaluate forward kinematics without disturbing the shared kinematic model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from frechet_planning.kinematics import preserved_configuration

if TYPE_CHECKING:
    from frechet_planning.kinematics import KinematicModel
    from frechet_planning.planning.candidate_state import CandidateState
    from frechet_planning.spatial import Pose3D


class StateGuardedFKEvaluator:
    """Maps candidate states to end-effector poses, restoring the model after every evaluation."""

    def __init__(self, model: KinematicModel) -> None:
        """Initialize the evaluator for the given kinematic model."""
        self._model = model
        self._dof = len(model.joint_names)

    def __call__(self, state: CandidateState) -> Pose3D:
        """Evaluate the end-effector pose reached at the given state."""
        return self.evaluate(state)

    def evaluate(self, state: CandidateState) -> Pose3D:
        """Evaluate the end-effector pose reached at the given state.

        :param state: Candidate state whose configuration is applied to the model
        :return: End-effector pose at that configuration
        :raises ValueError: If the state's size doesn't match the model's degrees of freedom
        """
        if state.dof != self._dof:
            raise ValueError(f"Cannot evaluate a {state.dof}-DOF state on a {self._dof}-DOF model.")

        with preserved_configuration(self._model) as model:
            model.set_configuration(state.to_configuration())
            return model.get_ee_pose()
