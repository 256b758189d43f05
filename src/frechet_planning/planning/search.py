"""Define the interface between the path-following planner and a sampling-based search engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, Sequence

import numpy as np

from frechet_planning.planning.candidate_state import CandidateState
from frechet_planning.spatial import discrete_frechet_distance

if TYPE_CHECKING:
    from frechet_planning.kinematics import JointConfiguration
    from frechet_planning.motion_planning import CartesianPath
    from frechet_planning.planning.params import PathFollowingParams
    from frechet_planning.spatial import Pose3D, PoseMetric

logger = logging.getLogger(__name__)

IKFunction = Callable[["Pose3D", int], Sequence[CandidateState]]
"""Returns up to the requested number of candidate states reaching a target pose."""

FKFunction = Callable[[CandidateState], "Pose3D"]
"""Returns the end-effector pose reached at a candidate state."""

FeasibilityCheck = Callable[["JointConfiguration"], bool]
"""Returns True if a configuration is within limits and collision-free, else False."""


@dataclass(frozen=True)
class PathSearchProblem:
    """Everything a search engine needs to find joint configurations following a reference path."""

    reference_path: CartesianPath
    distance_fn: PoseMetric
    ik_fn: IKFunction
    fk_fn: FKFunction
    is_feasible: FeasibilityCheck
    params: PathFollowingParams

    start: CandidateState | None = None
    """State of the arm when planning began (None if unknown)."""


class PathSearchEngine(Protocol):
    """A search over joint configurations whose end-effector poses follow a reference path."""

    def search(self, problem: PathSearchProblem) -> Sequence[CandidateState] | None:
        """Search for a sequence of states following the problem's reference path.

        :return: States in path order, or None (or an empty sequence) if no solution was found
        """
        ...


def select_waypoint_indices(path_length: int, num_waypoints: int) -> list[int]:
    """Select evenly spaced indices into a path, always including its first and last entries.

    Because both endpoints are always kept, requesting a single waypoint from a path of two or
        more poses yields two indices: the first and the last.

    :param path_length: Number of poses in the path
    :param num_waypoints: Requested number of waypoints (capped at the path length)
    :return: Sorted list of distinct indices
    """
    if path_length < 1:
        raise ValueError("Cannot select waypoints from an empty path.")

    count = min(num_waypoints, path_length)
    if count == 1:
        return [0] if path_length == 1 else [0, path_length - 1]

    spaced = np.linspace(0, path_length - 1, num=count)
    return sorted({int(round(i)) for i in spaced})


class GreedyWaypointSearch:
    """A simple search that greedily commits to one IK solution per waypoint, in path order.

    Consecutive waypoints are joined by interpolating in joint space. A connection is accepted
        only if its states are feasible and their end-effector poses stay within the tolerance of
        the reference poses between the two waypoints (by discrete Fréchet distance). Because the
        accepted segments share their waypoint endpoints, the whole solution then lies within the
        tolerance of the entire reference path.
    """

    def __init__(self, tolerance: float = 0.05) -> None:
        """Initialize the search with the largest pose distance accepted along the path."""
        if tolerance <= 0.0:
            raise ValueError(f"Waypoint tolerance must be positive, got {tolerance}.")
        self.tolerance = tolerance

    def search(self, problem: PathSearchProblem) -> list[CandidateState] | None:
        """Search for states reaching each waypoint, joined by motions that follow the reference path.

        :param problem: Search problem specifying the reference path and callbacks
        :return: States in path order, or None if some waypoint or connection can't be satisfied
        """
        path = problem.reference_path
        indices = select_waypoint_indices(len(path), problem.params.num_waypoints)

        selected: list[CandidateState] = []
        previous = problem.start
        previous_index: int | None = None
        for index in indices:
            candidates = self._waypoint_candidates(problem, path[index], previous)
            if not candidates:
                logger.info(f"No feasible IK solution within tolerance for waypoint {index}.")
                return None

            if previous is None or previous_index is None:
                chosen, connection = candidates[0], []
            else:
                reference_segment = path[previous_index : index + 1]
                connected = self._connect(problem, previous, candidates, reference_segment)
                if connected is None:
                    logger.info(f"No motion to waypoint {index} stays within tolerance of the path.")
                    return None
                chosen, connection = connected

            selected.extend(connection)
            selected.append(chosen.copy(waypoint_index=index))
            previous, previous_index = chosen, index

        return selected

    def _waypoint_candidates(
        self,
        problem: PathSearchProblem,
        target: Pose3D,
        previous: CandidateState | None,
    ) -> list[CandidateState]:
        """Find feasible IK candidates reaching the target, nearest to the previous state first."""
        candidates = [
            c for c in problem.ik_fn(target, problem.params.ik_multiplier)
            if problem.is_feasible(c.configuration)
        ]
        if previous is not None:
            candidates.sort(key=lambda c: float(np.linalg.norm(c.configuration - previous.configuration)))
            candidates = candidates[: problem.params.num_nearest_neighbors]

        return [c for c in candidates if problem.distance_fn(problem.fk_fn(c), target) <= self.tolerance]

    def _connect(
        self,
        problem: PathSearchProblem,
        previous: CandidateState,
        candidates: Sequence[CandidateState],
        reference_segment: Sequence[Pose3D],
    ) -> tuple[CandidateState, list[CandidateState]] | None:
        """Find the first candidate whose interpolated motion from the previous state follows the path.

        :return: Chosen candidate and the interpolated states leading to it, or None if none qualify
        """
        for candidate in candidates:
            connection = self._interpolate(previous, candidate, problem.params.discretization)
            if not all(problem.is_feasible(s.configuration) for s in connection):
                continue

            ee_segment = [problem.fk_fn(s) for s in (previous, *connection, candidate)]
            deviation = discrete_frechet_distance(ee_segment, reference_segment, problem.distance_fn)
            if deviation <= self.tolerance:
                return candidate, connection

        return None

    @staticmethod
    def _interpolate(start: CandidateState, end: CandidateState, steps: int) -> list[CandidateState]:
        """Linearly interpolate `steps` states strictly between two states."""
        fractions = np.linspace(0.0, 1.0, num=steps + 2)[1:-1]
        return [
            CandidateState(start.configuration + f * (end.configuration - start.configuration))
            for f in fractions
        ]
