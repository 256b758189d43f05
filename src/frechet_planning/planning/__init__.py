"""Import classes and definitions for planning paths that follow end-effector reference paths."""

from .candidate_state import CandidateState as CandidateState
from .fk_evaluator import StateGuardedFKEvaluator as StateGuardedFKEvaluator
from .ik_sampler import SeededIKSampler as SeededIKSampler
from .params import PathFollowingParams as PathFollowingParams
from .path_following import PathFollowingPlanner as PathFollowingPlanner
from .path_following import PlanningCallbackError as PlanningCallbackError
from .search import GreedyWaypointSearch as GreedyWaypointSearch
from .search import PathSearchEngine as PathSearchEngine
from .search import PathSearchProblem as PathSearchProblem
from .search import select_waypoint_indices as select_waypoint_indices
