"""Import classes and definitions enabling motion planning and execution."""

from .alignment import move_to_start as move_to_start
from .motion_planning_query import MotionPlanningQuery as MotionPlanningQuery
from .trajectories import CartesianPath as CartesianPath
from .trajectories import Trajectory as Trajectory
from .trajectories import TrajectoryPoint as TrajectoryPoint
