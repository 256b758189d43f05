"""Import classes and definitions representing 3D coordinate frames, poses, and rotations."""

from .distances import DistanceWeights as DistanceWeights
from .distances import PoseMetric as PoseMetric
from .distances import discrete_frechet_distance as discrete_frechet_distance
from .distances import se3_distance as se3_distance
from .distances import so2_distance as so2_distance
from .distances import waypoint_errors as waypoint_errors
from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .poses import RECORD_LENGTH as RECORD_LENGTH
from .poses import XYZ_RPY as XYZ_RPY
from .poses import Pose3D as Pose3D
from .rotations import EulerRPY as EulerRPY
from .rotations import euler_xyz_from_matrix as euler_xyz_from_matrix
from .rotations import is_rotation_matrix as is_rotation_matrix
