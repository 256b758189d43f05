"""Import classes and definitions for robot kinematics."""

from .configuration import CollisionConstraint as CollisionConstraint
from .configuration import JointConfiguration as JointConfiguration
from .joint_limits import InvalidJointLimitsError as InvalidJointLimitsError
from .joint_limits import JointLimits as JointLimits
from .kinematic_model import KinematicModel as KinematicModel
from .kinematic_model import preserved_configuration as preserved_configuration
from .serial_chain import DHLink as DHLink
from .serial_chain import IKSettings as IKSettings
from .serial_chain import SerialChainModel as SerialChainModel
