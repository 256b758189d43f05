"""Define type aliases to represent robot joint configurations."""

from typing import Callable

import numpy as np
from numpy.typing import NDArray

JointConfiguration = NDArray[np.float64]
"""A fixed-size vector of joint positions (rad or m) in the arm's canonical joint order."""

CollisionConstraint = Callable[[JointConfiguration], bool]
"""Returns True if the given configuration is collision-free, else False."""
