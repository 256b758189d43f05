"""Define utility functions to compute distances between poses and pose paths."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

from frechet_planning.spatial.rotations import euler_xyz_from_matrix

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from frechet_planning.spatial.poses import Pose3D

PoseMetric = Callable[["Pose3D", "Pose3D"], float]
"""A function computing a non-negative dissimilarity between two poses."""


@dataclass(frozen=True)
class DistanceWeights:
    """Per-component weights applied to the translation (x,y,z) and rotation (x,y,z) errors."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0
    rot_x: float = 1.0
    rot_y: float = 1.0
    rot_z: float = 1.0

    def __post_init__(self) -> None:
        """Verify that every weight is finite and non-negative."""
        for value in astuple(self):
            if not np.isfinite(value) or value < 0.0:
                raise ValueError(f"Distance weights must be finite and non-negative: {self}")

    @classmethod
    def from_rotation_weight(cls, rotation_weight: float) -> DistanceWeights:
        """Construct weights with unit translation weights and a shared rotation weight."""
        return DistanceWeights(1.0, 1.0, 1.0, rotation_weight, rotation_weight, rotation_weight)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> DistanceWeights:
        """Construct weights from six values ordered (x, y, z, rot_x, rot_y, rot_z)."""
        if len(values) != 6:
            raise ValueError(f"DistanceWeights expects 6 values, got {len(values)}")
        return DistanceWeights(*(float(v) for v in values))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the weights into a NumPy array of length six."""
        return np.array(astuple(self), dtype=np.float64)


def so2_distance(first_rad: float, second_rad: float) -> float:
    """Compute the shortest distance (radians) between two angles on the circle.

    Reference: https://stackoverflow.com/questions/9505862

    :param first_rad: First angle (radians)
    :param second_rad: Second angle (radians)
    :return: Unsigned angular distance within [0, pi]
    """
    mod_diff = float(np.fmod(abs(first_rad - second_rad), 2.0 * np.pi))
    return 2.0 * np.pi - mod_diff if mod_diff > np.pi else mod_diff


def se3_distance(pose_a: Pose3D, pose_b: Pose3D, weights: DistanceWeights | None = None) -> float:
    """Compute a weighted distance between two poses combining translation and rotation errors.

    Rotation errors compare the poses' intrinsic XYZ Euler angles axis-by-axis on the circle. This
        wraps angles near +pi and -pi correctly, but the Euler decomposition itself is discontinuous
        at gimbal lock (pitch near +/- pi/2), where nearby rotations may be judged far apart.

    :param pose_a: First pose used to compute the distance
    :param pose_b: Second pose used to compute the distance
    :param weights: Optional per-component weights (defaults to all ones)
    :return: Weighted Euclidean norm of the six error components
    """
    weights = DistanceWeights() if weights is None else weights

    errors = np.zeros(6)
    errors[:3] = pose_a.translation - pose_b.translation

    euler_a = euler_xyz_from_matrix(pose_a.rotation)
    euler_b = euler_xyz_from_matrix(pose_b.rotation)
    for i in range(3):
        errors[i + 3] = so2_distance(euler_a[i], euler_b[i])

    return float(np.linalg.norm(errors * weights.to_array()))


def waypoint_errors(
    poses: Sequence[Pose3D],
    reference: Sequence[Pose3D],
    weights: DistanceWeights | None = None,
) -> list[float]:
    """Compute the pose distance between corresponding entries of two equal-length pose sequences.

    :param poses: Poses reached (e.g., by evaluating forward kinematics along a trajectory)
    :param reference: Target poses with the same length as `poses`
    :param weights: Optional per-component weights for the pose distance
    :return: List of distances, one per index
    """
    if len(poses) != len(reference):
        raise ValueError(f"Cannot compare {len(poses)} poses against {len(reference)} targets.")

    return [se3_distance(p, r, weights) for p, r in zip(poses, reference)]


def discrete_frechet_distance(
    path_a: Sequence[Pose3D],
    path_b: Sequence[Pose3D],
    metric: PoseMetric = se3_distance,
) -> float:
    """Compute the discrete Fréchet distance between two pose paths.

    Reference: Eiter and Mannila, "Computing Discrete Fréchet Distance" (1994)

    :param path_a: First non-empty sequence of poses
    :param path_b: Second non-empty sequence of poses
    :param metric: Distance between individual poses (defaults to the unweighted SE(3) distance)
    :return: Smallest achievable maximum pose distance over monotone couplings of the two paths
    """
    if not path_a or not path_b:
        raise ValueError("Cannot compute the Fréchet distance involving an empty path.")

    n, m = len(path_a), len(path_b)
    coupling = np.full((n, m), np.inf)

    for i in range(n):
        for j in range(m):
            d = metric(path_a[i], path_b[j])
            if i == 0 and j == 0:
                coupling[i, j] = d
                continue

            previous = min(
                coupling[i - 1, j] if i > 0 else np.inf,
                coupling[i, j - 1] if j > 0 else np.inf,
                coupling[i - 1, j - 1] if i > 0 and j > 0 else np.inf,
            )
            coupling[i, j] = max(previous, d)

    return float(coupling[n - 1, m - 1])
