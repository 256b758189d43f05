"""Unit tests for distance utility functions defined in distances.py."""

import numpy as np
import pytest
from hypothesis import given

from frechet_planning.spatial import (
    DistanceWeights,
    Pose3D,
    discrete_frechet_distance,
    se3_distance,
    so2_distance,
    waypoint_errors,
)

from .strategies.spatial_strategies import angles_rad, distance_weights, poses_3d


@given(poses_3d(), distance_weights())
def test_se3_distance_to_self_is_zero(pose: Pose3D, weights: DistanceWeights) -> None:
    """Verify that any pose has zero distance to itself under any weights."""
    assert se3_distance(pose, pose, weights) == 0.0


@given(poses_3d(), poses_3d(), distance_weights())
def test_se3_distance_is_symmetric(pose_a: Pose3D, pose_b: Pose3D, weights: DistanceWeights) -> None:
    """Verify that the SE(3) distance is symmetric and non-negative."""
    # Arrange/Act - Compute the distance in both directions
    distance_ab = se3_distance(pose_a, pose_b, weights)
    distance_ba = se3_distance(pose_b, pose_a, weights)

    # Assert - Expect equal, non-negative distances
    assert distance_ab >= 0.0
    assert distance_ab == pytest.approx(distance_ba)


@given(angles_rad())
def test_so2_distance_is_periodic(theta: float) -> None:
    """Verify that an angle has zero distance to itself and to itself plus a full turn."""
    assert so2_distance(theta, theta) == 0.0
    assert so2_distance(theta, theta + 2 * np.pi) == pytest.approx(0.0, abs=1e-6)


@given(angles_rad(), angles_rad())
def test_so2_distance_is_within_zero_and_pi(a_rad: float, b_rad: float) -> None:
    """Verify that any two angles' circular distance is within [0, pi]."""
    assert 0.0 <= so2_distance(a_rad, b_rad) <= np.pi


def test_so2_distance_wraps_around() -> None:
    """Verify that angles near +pi and -pi are judged close together."""
    assert so2_distance(np.pi - 0.1, -np.pi + 0.1) == pytest.approx(0.2)
    assert so2_distance(0.0, 1.5 * np.pi) == pytest.approx(0.5 * np.pi)


def test_se3_distance_combines_translation_and_rotation() -> None:
    """Verify the weighted norm of translation and per-axis rotation errors for known poses."""
    # Arrange - Two poses offset by (0.3, 0.4, 0) and by 0.5 rad about the z-axis
    pose_a = Pose3D.from_xyz_rpy(x=0.3, y=0.4)
    pose_b = Pose3D.from_xyz_rpy(yaw_rad=0.5)

    # Act - Compute the distance with unit weights, then with rotation down-weighted
    unit_distance = se3_distance(pose_a, pose_b)
    weighted_distance = se3_distance(pose_a, pose_b, DistanceWeights.from_rotation_weight(0.0))

    # Assert - Expect sqrt(0.3^2 + 0.4^2 + 0.5^2) and then only the translation error
    assert unit_distance == pytest.approx(np.sqrt(0.5))
    assert weighted_distance == pytest.approx(0.5)


def test_distance_weights_reject_negative_values() -> None:
    """Verify that negative or non-finite distance weights are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        DistanceWeights(x=-1.0)
    with pytest.raises(ValueError, match="non-negative"):
        DistanceWeights(rot_z=float("nan"))


def test_waypoint_errors_require_equal_lengths() -> None:
    """Verify that per-waypoint errors are computed index-by-index for equal-length paths."""
    path = [Pose3D.from_xyz_rpy(x=0.1 * i) for i in range(3)]
    shifted = [Pose3D.from_xyz_rpy(x=0.1 * i, z=0.2) for i in range(3)]

    assert waypoint_errors(path, shifted) == pytest.approx([0.2, 0.2, 0.2])
    with pytest.raises(ValueError, match="Cannot compare"):
        waypoint_errors(path, shifted[:2])


def test_discrete_frechet_distance_tolerates_reparameterization() -> None:
    """Verify that resampling a path doesn't change its discrete Fréchet distance to the original."""
    # Arrange - A straight path and a copy with each pose repeated
    path = [Pose3D.from_xyz_rpy(x=0.1 * i) for i in range(4)]
    repeated = [pose for pose in path for _ in range(2)]
    offset = [Pose3D.from_xyz_rpy(x=0.1 * i, y=0.05) for i in range(4)]

    # Act/Assert - Expect zero distance to the repeated path and the offset for the shifted one
    assert discrete_frechet_distance(path, repeated) == pytest.approx(0.0)
    assert discrete_frechet_distance(path, offset) == pytest.approx(0.05)

    with pytest.raises(ValueError, match="empty path"):
        discrete_frechet_distance(path, [])
