"""Unit tests for SerialChainModel, a kinematic model of a serial arm."""

from pathlib import Path

import numpy as np
import pytest

from frechet_planning.io import export_yaml_data
from frechet_planning.kinematics import SerialChainModel, preserved_configuration
from frechet_planning.spatial import Pose3D, se3_distance

REACHABLE_Q = np.array([0.3, -1.2, 1.4, -1.5, -1.4, 0.5])


@pytest.fixture
def ur5e() -> SerialChainModel:
    """Return a kinematic model of a UR5e arm."""
    return SerialChainModel.ur5e()


def test_ik_recovers_pose_from_nearby_seed(ur5e: SerialChainModel) -> None:
    """Verify that IK seeded near a known configuration reaches that configuration's pose."""
    # Arrange - Compute the pose reached at a known configuration, then seed IK nearby
    ur5e.set_configuration(REACHABLE_Q)
    target = ur5e.get_ee_pose()
    ur5e.set_configuration(REACHABLE_Q + 0.05)

    # Act - Solve IK for the target pose
    solved = ur5e.solve_ik(target)

    # Assert - Expect success, leaving the model at a configuration reaching the target
    assert solved
    assert se3_distance(ur5e.get_ee_pose(), target) < 1e-2
    assert ur5e.joint_limits.contains(ur5e.get_configuration())


def test_ik_fails_for_unreachable_pose(ur5e: SerialChainModel) -> None:
    """Verify that IK reports failure, without moving the model, for a pose out of reach."""
    # Arrange - A target far outside the UR5e's ~1 m reach
    seed = ur5e.get_configuration()
    target = Pose3D.from_xyz_rpy(x=5.0)

    # Act/Assert - Expect failure and an unchanged configuration
    assert not ur5e.solve_ik(target)
    assert np.array_equal(ur5e.get_configuration(), seed)


def test_preserved_configuration_restores_after_error(ur5e: SerialChainModel) -> None:
    """Verify that a borrowed model's configuration is restored even when an error is raised."""
    # Arrange - Record the configuration before borrowing the model
    original = ur5e.get_configuration()

    # Act - Move the model, then raise an error while it's borrowed
    with pytest.raises(RuntimeError, match="mid-evaluation"), preserved_configuration(ur5e):
        ur5e.set_configuration(REACHABLE_Q)
        raise RuntimeError("Failure mid-evaluation")

    # Assert - Expect the configuration to be bit-for-bit identical to the original
    assert np.array_equal(ur5e.get_configuration(), original)


def test_get_configuration_returns_copy(ur5e: SerialChainModel) -> None:
    """Verify that mutating a retrieved configuration doesn't affect the model."""
    q = ur5e.get_configuration()
    q += 1.0
    assert not np.array_equal(ur5e.get_configuration(), q)


def test_set_configuration_rejects_wrong_size(ur5e: SerialChainModel) -> None:
    """Verify that configurations of the wrong size are rejected."""
    with pytest.raises(ValueError, match="Expected 6 joint values"):
        ur5e.set_configuration(np.zeros(5))


def test_load_serial_chain_from_yaml(tmp_path: Path) -> None:
    """Verify that a planar two-link arm loaded from YAML computes the expected FK."""
    # Arrange - Export a planar arm with two 0.5 m links
    yaml_path = tmp_path / "planar_arm.yaml"
    joint = {"a": 0.5, "d": 0.0, "alpha": 0.0, "lower": -3.0, "upper": 3.0}
    export_yaml_data({"joints": [{**joint, "name": "shoulder"}, joint]}, yaml_path)

    # Act - Load the arm and bend its first joint by 90 degrees
    arm = SerialChainModel.from_yaml(yaml_path)
    arm.set_configuration(np.array([np.pi / 2, 0.0]))
    pose = arm.get_ee_pose()

    # Assert - Expect the end-effector 1 m along the y-axis
    assert arm.joint_names == ("shoulder", "joint_2")
    assert np.allclose(pose.translation, [0.0, 1.0, 0.0])
    assert pose.has_valid_rotation()
