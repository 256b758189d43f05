"""Define simple fake robots used to test planning without a full arm model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import numpy as np
from trimesh.transformations import euler_matrix

from frechet_planning.geometry import Point3D
from frechet_planning.kinematics import JointLimits
from frechet_planning.robots import Manipulator
from frechet_planning.spatial import EulerRPY, Pose3D, euler_xyz_from_matrix

if TYPE_CHECKING:
    from frechet_planning.kinematics import JointConfiguration
    from frechet_planning.motion_planning import MotionPlanningQuery, Trajectory


class GantryArm:
    """A 6-DOF arm whose joints directly set the end-effector's (x, y, z) and XYZ Euler angles.

    IK is exact whenever the target is within the joint limits. Flags let tests force IK or FK
        to fail or raise.
    """

    def __init__(self, lower: list[float] | None = None, upper: list[float] | None = None) -> None:
        """Initialize the arm at the zero configuration."""
        self.lower = [-2.0, -2.0, -2.0, -np.pi, -np.pi, -np.pi] if lower is None else lower
        self.upper = [2.0, 2.0, 2.0, np.pi, np.pi, np.pi] if upper is None else upper
        self._q = np.zeros(6)

        self.ik_fails = False
        self.ik_failures_before_success = 0
        self.ik_error: Exception | None = None
        self.fk_error: Exception | None = None

        self.ik_calls = 0
        self.ik_seeds: list[JointConfiguration] = []

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the arm's joints."""
        return ("x", "y", "z", "rot_x", "rot_y", "rot_z")

    @property
    def joint_limits(self) -> JointLimits:
        """Retrieve the position limits of the arm's joints."""
        return JointLimits.from_bounds(self.lower, self.upper)

    def get_configuration(self) -> JointConfiguration:
        """Retrieve a copy of the arm's current configuration."""
        return self._q.copy()

    def set_configuration(self, configuration: JointConfiguration) -> None:
        """Set the arm's current configuration."""
        self._q = np.array(configuration, dtype=np.float64)

    def get_ee_pose(self) -> Pose3D:
        """Compute the end-effector pose at the current configuration."""
        if self.fk_error is not None:
            raise self.fk_error
        rotation = euler_matrix(*self._q[3:], axes="rxyz")[:3, :3]
        return Pose3D(Point3D.from_array(self._q[:3]), rotation)

    def solve_ik(self, target: Pose3D) -> bool:
        """Solve IK exactly, unless configured to fail or raise."""
        self.ik_calls += 1
        self.ik_seeds.append(self._q.copy())
        self._q = np.full(6, 99.0)  # Scribble over the configuration, as a real solver might

        if self.ik_error is not None:
            raise self.ik_error
        if self.ik_fails:
            return False
        if self.ik_failures_before_success > 0:
            self.ik_failures_before_success -= 1
            return False

        solution = np.concatenate([target.translation, euler_xyz_from_matrix(target.rotation)])
        if not self.joint_limits.contains(solution):
            return False

        self._q = solution
        return True


class PlanarElbowArm:
    """A 3-link planar arm (lengths 1.0, 1.0, and 0.5 m) moving its end-effector in the xy-plane.

    Every reachable (x, y, yaw) pose has two IK solutions, elbow-up and elbow-down. IK returns the
        branch whose elbow sign matches the seed, unless `elbow_sign_for` chooses it per target.
    """

    link_lengths = (1.0, 1.0, 0.5)

    def __init__(self) -> None:
        """Initialize the arm at the zero configuration."""
        self._q = np.zeros(3)
        self.elbow_sign_for: Callable[[Pose3D], float] | None = None

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the arm's joints."""
        return ("shoulder", "elbow", "wrist")

    @property
    def joint_limits(self) -> JointLimits:
        """Retrieve the position limits of the arm's joints."""
        return JointLimits.from_bounds([-np.pi] * 3, [np.pi] * 3)

    def get_configuration(self) -> JointConfiguration:
        """Retrieve a copy of the arm's current configuration."""
        return self._q.copy()

    def set_configuration(self, configuration: JointConfiguration) -> None:
        """Set the arm's current configuration."""
        self._q = np.array(configuration, dtype=np.float64)

    def get_ee_pose(self) -> Pose3D:
        """Compute the end-effector pose at the current configuration."""
        angles = np.cumsum(self._q)
        x = sum(length * np.cos(a) for length, a in zip(self.link_lengths, angles))
        y = sum(length * np.sin(a) for length, a in zip(self.link_lengths, angles))
        return Pose3D.from_xyz_rpy(x=x, y=y, yaw_rad=float(angles[-1]))

    def solve_ik(self, target: Pose3D) -> bool:
        """Solve IK analytically on the elbow branch chosen by the seed or by `elbow_sign_for`."""
        l1, l2, l3 = self.link_lengths
        yaw = EulerRPY.from_rotation_matrix(target.rotation).yaw_rad
        wrist_x = target.position.x - l3 * np.cos(yaw)
        wrist_y = target.position.y - l3 * np.sin(yaw)

        cos_elbow = (wrist_x**2 + wrist_y**2 - l1**2 - l2**2) / (2 * l1 * l2)
        if abs(cos_elbow) > 1.0:
            return False

        sign = np.sign(self._q[1]) or 1.0
        if self.elbow_sign_for is not None:
            sign = self.elbow_sign_for(target)

        elbow = sign * np.arccos(cos_elbow)
        shoulder = np.arctan2(wrist_y, wrist_x) - np.arctan2(l2 * np.sin(elbow), l1 + l2 * np.cos(elbow))
        wrist = np.arctan2(np.sin(yaw - shoulder - elbow), np.cos(yaw - shoulder - elbow))
        shoulder = np.arctan2(np.sin(shoulder), np.cos(shoulder))

        self._q = np.array([shoulder, elbow, wrist])
        return True


class RecordingManipulator(Manipulator):
    """A manipulator that records the motions requested of it without moving."""

    def __init__(self, move_succeeds: bool = True) -> None:
        """Initialize the manipulator, specifying whether its point-to-point motions succeed."""
        super().__init__("recording_arm")
        self.move_succeeds = move_succeeds
        self.queries: list[MotionPlanningQuery] = []
        self._q = np.zeros(6)

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the manipulator's joints."""
        return tuple(f"joint_{i}" for i in range(6))

    @property
    def configuration(self) -> JointConfiguration:
        """Retrieve the manipulator's current configuration."""
        return self._q.copy()

    def move_to_configuration(self, query: MotionPlanningQuery) -> bool:
        """Record the query, moving instantly if configured to succeed."""
        self.queries.append(query)
        if self.move_succeeds:
            self._q = query.target.copy()
        return self.move_succeeds

    def execute_trajectory(self, trajectory: Trajectory) -> bool:
        """Jump to the end of the trajectory."""
        if trajectory.is_empty:
            return False
        self._q = trajectory.evaluate(trajectory.end_time_s)
        return True
