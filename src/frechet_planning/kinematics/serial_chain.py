"""Define a kinematic model of a serial arm described by Denavit-Hartenberg parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.spatial.transform import Rotation

from frechet_planning.io.yaml_utils import load_yaml_data
from frechet_planning.kinematics.joint_limits import JointLimits
from frechet_planning.spatial import Pose3D

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from numpy.typing import NDArray

    from frechet_planning.kinematics.configuration import JointConfiguration


@dataclass(frozen=True)
class DHLink:
    """Standard Denavit-Hartenberg parameters of one revolute joint and its outgoing link."""

    a_m: float
    """Link length (meters) along the common normal."""

    d_m: float
    """Link offset (meters) along the previous z-axis."""

    alpha_rad: float
    """Link twist (radians) about the common normal."""

    theta_offset_rad: float = 0.0
    """Constant offset (radians) added to the joint angle."""

    def transform(self, angle_rad: float) -> NDArray[np.float64]:
        """Compute the 4x4 transform across this link for the given joint angle."""
        theta = angle_rad + self.theta_offset_rad
        ct, st = np.cos(theta), np.sin(theta)
        ca, sa = np.cos(self.alpha_rad), np.sin(self.alpha_rad)
        return np.array(
            [
                [ct, -st * ca, st * sa, self.a_m * ct],
                [st, ct * ca, -ct * sa, self.a_m * st],
                [0.0, sa, ca, self.d_m],
                [0.0, 0.0, 0.0, 1.0],
            ],
        )


@dataclass(frozen=True)
class IKSettings:
    """Settings for the damped-least-squares inverse kinematics solver."""

    max_iterations: int = 200
    position_tolerance_m: float = 1e-4
    rotation_tolerance_rad: float = 1e-3
    damping: float = 0.05
    max_step_rad: float = 0.3


class SerialChainModel:
    """A kinematic model of a revolute serial arm, holding its current configuration."""

    def __init__(
        self,
        links: Sequence[DHLink],
        joint_limits: JointLimits,
        joint_names: Sequence[str] | None = None,
        base_pose: Pose3D | None = None,
        ik_settings: IKSettings | None = None,
    ) -> None:
        """Initialize the model at the zero configuration (clamped into the joint limits).

        :param links: DH parameters of each joint, ordered from the base to the end-effector
        :param joint_limits: Position limits of each joint
        :param joint_names: Optional joint names (defaults to "joint_1", "joint_2", ...)
        :param base_pose: Pose of the arm's base frame (defaults to the identity)
        :param ik_settings: Settings for the IK solver (defaults to IKSettings())
        """
        if not links:
            raise ValueError("A serial chain requires at least one link.")
        if joint_limits.dof != len(links):
            raise ValueError(f"Got {joint_limits.dof} joint limits for {len(links)} links.")

        names = [f"joint_{i + 1}" for i in range(len(links))] if joint_names is None else joint_names
        if len(names) != len(links):
            raise ValueError(f"Got {len(names)} joint names for {len(links)} links.")

        self._links = tuple(links)
        self._limits = joint_limits
        self._joint_names = tuple(names)
        self._base = Pose3D.identity() if base_pose is None else base_pose
        self._ik = IKSettings() if ik_settings is None else ik_settings
        self._q = joint_limits.clamp(np.zeros(len(links)))

    @classmethod
    def ur5e(cls) -> SerialChainModel:
        """Construct a model of a Universal Robots UR5e arm (6 DOF)."""
        half_pi = np.pi / 2
        links = [
            DHLink(a_m=0.0, d_m=0.1625, alpha_rad=half_pi),
            DHLink(a_m=-0.425, d_m=0.0, alpha_rad=0.0),
            DHLink(a_m=-0.3922, d_m=0.0, alpha_rad=0.0),
            DHLink(a_m=0.0, d_m=0.1333, alpha_rad=half_pi),
            DHLink(a_m=0.0, d_m=0.0997, alpha_rad=-half_pi),
            DHLink(a_m=0.0, d_m=0.0996, alpha_rad=0.0),
        ]
        two_pi = 2 * np.pi
        limits = JointLimits.from_bounds(
            lower=[-two_pi, -two_pi, -np.pi, -two_pi, -two_pi, -two_pi],
            upper=[two_pi, two_pi, np.pi, two_pi, two_pi, two_pi],
        )
        names = [
            "shoulder_pan_joint",
            "shoulder_lift_joint",
            "elbow_joint",
            "wrist_1_joint",
            "wrist_2_joint",
            "wrist_3_joint",
        ]
        return SerialChainModel(links, limits, names)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> SerialChainModel:
        """Load a serial chain from a YAML file listing its joints.

        Each entry of `joints` provides `a`, `d`, `alpha`, optional `theta_offset`, `lower`,
            `upper`, and optional `name`.

        :param yaml_path: Path to a YAML file with a `joints` list
        :return: Constructed SerialChainModel
        """
        yaml_data = load_yaml_data(yaml_path, required_keys=("joints",))
        joints_data: list[dict[str, Any]] = yaml_data["joints"]

        links = [
            DHLink(
                a_m=float(j["a"]),
                d_m=float(j["d"]),
                alpha_rad=float(j["alpha"]),
                theta_offset_rad=float(j.get("theta_offset", 0.0)),
            )
            for j in joints_data
        ]
        limits = JointLimits.from_bounds([j["lower"] for j in joints_data], [j["upper"] for j in joints_data])
        names = [str(j.get("name", f"joint_{i + 1}")) for i, j in enumerate(joints_data)]

        return SerialChainModel(links, limits, names)

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the arm's joints in their canonical order."""
        return self._joint_names

    @property
    def joint_limits(self) -> JointLimits:
        """Retrieve the position limits of the arm's joints."""
        return self._limits

    def get_configuration(self) -> JointConfiguration:
        """Retrieve a copy of the model's current joint configuration."""
        return self._q.copy()

    def set_configuration(self, configuration: JointConfiguration) -> None:
        """Set the model's current joint configuration."""
        q = np.array(configuration, dtype=np.float64)
        if q.shape != (len(self._links),):
            raise ValueError(f"Expected {len(self._links)} joint values, got shape {q.shape}")
        self._q = q

    def get_ee_pose(self) -> Pose3D:
        """Compute the end-effector pose at the model's current configuration."""
        return Pose3D.from_homogeneous_matrix(self._frames(self._q)[-1], self._base.ref_frame)

    def _frames(self, q: JointConfiguration) -> list[NDArray[np.float64]]:
        """Compute the transform of the base frame and of every link frame for a configuration."""
        frames = [self._base.to_homogeneous_matrix()]
        for link, angle in zip(self._links, q):
            frames.append(frames[-1] @ link.transform(float(angle)))
        return frames

    def _jacobian(self, frames: list[NDArray[np.float64]]) -> NDArray[np.float64]:
        """Compute the 6xN geometric Jacobian (linear rows, then angular rows) from link frames."""
        ee_position = frames[-1][:3, 3]
        jacobian = np.zeros((6, len(self._links)))
        for i, frame in enumerate(frames[:-1]):
            z_axis = frame[:3, 2]
            jacobian[:3, i] = np.cross(z_axis, ee_position - frame[:3, 3])
            jacobian[3:, i] = z_axis
        return jacobian

    def solve_ik(self, target: Pose3D) -> bool:
        """Solve inverse kinematics by damped least squares, seeded by the current configuration.

        :param target: Target pose of the end-effector (in the base pose's reference frame)
        :return: True if the solver converged within the joint limits (model left at the solution)
        """
        settings = self._ik
        target_rotation = Rotation.from_matrix(target.rotation)
        damping_sq = settings.damping**2
        q = self._limits.clamp(self._q)

        for _ in range(settings.max_iterations):
            frames = self._frames(q)
            ee = frames[-1]

            position_error = target.translation - ee[:3, 3]
            rotation_error = (target_rotation * Rotation.from_matrix(ee[:3, :3]).inv()).as_rotvec()

            if (
                np.linalg.norm(position_error) < settings.position_tolerance_m
                and np.linalg.norm(rotation_error) < settings.rotation_tolerance_rad
            ):
                self._q = q
                return True

            jacobian = self._jacobian(frames)
            error = np.concatenate([position_error, rotation_error])
            jjt = jacobian @ jacobian.T + damping_sq * np.eye(6)
            step = jacobian.T @ np.linalg.solve(jjt, error)

            step_norm = np.linalg.norm(step)
            if step_norm > settings.max_step_rad:
                step *= settings.max_step_rad / step_norm

            q = self._limits.clamp(q + step)

        return False
