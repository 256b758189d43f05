"""Define a class to represent poses in 3D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import numpy as np

from frechet_planning.geometry import Point3D
from frechet_planning.spatial.frames import DEFAULT_FRAME
from frechet_planning.spatial.rotations import EulerRPY, is_rotation_matrix

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

XYZ_RPY = Tuple[float, float, float, float, float, float]
"""A 6-tuple of (x, y, z, roll, pitch, yaw) values."""

RECORD_LENGTH = 12
"""Number of values in a flat pose record: 3 translation values, then 9 row-major rotation values."""


@dataclass(frozen=True, eq=False)
class Pose3D:
    """A position and orientation in 3D space.

    The orientation is stored as a 3x3 rotation matrix exactly as given; it is never
        re-orthonormalized. Use `has_valid_rotation()` to check the matrix before trusting it.
    """

    position: Point3D
    rotation: NDArray[np.float64]
    ref_frame: str = DEFAULT_FRAME

    def __post_init__(self) -> None:
        """Store a read-only copy of the rotation matrix after verifying its shape."""
        rotation = np.array(self.rotation, dtype=np.float64)
        if rotation.shape != (3, 3):
            raise ValueError(f"Pose3D expects a 3x3 rotation matrix, got shape {rotation.shape}")
        rotation.setflags(write=False)
        object.__setattr__(self, "rotation", rotation)

    def __matmul__(self, other: Pose3D) -> Pose3D:
        """Compose this pose with another, expressed relative to this pose's frame.

        For poses T_world_base and T_base_ee, the product T_world_base @ T_base_ee is T_world_ee,
            so the result keeps the reference frame of the left-hand operand.
        """
        if not isinstance(other, Pose3D):
            return NotImplemented
        composed = self.to_homogeneous_matrix() @ other.to_homogeneous_matrix()
        return Pose3D.from_homogeneous_matrix(composed, self.ref_frame)

    def __str__(self) -> str:
        """Summarize the pose by its position and roll-pitch-yaw angles, rounded for display."""
        x, y, z, roll, pitch, yaw = self.to_xyz_rpy()
        return (
            f"Pose3D(xyz=({x:.3f}, {y:.3f}, {z:.3f}), rpy=({roll:.3f}, {pitch:.3f}, {yaw:.3f}), "
            f"frame={self.ref_frame})"
        )

    @property
    def translation(self) -> NDArray[np.float64]:
        """Retrieve the pose's (x, y, z) position as a new NumPy array."""
        return self.position.to_array()

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a pose coinciding with the origin and axes of its reference frame."""
        return Pose3D(Point3D.identity(), np.eye(3), ref_frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a pose from a position (meters) and fixed-axis roll, pitch, and yaw (radians)."""
        rotation = EulerRPY(roll_rad, pitch_rad, yaw_rad).to_rotation_matrix()
        return Pose3D(Point3D(float(x), float(y), float(z)), rotation, ref_frame)

    def to_xyz_rpy(self) -> XYZ_RPY:
        """Convert the pose into its position followed by fixed-axis roll, pitch, and yaw."""
        return (*self.position.to_tuple(), *EulerRPY.from_rotation_matrix(self.rotation).to_tuple())

    @classmethod
    def from_record(cls, values: Sequence[float], ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from a flat 12-value record.

        :param values: Translation (x, y, z) followed by the row-major 3x3 rotation matrix
        :param ref_frame: Reference frame of the constructed pose
        :return: Constructed Pose3D instance
        """
        if len(values) != RECORD_LENGTH:
            raise ValueError(f"Pose3D record expects {RECORD_LENGTH} values, got {len(values)}")

        record = np.array(values, dtype=np.float64)
        return Pose3D(Point3D.from_array(record[:3]), record[3:].reshape(3, 3), ref_frame)

    def to_record(self) -> list[float]:
        """Convert the pose into a flat 12-value record (translation, then row-major rotation)."""
        return [*self.position.to_tuple(), *(float(v) for v in self.rotation.flatten())]

    @classmethod
    def from_homogeneous_matrix(cls, matrix: NDArray[np.float64], ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a pose from a 4x4 transform, e.g., one computed by forward kinematics."""
        transform = np.asarray(matrix, dtype=np.float64)
        if transform.shape != (4, 4):
            raise ValueError(f"A homogeneous transform must be 4x4, got shape {transform.shape}")
        return Pose3D(Point3D.from_array(transform[:3, 3]), transform[:3, :3], ref_frame)

    def to_homogeneous_matrix(self) -> NDArray[np.float64]:
        """Pack the pose into a new 4x4 homogeneous transform."""
        transform = np.eye(4)
        transform[:3, :3] = self.rotation
        transform[:3, 3] = self.translation
        return transform

    def has_valid_rotation(self, atol: float = 1e-6) -> bool:
        """Check whether the pose's rotation matrix is orthonormal with determinant +1."""
        return is_rotation_matrix(self.rotation, atol=atol)

    def approx_equal(self, other: Pose3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Check whether another pose shares this pose's frame, position, and rotation within tolerance."""
        if self.ref_frame != other.ref_frame:
            return False
        same_position = self.position.approx_equal(other.position, rtol=rtol, atol=atol)
        return same_position and bool(np.allclose(self.rotation, other.rotation, rtol=rtol, atol=atol))
