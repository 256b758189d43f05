"""Define classes and functions to convert between rotation matrices and Euler angles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from trimesh.transformations import euler_from_matrix, euler_matrix

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass(frozen=True)
class EulerRPY:
    """Roll, pitch, and yaw angles (radians) about the fixed x, y, and z axes, applied in that order."""

    roll_rad: float
    pitch_rad: float
    yaw_rad: float

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert the angles into a (roll, pitch, yaw) tuple."""
        return (self.roll_rad, self.pitch_rad, self.yaw_rad)

    @classmethod
    def from_rotation_matrix(cls, r_matrix: NDArray[np.float64]) -> EulerRPY:
        """Decompose a 3x3 rotation matrix into fixed-axis roll, pitch, and yaw."""
        rotation = np.asarray(r_matrix, dtype=np.float64)
        if rotation.shape != (3, 3):
            raise ValueError(f"Roll-pitch-yaw angles need a 3x3 rotation matrix, got {rotation.shape}")
        roll, pitch, yaw = euler_from_matrix(rotation, axes="sxyz")
        return EulerRPY(float(roll), float(pitch), float(yaw))

    def to_rotation_matrix(self) -> NDArray[np.float64]:
        """Compose the angles into a 3x3 rotation matrix."""
        return euler_matrix(*self.to_tuple(), axes="sxyz")[:3, :3]


def euler_xyz_from_matrix(r_matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Decompose a rotation matrix into intrinsic X-Y-Z Euler angles.

    The angles (a, b, c) satisfy R = Rx(a) @ Ry(b) @ Rz(c). Near gimbal lock (|b| close to pi/2)
        the decomposition is not unique and small changes in R can flip a and c discontinuously.

    :param r_matrix: 3x3 rotation matrix to decompose
    :return: Array of the three Euler angles (radians)
    """
    if r_matrix.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 rotation matrix but received shape {r_matrix.shape}")
    return np.array(euler_from_matrix(np.asarray(r_matrix, dtype=np.float64), axes="rxyz"))


def is_rotation_matrix(r_matrix: NDArray[np.float64], atol: float = 1e-6) -> bool:
    """Evaluate whether the given matrix is orthonormal with determinant +1."""
    if r_matrix.shape != (3, 3):
        return False
    orthonormal = np.allclose(r_matrix @ r_matrix.T, np.eye(3), atol=atol)
    return bool(orthonormal and np.isclose(np.linalg.det(r_matrix), 1.0, atol=atol))
