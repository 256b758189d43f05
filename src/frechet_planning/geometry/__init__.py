"""Import classes and definitions representing pure geometric primitives."""

from .point3d import Point3D as Point3D
