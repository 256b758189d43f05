"""Import definitions relating to general mathematical operations."""

from .sampling import RealRange as RealRange
