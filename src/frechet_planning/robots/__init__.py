"""Import classes defining general-purpose robot interfaces."""

from .manipulator import Manipulator as Manipulator
