"""Define constants related to coordinate frames."""

DEFAULT_FRAME = "world"
"""Reference frame assumed for poses that don't specify one."""
