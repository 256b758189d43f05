"""Define a class wrapping the joint configurations exchanged with a path-following search."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

import numpy as np

if TYPE_CHECKING:
    from frechet_planning.kinematics import JointConfiguration


@dataclass(frozen=True, eq=False)
class CandidateState:
    """An immutable snapshot of a joint configuration, plus metadata attached by the search."""

    configuration: JointConfiguration
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze copies of the configuration and metadata so later mutation can't reach them."""
        configuration = np.array(self.configuration, dtype=np.float64)
        configuration.setflags(write=False)
        object.__setattr__(self, "configuration", configuration)
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_configuration(cls, configuration: JointConfiguration, **metadata: Any) -> CandidateState:
        """Capture the given configuration (copied immediately) as a candidate state."""
        return CandidateState(configuration, metadata)

    def to_configuration(self) -> JointConfiguration:
        """Convert the state into a fresh, writable joint configuration array."""
        return self.configuration.copy()

    def copy(self, **metadata: Any) -> CandidateState:
        """Copy the state, optionally adding or replacing metadata entries."""
        return CandidateState(self.configuration, {**self.metadata, **metadata})

    @property
    def dof(self) -> int:
        """Retrieve the number of joint values in the state."""
        return len(self.configuration)
