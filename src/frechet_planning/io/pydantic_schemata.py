"""Define Pydantic models for validating planner YAML configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Annotated

from frechet_planning.io.yaml_utils import load_yaml_data
from frechet_planning.planning.params import PathFollowingParams
from frechet_planning.spatial import DistanceWeights

NonNegativeWeight = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]

WEIGHTS = Tuple[
    NonNegativeWeight,
    NonNegativeWeight,
    NonNegativeWeight,
    NonNegativeWeight,
    NonNegativeWeight,
    NonNegativeWeight,
]
"""Six non-negative weights: translation (x, y, z), then rotation (x, y, z)."""


class PathFollowingParamsSchema(BaseModel):
    """Schema for the tuning parameters of a path-following search."""

    num_waypoints: int = Field(default=5, ge=1, description="Hard waypoints along the path")
    ik_multiplier: int = Field(default=10, ge=1, description="IK candidates per waypoint query")
    num_nearest_neighbors: int = Field(default=10, ge=1, description="Neighbor fan-out bound")
    discretization: int = Field(default=3, ge=1, description="Interpolation density")

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> PathFollowingParams:
        """Convert the validated schema into a PathFollowingParams instance."""
        return PathFollowingParams(**self.model_dump())


class PlannerConfigSchema(BaseModel):
    """Schema for a YAML file configuring the path-following planner."""

    weights: WEIGHTS = (1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
    params: PathFollowingParamsSchema = Field(default_factory=PathFollowingParamsSchema)
    max_ik_retries: int = Field(default=3, ge=1, description="IK attempts per solution slot")
    tolerance: float = Field(default=0.05, gt=0, description="Max pose distance at a waypoint")
    rng_seed: Optional[int] = Field(default=None, description="Seed for IK sampling (optional)")

    model_config = ConfigDict(extra="forbid")

    def to_weights(self) -> DistanceWeights:
        """Convert the configured weights into a DistanceWeights instance."""
        return DistanceWeights.from_sequence(self.weights)

    def to_params(self) -> PathFollowingParams:
        """Convert the configured search parameters into a PathFollowingParams instance."""
        return self.params.to_params()


def load_planner_config(yaml_path: Path) -> PlannerConfigSchema:
    """Load and validate a planner configuration from a YAML file.

    :param yaml_path: Path to a YAML file holding a (possibly empty) mapping
    :return: Validated planner configuration
    :raises ValueError: If the YAML data doesn't satisfy the configuration schema
    """
    yaml_data = load_yaml_data(yaml_path)

    try:
        return PlannerConfigSchema.model_validate(yaml_data)
    except ValidationError as error:
        raise ValueError(f"Invalid planner configuration in {yaml_path}:\n{error}") from error
