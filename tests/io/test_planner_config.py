"""Unit tests for loading planner configurations from YAML."""

from pathlib import Path

import pytest

from frechet_planning.io import export_yaml_data
from frechet_planning.io.pydantic_schemata import load_planner_config
from frechet_planning.planning import PathFollowingParams
from frechet_planning.spatial import DistanceWeights


def test_load_planner_config(tmp_path: Path) -> None:
    """Verify that a YAML planner configuration converts into weights and search parameters."""
    # Arrange - Export a configuration overriding some of the defaults
    yaml_path = tmp_path / "planner.yaml"
    export_yaml_data(
        {
            "weights": [1.0, 1.0, 1.0, 0.5, 0.5, 0.5],
            "params": {"num_waypoints": 3, "discretization": 5},
            "max_ik_retries": 4,
            "rng_seed": 11,
        },
        yaml_path,
    )

    # Act - Load and validate the configuration
    config = load_planner_config(yaml_path)

    # Assert - Expect overridden values alongside defaults
    assert config.to_weights() == DistanceWeights.from_rotation_weight(0.5)
    assert config.to_params() == PathFollowingParams(num_waypoints=3, discretization=5)
    assert config.max_ik_retries == 4
    assert config.rng_seed == 11


def test_load_empty_planner_config_uses_defaults(tmp_path: Path) -> None:
    """Verify that an empty YAML file yields the default planner configuration."""
    yaml_path = tmp_path / "empty.yaml"
    yaml_path.write_text("")

    config = load_planner_config(yaml_path)

    assert config.to_weights() == DistanceWeights()
    assert config.to_params() == PathFollowingParams()
    assert config.rng_seed is None


@pytest.mark.parametrize(
    "yaml_text",
    [
        "weights: [1, 1, 1, -1, 1, 1]\n",
        "weights: [1, 1, 1]\n",
        "params: {num_waypoints: 0}\n",
        "max_ik_retries: 0\n",
        "unknown_key: 3\n",
        "alignment_timeout_s: 15.0\n",
    ],
)
def test_load_planner_config_rejects_invalid_values(tmp_path: Path, yaml_text: str) -> None:
    """Verify that invalid or unknown configuration values are rejected."""
    yaml_path = tmp_path / "invalid.yaml"
    yaml_path.write_text(yaml_text)

    with pytest.raises(ValueError, match="Invalid planner configuration"):
        load_planner_config(yaml_path)
