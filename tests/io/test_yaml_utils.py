"""Unit tests for the YAML import and export utilities."""

from pathlib import Path

import pytest

from frechet_planning.io import export_yaml_data, load_yaml_data


def test_yaml_data_round_trip(tmp_path: Path) -> None:
    """Verify that exported YAML data is loaded back unchanged."""
    yaml_path = tmp_path / "data.yaml"
    data = {"tolerance": 0.05, "params": {"num_waypoints": 4}, "weights": [1.0, 0.5]}

    export_yaml_data(data, yaml_path)

    assert load_yaml_data(yaml_path, required_keys={"params"}) == data


def test_load_yaml_data_errors(tmp_path: Path) -> None:
    """Verify the errors raised for missing files, non-mapping data, and missing keys."""
    with pytest.raises(FileNotFoundError):
        load_yaml_data(tmp_path / "missing.yaml")

    list_path = tmp_path / "list.yaml"
    list_path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="Expected a mapping"):
        load_yaml_data(list_path)

    mapping_path = tmp_path / "mapping.yaml"
    mapping_path.write_text("a: 1\n")
    with pytest.raises(KeyError, match="joints"):
        load_yaml_data(mapping_path, required_keys={"joints"})
