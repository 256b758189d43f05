"""Define utility functions for importing and exporting configuration mappings as YAML."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from collections.abc import Collection
    from pathlib import Path


def export_yaml_data(data: dict[str, Any], filepath: Path) -> None:
    """Write the given mapping to a YAML file, one key per line in sorted order."""
    with filepath.open("w") as file:
        yaml.safe_dump(data, file, sort_keys=True, default_flow_style=False)


def load_yaml_data(yaml_path: Path, required_keys: Collection[str] = ()) -> dict[str, Any]:
    """Load a mapping from a YAML file, treating an empty file as an empty mapping.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Keys that must be present in the loaded mapping
    :return: Dictionary mapping strings to the loaded values
    :raises FileNotFoundError: If the YAML file doesn't exist
    :raises ValueError: If the file isn't valid YAML or its top level isn't a mapping
    :raises KeyError: If a required key is missing from the loaded mapping
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise ValueError(f"Failed to parse YAML file: {yaml_path}") from error

    if yaml_data is None:
        yaml_data = {}
    if not isinstance(yaml_data, dict):
        raise ValueError(f"Expected a mapping at the top level of {yaml_path}, got {type(yaml_data)}")

    missing = sorted(set(required_keys) - yaml_data.keys())
    if missing:
        raise KeyError(f"Required keys {missing} were missing in data loaded from {yaml_path}")

    return yaml_data
