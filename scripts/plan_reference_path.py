"""Plan a UR5e trajectory whose end-effector follows a recorded reference path.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/plan_reference_path.py path/to/reference_path.txt --config planner.yaml

"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

import click
import numpy as np

from frechet_planning.io import configure_logging, console, load_pose_path
from frechet_planning.io.pydantic_schemata import PlannerConfigSchema, load_planner_config
from frechet_planning.kinematics import SerialChainModel
from frechet_planning.planning import (
    CandidateState,
    GreedyWaypointSearch,
    PathFollowingPlanner,
    StateGuardedFKEvaluator,
)
from frechet_planning.spatial import discrete_frechet_distance, se3_distance


@click.command()
@click.argument("path_file", type=click.Path(exists=True, path_type=Path))
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path), default=None)
@click.option("--verbose", is_flag=True, help="Log IK sampling details.")
def main(path_file: Path, config_path: Path | None, verbose: bool) -> None:
    """Plan to follow the reference path stored in the given pose-path file.

    :param path_file: File with one 12-value pose record per line
    :param config_path: Optional YAML file configuring the planner
    :param verbose: Whether to log at DEBUG level
    """
    configure_logging(logging.DEBUG if verbose else logging.INFO)
    config = PlannerConfigSchema() if config_path is None else load_planner_config(config_path)

    reference_path = load_pose_path(path_file)
    console.print(f"[yellow]Loaded {len(reference_path)} reference poses from {path_file}[/yellow]")

    model = SerialChainModel.ur5e()
    planner = PathFollowingPlanner(
        model,
        GreedyWaypointSearch(tolerance=config.tolerance),
        rng=np.random.default_rng(config.rng_seed),
        max_ik_retries=config.max_ik_retries,
    )
    weights = config.to_weights()
    trajectory = planner.plan(reference_path, weights, config.to_params())

    if trajectory.is_empty:
        console.print("[red]No trajectory found to follow the reference path.[/red]")
        raise SystemExit(1)

    fk = StateGuardedFKEvaluator(model)
    ee_path = [fk(CandidateState.from_configuration(q)) for q in trajectory.configurations()]
    frechet = discrete_frechet_distance(ee_path, reference_path, partial(se3_distance, weights=weights))
    console.print(f"Discrete Fréchet distance to the reference path: {frechet:.4f}")

    if frechet > config.tolerance:
        console.print(f"[red]Trajectory strays beyond the tolerance of {config.tolerance}.[/red]")
        raise SystemExit(1)

    console.print(f"[green]Planned a {len(trajectory)}-point trajectory.[/green]")


if __name__ == "__main__":
    main()
