"""Define functions to import and export reference paths of 3D poses.

A pose-path file holds one pose per line as 12 whitespace-separated numbers: the translation
    (x, y, z) followed by the nine entries of the rotation matrix in row-major order.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from frechet_planning.spatial import DEFAULT_FRAME, RECORD_LENGTH, Pose3D

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path


class MalformedRecordError(ValueError):
    """An error raised when a pose record doesn't contain exactly 12 numeric values."""


def _parse_value(token: str | float, row_number: int) -> float:
    """Parse a single numeric field of a pose record."""
    try:
        value = float(token)
    except (TypeError, ValueError) as error:
        raise MalformedRecordError(f"Row {row_number}: non-numeric value {token!r}.") from error

    if not math.isfinite(value):
        raise MalformedRecordError(f"Row {row_number}: non-finite value {token!r}.")
    return value


def decode_path(
    records: Iterable[Sequence[str | float]],
    ref_frame: str = DEFAULT_FRAME,
    first_row_number: int = 0,
) -> list[Pose3D]:
    """Decode a sequence of flat 12-value records into a reference path of poses.

    No orthonormality check or normalization is applied to the decoded rotation matrices.

    :param records: Rows of 12 numeric fields (numbers or strings parseable as numbers)
    :param ref_frame: Reference frame assigned to every decoded pose
    :param first_row_number: Number used to identify the first row in error messages
    :return: List of decoded poses, in the order of the records
    :raises MalformedRecordError: If any row has the wrong field count or a non-numeric field
    """
    path: list[Pose3D] = []
    for row_number, row in enumerate(records, start=first_row_number):
        if len(row) != RECORD_LENGTH:
            raise MalformedRecordError(
                f"Row {row_number}: expected {RECORD_LENGTH} values but found {len(row)}.",
            )
        values = [_parse_value(token, row_number) for token in row]
        path.append(Pose3D.from_record(values, ref_frame))

    return path


def encode_path(path: Iterable[Pose3D]) -> list[list[float]]:
    """Encode a sequence of poses into flat 12-value records."""
    return [pose.to_record() for pose in path]


def parse_path_text(text: str, ref_frame: str = DEFAULT_FRAME) -> list[Pose3D]:
    """Parse the text contents of a pose-path file, skipping blank lines.

    :param text: Whitespace-separated numeric rows, one pose per line
    :param ref_frame: Reference frame assigned to every parsed pose
    :return: List of parsed poses
    :raises MalformedRecordError: If any line is malformed (reported using 1-based line numbers)
    """
    path: list[Pose3D] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if tokens:
            path.extend(decode_path([tokens], ref_frame, first_row_number=line_number))
    return path


def load_pose_path(filepath: Path, ref_frame: str = DEFAULT_FRAME) -> list[Pose3D]:
    """Load a non-empty reference path from a pose-path file.

    :param filepath: Path to the file to be imported
    :param ref_frame: Reference frame assigned to every loaded pose
    :return: List of loaded poses
    :raises FileNotFoundError: If the file doesn't exist
    :raises MalformedRecordError: If the file is malformed or contains no poses
    """
    if not filepath.exists():
        raise FileNotFoundError(f"Cannot load poses from nonexistent file: {filepath}")

    path = parse_path_text(filepath.read_text(), ref_frame)
    if not path:
        raise MalformedRecordError(f"Pose-path file contains no poses: {filepath}")
    return path


def export_pose_path(path: Sequence[Pose3D], filepath: Path) -> None:
    """Write the given poses to a pose-path file, one 12-value row per pose."""
    lines = [" ".join(repr(value) for value in record) for record in encode_path(path)]
    filepath.write_text("\n".join(lines) + "\n")
