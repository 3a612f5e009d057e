"""Kinematics of a three-rope continuum section and text logs of its paths."""

from __future__ import annotations

import argparse
import logging
import math
import os
from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

ROPE_COUNT = 3
SECTION_LENGTH = 10.0
ROPE_OFFSET = 3.0
_CIRCLE_ROPE_HEIGHT = 5.0
_PLOT_HEIGHT = 1.0


def bend_angles(x: float, y: float, z: float) -> tuple[float, float]:
    """Return (beta, phi): bending angle and rotation angle in [0, 2*pi)."""
    beta = 2.0 * math.atan2(math.hypot(x, y), z)
    phi = math.atan2(y, x)
    if phi < 0:
        phi += 2.0 * math.pi
    return beta, phi


def rope_length_changes(
    length: float, radius: float, x: float, y: float, z: float
) -> tuple[float, float, float]:
    """Return the length change of each of the three ropes for a tip position.

    Raises ValueError when the point lies on the straight axis, where the
    section has no finite bending radius.
    """
    beta, phi = bend_angles(x, y, z)
    if beta == 0.0:
        raise ValueError("position on the section axis has no bending radius")
    bending_radius = length / beta
    changes = (
        length
        - (bending_radius - radius * math.cos(phi - 2.0 * math.pi * i / ROPE_COUNT))
        * beta
        for i in range(ROPE_COUNT)
    )
    return tuple(changes)  # type: ignore[return-value]


def append_row(path: str | os.PathLike[str], values: Iterable[float]) -> None:
    """Append one line of space-separated values to a text file."""
    line = "".join(f"{value:g} " for value in values)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    logger.info("wrote %s", path)


def circle_points(
    radius: float, center: Sequence[float], num_points: int
) -> Iterator[tuple[float, float, float]]:
    """Yield evenly spaced points on a horizontal circle around ``center``."""
    cx, cy, cz = center[0], center[1], center[2]
    for i in range(num_points):
        theta = 2.0 * math.pi * i / num_points
        yield cx + radius * math.cos(theta), cy + radius * math.sin(theta), cz


def write_circle_rope_lengths(
    path: str | os.PathLike[str] = "delta_l.txt",
    radius: float = 10.0,
    center: Sequence[float] = (0.0, 0.0, 5.0),
    num_points: int = 100,
) -> None:
    """Append the rope length changes for each point of a circle path."""
    for x, y, _ in circle_points(radius, center, num_points):
        append_row(
            path,
            rope_length_changes(SECTION_LENGTH, ROPE_OFFSET, x, y, _CIRCLE_ROPE_HEIGHT),
        )


def plot_circle(
    radius: float,
    center: Sequence[float],
    track_path: str | os.PathLike[str] = "track.txt",
    angles_path: str | os.PathLike[str] = "beta_phi.txt",
) -> None:
    """Append a 100-point circle track and its bending angles to two files."""
    for x, y, _ in circle_points(radius, center, 100):
        append_row(track_path, (x, y, _PLOT_HEIGHT))
        append_row(angles_path, bend_angles(x, y, _PLOT_HEIGHT))


class PoseRecorder:
    """Records incoming stylus positions and their bending angles."""

    def __init__(
        self,
        track_path: str | os.PathLike[str] = "track.txt",
        angles_path: str | os.PathLike[str] = "beta_phi.txt",
    ) -> None:
        self.track_path = track_path
        self.angles_path = angles_path
        self.last_position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def on_pose(self, x: float, y: float, z: float) -> tuple[float, float]:
        """Log a position and its angles; return the angles."""
        self.last_position = (x, y, z)
        append_row(self.track_path, self.last_position)
        angles = bend_angles(x, y, z)
        append_row(self.angles_path, angles)
        return angles


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write a circle track and its bending angles."
    )
    parser.add_argument("--radius", type=float, default=5.0)
    parser.add_argument(
        "--center", type=float, nargs=3, default=[0.0, 0.0, 1.0], metavar=("X", "Y", "Z")
    )
    parser.add_argument("--track", default="track.txt")
    parser.add_argument("--angles", default="beta_phi.txt")
    args = parser.parse_args(argv)
    plot_circle(args.radius, args.center, args.track, args.angles)
    return 0