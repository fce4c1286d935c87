"""Centering and rescaling of mesh vertex positions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class NormalizeResult:
    """Positions after normalisation, with the figures used to get them.

    ``dimensions`` is the size of the bounding box of the returned positions;
    ``center_offset`` is the centre of the original bounding box, subtracted
    from every position when ``centered`` is true.
    """

    positions: list[Vector3]
    dimensions: Vector3
    center_offset: Vector3
    scale: float
    centered: bool
    rescaled: bool


def scale_coefficient(dimensions: Sequence[float], size: float) -> float:
    """Factor that makes the largest of ``dimensions`` equal to ``size``.

    Raises ValueError when every dimension is zero.
    """
    largest = max(dimensions)
    if largest == 0:
        raise ValueError("cannot rescale a mesh whose dimensions are all zero")
    return size / largest


def normalize_positions(
    positions: Iterable[Sequence[float]],
    center: bool,
    rescale: bool,
    size: float,
) -> NormalizeResult:
    """Move the bounding box of ``positions`` to the origin and fit it to ``size``.

    With ``center`` the centre of the bounding box is subtracted from every
    position; with ``rescale`` positions are scaled so that the largest
    dimension becomes ``size``. Raises ValueError on an empty input.
    """
    points: list[Vector3] = [(float(p[0]), float(p[1]), float(p[2])) for p in positions]
    if not points:
        raise ValueError("no positions to normalize")

    vmin = tuple(min(p[axis] for p in points) for axis in range(3))
    vmax = tuple(max(p[axis] for p in points) for axis in range(3))
    dimensions = tuple(hi - lo for lo, hi in zip(vmin, vmax))
    offset = tuple((lo + hi) / 2 for lo, hi in zip(vmin, vmax))

    if center:
        points = [
            (x - offset[0], y - offset[1], z - offset[2]) for x, y, z in points
        ]

    coefficient = 1.0
    if rescale:
        coefficient = scale_coefficient(dimensions, size)
        dimensions = tuple(d * coefficient for d in dimensions)
        points = [(x * coefficient, y * coefficient, z * coefficient) for x, y, z in points]

    return NormalizeResult(
        positions=points,
        dimensions=dimensions,  # type: ignore[arg-type]
        center_offset=offset,  # type: ignore[arg-type]
        scale=coefficient,
        centered=center,
        rescaled=rescale,
    )