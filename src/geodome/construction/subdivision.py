"""Class-I subdivision of a base face."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from geodome._constants import MAX_FREQUENCY, MIN_FREQUENCY
from geodome.construction.canonicalizer import VertexCanonicalizer
from geodome.errors import InvalidFrequencyError
from geodome.model.geometry import Triangle, Vertex


def check_frequency(frequency: int) -> int:
    """Return *frequency* if it is a supported subdivision order.

    Raises:
        InvalidFrequencyError: If *frequency* is not an integer in
            ``[MIN_FREQUENCY, MAX_FREQUENCY]``.
    """
    if isinstance(frequency, bool) or not isinstance(frequency, (int, np.integer)):
        raise InvalidFrequencyError(
            f"frequency must be an integer, got {frequency!r}"
        )
    if not MIN_FREQUENCY <= frequency <= MAX_FREQUENCY:
        raise InvalidFrequencyError(
            f"frequency must be between {MIN_FREQUENCY} and "
            f"{MAX_FREQUENCY}, got {frequency}"
        )
    return int(frequency)


def _grid_rows(
    corners: np.ndarray,
    frequency: int,
    canonicalizer: VertexCanonicalizer,
) -> list[list[Vertex]]:
    """Canonical vertices of the triangular grid, row by row.

    Row ``i`` holds ``frequency - i + 1`` points; row 0 runs from the
    first corner to the second and row ``frequency`` is the third
    corner alone.
    """
    rows: list[list[Vertex]] = []
    for i in range(frequency + 1):
        row: list[Vertex] = []
        v = i / frequency
        for j in range(frequency - i + 1):
            u = j / frequency
            s = 1.0 - u - v
            point = s * corners[0] + u * corners[1] + v * corners[2]
            row.append(canonicalizer.canonical(point))
        rows.append(row)
    return rows


def subdivide_face(
    corners: np.ndarray,
    frequency: int,
    canonicalizer: VertexCanonicalizer,
) -> Iterator[Triangle]:
    """Split one base face into ``frequency**2`` triangles.

    Grid points are placed with barycentric weights
    ``(1 - u - v, u, v)`` for ``u = j / frequency`` and
    ``v = i / frequency`` and passed through *canonicalizer*, so
    points on an edge shared with a neighbouring face come back as the
    same vertex objects.  Adjacent rows are joined into an upright
    triangle per column plus an inverted one between each pair of
    upright triangles.

    The grid is built on first iteration; the generator can be
    consumed once.

    Args:
        corners: Corner positions, shape ``(3, 3)``.
        frequency: Subdivision order.
        canonicalizer: The current pass's canonicaliser.

    Yields:
        Triangles in row order, then column order, each upright
        triangle followed by its inverted neighbour.
    """
    corners = np.asarray(corners, dtype=float)
    rows = _grid_rows(corners, frequency, canonicalizer)
    for i in range(frequency):
        current = rows[i]
        below = rows[i + 1]
        for j in range(len(current) - 1):
            yield Triangle(current[j], current[j + 1], below[j], row=i, column=j)
            if j < len(below) - 1:
                yield Triangle(
                    current[j + 1], below[j + 1], below[j],
                    row=i, column=j, inverted=True,
                )
