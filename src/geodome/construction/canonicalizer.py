"""Vertex canonicalisation: one shared vertex object per distinct position."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from geodome._constants import DEGENERATE_LENGTH, KEY_PRECISION, RIM_TOLERANCE
from geodome.errors import DegenerateVertexError
from geodome.model.geometry import Vec3, Vertex, VertexKey


def vertex_key(position: Sequence[float]) -> VertexKey:
    """Quantise a position to its deduplication key.

    Each coordinate is scaled by :data:`KEY_PRECISION` and rounded to
    the nearest integer, so positions agreeing to three decimal places
    share a key.
    """
    x, y, z = position
    return (
        int(round(x * KEY_PRECISION)),
        int(round(y * KEY_PRECISION)),
        int(round(z * KEY_PRECISION)),
    )


class VertexCanonicalizer:
    """Maps raw interpolated points to shared :class:`Vertex` objects.

    Points on the rim plane are kept planar and flagged as base
    perimeter; every other point is projected onto the sphere of the
    given radius.  The lookup uses the key of the *resulting*
    position, since different raw points can project to the same
    place.

    One instance belongs to one generation pass and is discarded with
    it.

    Args:
        radius: Sphere radius points are projected onto.
        rim_height: Height of the planar rim, or ``None`` if every
            point is projected.
    """

    def __init__(self, radius: float, rim_height: float | None = None) -> None:
        self.radius = radius
        self.rim_height = rim_height
        self._table: dict[VertexKey, Vertex] = {}

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def is_on_rim(self, point: Sequence[float]) -> bool:
        """Whether *point* lies on the planar rim."""
        if self.rim_height is None:
            return False
        return abs(point[1] - self.rim_height) <= RIM_TOLERANCE * self.radius

    def place(self, point: Sequence[float]) -> tuple[Vec3, bool]:
        """Return the final position of *point* and its rim flag.

        Raises:
            DegenerateVertexError: If a point off the rim is too close
                to the origin to be projected.
        """
        if self.is_on_rim(point):
            return (float(point[0]), float(self.rim_height), float(point[2])), True

        p = np.asarray(point, dtype=float)
        length = float(np.linalg.norm(p))
        if length < DEGENERATE_LENGTH * self.radius:
            raise DegenerateVertexError(
                f"cannot project point {tuple(p)} onto the sphere: "
                f"it lies at the origin"
            )
        projected = p / length * self.radius
        return (float(projected[0]), float(projected[1]), float(projected[2])), False

    def canonical(self, point: Sequence[float]) -> Vertex:
        """Return the shared vertex for *point*, creating it if needed."""
        position, on_rim = self.place(point)
        key = vertex_key(position)
        existing = self._table.get(key)
        if existing is not None:
            return existing
        vertex = Vertex(*position, is_base_perimeter=on_rim)
        self._table[key] = vertex
        return vertex
