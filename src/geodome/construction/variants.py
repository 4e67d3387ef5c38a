"""Dome variants and their per-variant rim policies.

Each variant supplies the same capabilities through a :class:`DomeBase`:
base vertices and faces, the rim height that keeps the base planar,
the hemisphere threshold, which faces touch the rim, and a
:class:`RimExclusion` policy thinning the bottom subdivision strips of
those faces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

import numpy as np

from geodome._constants import MAX_FREQUENCY, MIN_FREQUENCY
from geodome.errors import InvalidVariantError
from geodome.model.geometry import BaseFace, Triangle


class DomeVariant(StrEnum):
    """Base-shape variants a dome can be generated from.

    Attributes:
        ICOSAHEDRON: The golden-ratio icosahedron cut at the equator.
        PENTAGON_RING_FLAT_RIM: Apex, a ring of five, and a lowered
            rim ring of five, leaving the floor open.
        PENTAGON_RING_CLOSED_CAP: As the flat rim, with a nadir vertex
            and five floor faces closing the base.
    """

    ICOSAHEDRON = "icosahedron"
    PENTAGON_RING_FLAT_RIM = "pentagon_ring_flat_rim"
    PENTAGON_RING_CLOSED_CAP = "pentagon_ring_closed_cap"


def coerce_variant(variant: DomeVariant | str) -> DomeVariant:
    """Return *variant* as a :class:`DomeVariant`.

    Raises:
        InvalidVariantError: If the name is not a known variant.
    """
    try:
        return DomeVariant(variant)
    except ValueError:
        valid = ", ".join(v.value for v in DomeVariant)
        raise InvalidVariantError(
            f"variant must be one of {valid}, got {variant!r}"
        ) from None


class RimExclusion(Protocol):
    """Decides whether a triangle of a rim face is left out of the dome."""

    def excludes(self, triangle: Triangle, frequency: int, radius: float) -> bool:
        ...


_ALL_FREQUENCIES = frozenset(range(MIN_FREQUENCY, MAX_FREQUENCY + 1))


@dataclass(frozen=True)
class NoExclusion:
    """Keeps every triangle."""

    def excludes(self, triangle: Triangle, frequency: int, radius: float) -> bool:
        return False


@dataclass(frozen=True)
class ParityExclusion:
    """Drops alternate upright triangles along the rim.

    Within the bottom *rows* strips of a rim face, every upright
    triangle with an odd column index is dropped.  Inverted triangles
    are kept.

    Attributes:
        frequencies: Frequencies the rule applies at.
        rows: Number of strips, counted from the rim edge, it covers.
    """

    frequencies: frozenset[int] = frozenset({2, 4, 6})
    rows: int = 2

    def excludes(self, triangle: Triangle, frequency: int, radius: float) -> bool:
        if frequency not in self.frequencies or triangle.row >= self.rows:
            return False
        return not triangle.inverted and triangle.column % 2 == 1


@dataclass(frozen=True)
class DistanceExclusion:
    """Drops rim triangles lying far from the dome's vertical axis.

    Within the bottom *rows* strips of a rim face, a triangle is
    dropped when its centroid's horizontal distance from the y axis
    exceeds ``fraction * radius``.

    Attributes:
        frequencies: Frequencies the rule applies at.
        rows: Number of strips, counted from the rim edge, it covers.
        fraction: Distance threshold as a fraction of the radius.
    """

    frequencies: frozenset[int] = _ALL_FREQUENCIES
    rows: int = 2
    fraction: float = 0.9

    def excludes(self, triangle: Triangle, frequency: int, radius: float) -> bool:
        if frequency not in self.frequencies or triangle.row >= self.rows:
            return False
        cx, _, cz = triangle.centroid
        return float(np.hypot(cx, cz)) > self.fraction * radius


@dataclass(frozen=True)
class DomeBase:
    """The un-subdivided skeleton of one variant at one radius.

    Attributes:
        variant: Which variant this is.
        radius: Sphere radius.
        vertices: Base vertex positions, shape ``(n, 3)``.
        faces: Base faces as index triples into *vertices*.
        rim_height: Height of the planar rim, or ``None`` when every
            vertex is projected onto the sphere.
        threshold: Minimum centroid height of a retained triangle.
        rim_faces: Indices of faces whose ``v1 -> v2`` edge lies on
            the rim, so that subdivision row 0 runs along it.
        exclusion: Policy applied to triangles of rim faces.
    """

    variant: DomeVariant
    radius: float
    vertices: np.ndarray
    faces: tuple[BaseFace, ...]
    rim_height: float | None = None
    threshold: float = 0.0
    rim_faces: frozenset[int] = frozenset()
    exclusion: RimExclusion = field(default_factory=NoExclusion)

    def corners(self, face_index: int) -> np.ndarray:
        """Return the three corner positions of a face, shape ``(3, 3)``."""
        return self.vertices[list(self.faces[face_index])]

    def is_excluded(
        self, face_index: int, triangle: Triangle, frequency: int,
    ) -> bool:
        """Whether the rim policy drops *triangle* from face *face_index*."""
        if face_index not in self.rim_faces:
            return False
        return self.exclusion.excludes(triangle, frequency, self.radius)
