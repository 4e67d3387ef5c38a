"""Base polyhedra: the un-subdivided skeleton of each dome variant."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from geodome._constants import RIM_DROP_FRACTION
from geodome.construction.variants import (
    DistanceExclusion,
    DomeBase,
    DomeVariant,
    NoExclusion,
    ParityExclusion,
    coerce_variant,
)
from geodome.model.geometry import BaseFace

_GOLDEN_RATIO = (1.0 + np.sqrt(5.0)) / 2.0

_ICOSAHEDRON_FACES: tuple[BaseFace, ...] = (
    (0, 8, 4), (0, 4, 2), (0, 2, 5), (0, 5, 9), (0, 9, 8),
    (1, 8, 6), (1, 6, 3), (1, 3, 7), (1, 7, 9), (1, 9, 8),
    (2, 4, 10), (2, 10, 11), (2, 11, 5),
    (3, 6, 10), (3, 10, 11), (3, 11, 7),
    (4, 8, 6), (4, 6, 10),
    (5, 7, 9), (5, 11, 7),
)

# Vertex layout of the pentagon-ring bases.
_APEX = 0
_UPPER = 1
_LOWER = 6
_NADIR = 11
_RING = 5


def icosahedron(radius: float) -> DomeBase:
    """Build the golden-ratio icosahedron scaled to *radius*.

    The twelve vertices are the cyclic permutations of
    ``(±t, ±1, 0)`` with ``t`` the golden ratio, so four of them sit
    exactly on the ``y = 0`` equator.
    """
    t = _GOLDEN_RATIO
    raw = np.array([
        [t, 1.0, 0.0], [-t, 1.0, 0.0],
        [t, -1.0, 0.0], [-t, -1.0, 0.0],
        [1.0, 0.0, t], [1.0, 0.0, -t],
        [-1.0, 0.0, t], [-1.0, 0.0, -t],
        [0.0, t, 1.0], [0.0, t, -1.0],
        [0.0, -t, 1.0], [0.0, -t, -1.0],
    ])
    lengths = np.linalg.norm(raw, axis=1)
    vertices = raw / lengths[:, np.newaxis] * radius
    return DomeBase(
        variant=DomeVariant.ICOSAHEDRON,
        radius=radius,
        vertices=vertices,
        faces=_ICOSAHEDRON_FACES,
        rim_height=None,
        threshold=0.0,
        exclusion=NoExclusion(),
    )


def _pentagon_ring_vertices(radius: float, rim_height: float) -> np.ndarray:
    """Apex, upper ring, and lowered rim ring of a pentagon-ring base."""
    upper_y = radius / np.sqrt(5.0)
    upper_r = 2.0 * radius / np.sqrt(5.0)
    lower_r = np.sqrt(radius**2 - rim_height**2)

    upper_angles = np.radians(72.0 * np.arange(_RING))
    lower_angles = upper_angles + np.radians(36.0)

    apex = np.array([[0.0, radius, 0.0]])
    upper = np.column_stack([
        upper_r * np.cos(upper_angles),
        np.full(_RING, upper_y),
        upper_r * np.sin(upper_angles),
    ])
    lower = np.column_stack([
        lower_r * np.cos(lower_angles),
        np.full(_RING, rim_height),
        lower_r * np.sin(lower_angles),
    ])
    return np.vstack([apex, upper, lower])


def _pentagon_ring_faces() -> tuple[list[BaseFace], list[int]]:
    """Faces of the open pentagon-ring dome and the indices of its rim faces."""
    cap: list[BaseFace] = []
    band: list[BaseFace] = []
    rim: list[BaseFace] = []
    for k in range(_RING):
        nxt = (k + 1) % _RING
        cap.append((_APEX, _UPPER + k, _UPPER + nxt))
        band.append((_UPPER + k, _UPPER + nxt, _LOWER + k))
        # Rim edge first so subdivision row 0 runs along the rim.
        rim.append((_LOWER + k, _LOWER + nxt, _UPPER + nxt))
    faces = cap + band + rim
    rim_indices = list(range(len(cap) + len(band), len(faces)))
    return faces, rim_indices


def pentagon_ring_flat_rim(radius: float) -> DomeBase:
    """Build the open pentagon-ring dome base.

    The rim ring is placed at ``-RIM_DROP_FRACTION * radius`` so the
    dome reaches a little below the equator and stands on a flat,
    planar rim.
    """
    rim_height = -RIM_DROP_FRACTION * radius
    faces, rim_indices = _pentagon_ring_faces()
    return DomeBase(
        variant=DomeVariant.PENTAGON_RING_FLAT_RIM,
        radius=radius,
        vertices=_pentagon_ring_vertices(radius, rim_height),
        faces=tuple(faces),
        rim_height=rim_height,
        threshold=rim_height,
        rim_faces=frozenset(rim_indices),
        exclusion=ParityExclusion(),
    )


def pentagon_ring_closed_cap(radius: float) -> DomeBase:
    """Build the pentagon-ring dome base with a closed, flat floor.

    Adds a nadir vertex at the centre of the rim plane and five floor
    faces fanning out from it.  Floor faces list their rim edge first,
    like the rim band faces.
    """
    rim_height = -RIM_DROP_FRACTION * radius
    vertices = np.vstack([
        _pentagon_ring_vertices(radius, rim_height),
        [[0.0, rim_height, 0.0]],
    ])
    faces, rim_indices = _pentagon_ring_faces()
    for k in range(_RING):
        rim_indices.append(len(faces))
        faces.append((_LOWER + k, _LOWER + (k + 1) % _RING, _NADIR))
    return DomeBase(
        variant=DomeVariant.PENTAGON_RING_CLOSED_CAP,
        radius=radius,
        vertices=vertices,
        faces=tuple(faces),
        rim_height=rim_height,
        threshold=rim_height,
        rim_faces=frozenset(rim_indices),
        exclusion=DistanceExclusion(),
    )


_BUILDERS: dict[DomeVariant, Callable[[float], DomeBase]] = {
    DomeVariant.ICOSAHEDRON: icosahedron,
    DomeVariant.PENTAGON_RING_FLAT_RIM: pentagon_ring_flat_rim,
    DomeVariant.PENTAGON_RING_CLOSED_CAP: pentagon_ring_closed_cap,
}


def build_base(variant: DomeVariant | str, radius: float) -> DomeBase:
    """Build the base polyhedron for *variant* at *radius*.

    Args:
        variant: A :class:`DomeVariant` or its string value.
        radius: Sphere radius; assumed already validated.

    Raises:
        InvalidVariantError: If *variant* is not recognised.
    """
    return _BUILDERS[coerce_variant(variant)](radius)
