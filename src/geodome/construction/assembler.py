"""Packing coloured triangles into index buffers."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from geodome.model.geometry import ColouredTriangle, Mesh, Vertex


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def assemble_mesh(
    coloured: Iterable[ColouredTriangle],
    palette: tuple[tuple[float, float, float], ...],
    *,
    radius: float,
    variant: str,
) -> Mesh:
    """Build a :class:`Mesh` from coloured triangles.

    Each distinct vertex object gets an index in the order it is first
    used.  Vertices are already shared by the canonicaliser, so no
    positional deduplication happens here.

    Args:
        coloured: Retained triangles in generation order.
        palette: Normalised palette the colour indices refer to.
        radius: Radius the dome was generated at.
        variant: Name of the base-shape variant.

    Returns:
        The assembled mesh.
    """
    index_of: dict[Vertex, int] = {}
    order: list[Vertex] = []
    faces: list[tuple[int, int, int]] = []
    colours: list[int] = []

    for item in coloured:
        face = []
        for vertex in item.triangle.vertices:
            idx = index_of.get(vertex)
            if idx is None:
                idx = len(order)
                index_of[vertex] = idx
                order.append(vertex)
            face.append(idx)
        faces.append((face[0], face[1], face[2]))
        colours.append(item.colour_index)

    vertices = np.array(
        [v.position for v in order], dtype=float,
    ).reshape(-1, 3)
    rim = np.array([v.is_base_perimeter for v in order], dtype=bool)
    face_array = np.array(faces, dtype=np.int64).reshape(-1, 3)
    # Three edges per face: (a, b), (b, c), (c, a).
    edges = np.stack(
        [face_array, np.roll(face_array, -1, axis=1)], axis=2,
    ).reshape(-1, 2)

    return Mesh(
        vertices=_read_only(vertices),
        is_base_perimeter=_read_only(rim),
        faces=_read_only(face_array),
        face_colour_indices=_read_only(np.array(colours, dtype=np.int64)),
        edges=_read_only(edges),
        palette=palette,
        radius=radius,
        variant=variant,
    )
