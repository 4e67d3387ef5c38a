from __future__ import annotations

from dataclasses import dataclass

import numpy as np

#: A point or direction in 3D space.
Vec3 = tuple[float, float, float]

#: Quantised coordinates used as a vertex's deduplication identity.
VertexKey = tuple[int, int, int]

#: Three indices into a base vertex array.
BaseFace = tuple[int, int, int]


@dataclass(frozen=True, eq=False)
class Vertex:
    """A mesh vertex.

    Vertices compare and hash by identity: two vertices are the same
    vertex only if they are the same object.  The canonicaliser hands
    out one object per distinct position, so shared edges between
    neighbouring faces share vertex objects.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical ("up") coordinate.
        z: Horizontal coordinate.
        is_base_perimeter: ``True`` for vertices on the planar rim that
            were never projected onto the sphere.
    """

    x: float
    y: float
    z: float
    is_base_perimeter: bool = False

    @property
    def position(self) -> Vec3:
        """The ``(x, y, z)`` coordinates as a tuple."""
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Triangle:
    """A triangle produced by subdividing one base face.

    Attributes:
        a: First vertex.
        b: Second vertex.
        c: Third vertex.
        row: Subdivision strip the triangle sits in (0 at the face's
            ``v1 -> v2`` edge).
        column: Position along the strip.
        inverted: ``True`` for the downward-pointing triangle of a
            grid quad.
    """

    a: Vertex
    b: Vertex
    c: Vertex
    row: int = 0
    column: int = 0
    inverted: bool = False

    @property
    def vertices(self) -> tuple[Vertex, Vertex, Vertex]:
        return (self.a, self.b, self.c)

    @property
    def centroid(self) -> Vec3:
        """Mean position of the three vertices."""
        return (
            (self.a.x + self.b.x + self.c.x) / 3.0,
            (self.a.y + self.b.y + self.c.y) / 3.0,
            (self.a.z + self.b.z + self.c.z) / 3.0,
        )


@dataclass(frozen=True)
class ColouredTriangle:
    """A retained triangle paired with its palette index."""

    triangle: Triangle
    colour_index: int


@dataclass(frozen=True)
class Mesh:
    """A generated dome, ready for a renderer.

    All arrays are read-only.

    Attributes:
        vertices: Unique vertex positions, shape ``(n, 3)``, in the
            order they were first used by a retained triangle.
        is_base_perimeter: Rim flag per vertex, shape ``(n,)``.
        faces: Vertex indices per triangle, shape ``(m, 3)``.
        face_colour_indices: Palette index per triangle, shape ``(m,)``.
        edges: Wireframe segments, shape ``(3 * m, 2)``; three per
            triangle, in face order.
        palette: The normalised palette the indices refer to.
        radius: Radius the dome was generated at.
        variant: Name of the base-shape variant.
    """

    vertices: np.ndarray
    is_base_perimeter: np.ndarray
    faces: np.ndarray
    face_colour_indices: np.ndarray
    edges: np.ndarray
    palette: tuple[tuple[float, float, float], ...]
    radius: float
    variant: str

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    @property
    def face_colours(self) -> list[tuple[float, float, float]]:
        """Normalised RGB colour of each face."""
        return [self.palette[int(i)] for i in self.face_colour_indices]

    def face_centroids(self) -> np.ndarray:
        """Return the centroid of each face, shape ``(m, 3)``."""
        if len(self.faces) == 0:
            return np.empty((0, 3))
        return self.vertices[self.faces].mean(axis=1)
