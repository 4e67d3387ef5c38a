"""Tests for Vertex, Triangle, and Mesh."""

import dataclasses

import numpy as np
import pytest

from geodome.model.geometry import ColouredTriangle, Mesh, Triangle, Vertex


def _empty_mesh():
    return Mesh(
        vertices=np.empty((0, 3)),
        is_base_perimeter=np.empty(0, dtype=bool),
        faces=np.empty((0, 3), dtype=int),
        face_colour_indices=np.empty(0, dtype=int),
        edges=np.empty((0, 2), dtype=int),
        palette=((1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        radius=1.0,
        variant="icosahedron",
    )


class TestVertex:
    def test_position(self):
        assert Vertex(1.0, 2.0, 3.0).position == (1.0, 2.0, 3.0)

    def test_default_not_perimeter(self):
        assert Vertex(0.0, 1.0, 0.0).is_base_perimeter is False

    def test_identity_equality(self):
        """Equal coordinates do not make two vertices the same vertex."""
        a = Vertex(1.0, 0.0, 0.0)
        b = Vertex(1.0, 0.0, 0.0)
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_immutable(self):
        v = Vertex(1.0, 0.0, 0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 2.0  # type: ignore[misc]


class TestTriangle:
    def test_vertices_order(self):
        a, b, c = Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(0, 1, 0)
        assert Triangle(a, b, c).vertices == (a, b, c)

    def test_centroid(self):
        tri = Triangle(Vertex(0, 0, 0), Vertex(3, 0, 0), Vertex(0, 3, 3))
        assert tri.centroid == pytest.approx((1.0, 1.0, 1.0))

    def test_grid_slot_defaults(self):
        tri = Triangle(Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(0, 1, 0))
        assert (tri.row, tri.column, tri.inverted) == (0, 0, False)

    def test_coloured_triangle(self):
        tri = Triangle(Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(0, 1, 0))
        coloured = ColouredTriangle(tri, 3)
        assert coloured.triangle is tri
        assert coloured.colour_index == 3


class TestMesh:
    def test_counts(self, flat_rim_mesh):
        assert flat_rim_mesh.n_vertices == len(flat_rim_mesh.vertices)
        assert flat_rim_mesh.n_faces == len(flat_rim_mesh.faces)

    def test_face_colours(self, flat_rim_mesh):
        colours = flat_rim_mesh.face_colours
        assert len(colours) == flat_rim_mesh.n_faces
        assert colours[0] == (1.0, 0.0, 0.0)
        assert colours[1] == (0.0, 0.0, 1.0)

    def test_face_centroids_shape(self, flat_rim_mesh):
        centroids = flat_rim_mesh.face_centroids()
        assert centroids.shape == (flat_rim_mesh.n_faces, 3)

    def test_face_centroids_values(self, flat_rim_mesh):
        centroids = flat_rim_mesh.face_centroids()
        expected = flat_rim_mesh.vertices[flat_rim_mesh.faces[0]].mean(axis=0)
        np.testing.assert_allclose(centroids[0], expected)

    def test_empty_mesh(self):
        mesh = _empty_mesh()
        assert mesh.n_vertices == 0
        assert mesh.n_faces == 0
        assert mesh.face_colours == []
        assert mesh.face_centroids().shape == (0, 3)
