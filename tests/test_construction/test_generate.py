"""Tests for the generate() pipeline: validation, geometry, and colouring."""

import logging

import numpy as np
import pytest

from geodome._constants import MIN_RADIUS, RIM_DROP_FRACTION
from geodome.construction.base_polyhedron import build_base
from geodome.construction.canonicalizer import VertexCanonicalizer
from geodome.construction.generate import check_radius, dome_triangles, generate
from geodome.construction.subdivision import subdivide_face
from geodome.construction.variants import DomeVariant
from geodome.errors import (
    InsufficientPaletteError,
    InvalidFrequencyError,
    InvalidRadiusError,
    InvalidVariantError,
)

ALL_VARIANTS = list(DomeVariant)
PALETTE = ["red", "blue"]


class TestCheckRadius:
    def test_float(self):
        assert check_radius(2.5) == 2.5

    def test_int_converted(self):
        assert isinstance(check_radius(3), float)

    @pytest.mark.parametrize("radius", [0.0, -1.0, float("inf"), float("nan")])
    def test_invalid_value(self, radius):
        with pytest.raises(InvalidRadiusError):
            check_radius(radius)

    @pytest.mark.parametrize("radius", ["ten", None, True])
    def test_invalid_type(self, radius):
        with pytest.raises(InvalidRadiusError, match="number"):
            check_radius(radius)

    def test_message(self):
        with pytest.raises(InvalidRadiusError, match="radius must be positive, got -1.0"):
            check_radius(-1.0)

    @pytest.mark.parametrize("radius", [0.05, 0.001])
    def test_below_minimum(self, radius):
        with pytest.raises(InvalidRadiusError, match="at least"):
            check_radius(radius)

    def test_minimum_accepted(self):
        assert check_radius(MIN_RADIUS) == MIN_RADIUS

    @pytest.mark.parametrize("radius", [MIN_RADIUS, 1.0, 10.0])
    def test_smallest_dome_keeps_every_vertex(self, radius):
        """Key rounding must not merge distinct vertices at any accepted size."""
        mesh = generate(radius, 6, DomeVariant.ICOSAHEDRON, PALETTE)
        assert mesh.n_vertices == 205
        assert mesh.n_faces == 372
        assert all(len(set(face)) == 3 for face in mesh.faces.tolist())


class TestGenerateValidation:
    def test_single_colour_palette(self):
        with pytest.raises(InsufficientPaletteError):
            generate(10.0, 2, DomeVariant.ICOSAHEDRON, ["red"])

    def test_string_palette(self):
        with pytest.raises(TypeError, match="string"):
            generate(10.0, 2, DomeVariant.ICOSAHEDRON, "rb")

    def test_bad_frequency(self):
        with pytest.raises(InvalidFrequencyError):
            generate(10.0, 7, DomeVariant.ICOSAHEDRON, PALETTE)

    def test_bad_variant(self):
        with pytest.raises(InvalidVariantError):
            generate(10.0, 2, "geodesic", PALETTE)

    def test_radius_checked_first(self):
        with pytest.raises(InvalidRadiusError):
            generate(-1.0, 99, "geodesic", ["red"])

    def test_frequency_checked_before_variant(self):
        with pytest.raises(InvalidFrequencyError):
            generate(1.0, 99, "geodesic", ["red"])

    def test_variant_checked_before_palette(self):
        with pytest.raises(InvalidVariantError):
            generate(1.0, 2, "geodesic", ["red"])


class TestFlatRimScenario:
    """Radius 10, frequency 2, open pentagon ring, red and blue."""

    def test_triangle_count(self, flat_rim_mesh):
        assert flat_rim_mesh.n_faces == 55

    def test_vertex_count(self, flat_rim_mesh):
        assert flat_rim_mesh.n_vertices == 36

    def test_centroids_above_rim(self, flat_rim_mesh):
        assert np.all(flat_rim_mesh.face_centroids()[:, 1] >= -2.0 - 1e-8)

    def test_rim_vertices(self, flat_rim_mesh):
        rim = flat_rim_mesh.vertices[flat_rim_mesh.is_base_perimeter]
        assert len(rim) == 10
        assert np.all(rim[:, 1] == -2.0)

    def test_alternating_colours(self, flat_rim_mesh):
        expected = np.arange(55) % 2
        np.testing.assert_array_equal(flat_rim_mesh.face_colour_indices, expected)

    def test_edges(self, flat_rim_mesh):
        assert flat_rim_mesh.edges.shape == (165, 2)


class TestTriangleCounts:
    @pytest.mark.parametrize(
        "frequency, expected",
        [(2, 55), (3, 135), (4, 225), (5, 375), (6, 515)],
    )
    def test_flat_rim(self, frequency, expected):
        """Fifteen faces of f**2 triangles, less the parity drops at even f."""
        mesh = generate(10.0, frequency, DomeVariant.PENTAGON_RING_FLAT_RIM, PALETTE)
        assert mesh.n_faces == expected

    def test_closed_cap_frequency_two(self):
        """The top triangle of each band rim face lies beyond 0.9 r."""
        mesh = generate(10.0, 2, DomeVariant.PENTAGON_RING_CLOSED_CAP, PALETTE)
        assert mesh.n_faces == 75
        assert mesh.n_vertices == 42

    @pytest.mark.parametrize(
        "frequency, expected",
        [(2, 75), (3, 145), (4, 270), (5, 435), (6, 640)],
    )
    def test_closed_cap(self, frequency, expected):
        mesh = generate(10.0, frequency, DomeVariant.PENTAGON_RING_CLOSED_CAP, PALETTE)
        assert mesh.n_faces == expected

    def test_closed_cap_frequency_six(self):
        mesh = generate(10.0, 6, DomeVariant.PENTAGON_RING_CLOSED_CAP, PALETTE)
        assert mesh.n_faces == 640
        assert mesh.n_vertices == 362

    def test_closed_cap_frequency_six_drops(self):
        """80 of 720 triangles go, all in the two rim rows beyond 0.9 r."""
        base = build_base(DomeVariant.PENTAGON_RING_CLOSED_CAP, 10.0)
        canon = VertexCanonicalizer(10.0, base.rim_height)
        dropped = []
        for face_index in range(len(base.faces)):
            for tri in subdivide_face(base.corners(face_index), 6, canon):
                if base.is_excluded(face_index, tri, 6):
                    dropped.append((face_index, tri))
        assert len(dropped) == 80
        assert {face for face, _ in dropped} <= base.rim_faces
        for _, tri in dropped:
            assert tri.row < 2
            cx, _, cz = tri.centroid
            assert np.hypot(cx, cz) > 9.0

    def test_closed_cap_floor(self):
        mesh = generate(10.0, 2, DomeVariant.PENTAGON_RING_CLOSED_CAP, PALETTE)
        rim = mesh.vertices[mesh.is_base_perimeter]
        assert len(rim) == 16
        assert any(np.array_equal(v, [0.0, -2.0, 0.0]) for v in rim)

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_grows_with_frequency(self, variant):
        counts = [generate(1.0, f, variant, PALETTE).n_faces for f in range(2, 7)]
        assert counts == sorted(counts)
        assert len(set(counts)) == 5


class TestMeshInvariants:
    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    @pytest.mark.parametrize("frequency", [2, 3, 6])
    def test_vertices_on_sphere_or_rim(self, variant, frequency):
        radius = 7.0
        mesh = generate(radius, frequency, variant, PALETTE)
        on_sphere = mesh.vertices[~mesh.is_base_perimeter]
        np.testing.assert_allclose(
            np.linalg.norm(on_sphere, axis=1), radius, rtol=1e-9,
        )
        rim_height = -RIM_DROP_FRACTION * radius
        assert np.all(mesh.vertices[mesh.is_base_perimeter, 1] == rim_height)

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    @pytest.mark.parametrize("frequency", [2, 5])
    def test_centroids_in_hemisphere(self, variant, frequency):
        radius = 3.0
        mesh = generate(radius, frequency, variant, PALETTE)
        threshold = build_base(variant, radius).threshold
        assert np.all(mesh.face_centroids()[:, 1] >= threshold - 1e-8)

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_indices_valid(self, variant):
        mesh = generate(2.0, 4, variant, ["red", "blue", "lime"])
        assert mesh.faces.min() >= 0
        assert mesh.faces.max() < mesh.n_vertices
        assert mesh.face_colour_indices.max() < len(mesh.palette)
        # every vertex is used by some face
        assert len(np.unique(mesh.faces)) == mesh.n_vertices

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_vertices_shared(self, variant):
        mesh = generate(2.0, 3, variant, PALETTE)
        assert mesh.n_vertices < 3 * mesh.n_faces

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_no_duplicate_positions(self, variant):
        mesh = generate(2.0, 6, variant, PALETTE)
        keys = np.round(mesh.vertices * 1000.0).astype(np.int64)
        assert len(np.unique(keys, axis=0)) == mesh.n_vertices

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_no_degenerate_faces(self, variant):
        mesh = generate(1.0, 4, variant, PALETTE)
        faces = mesh.faces
        assert np.all(faces[:, 0] != faces[:, 1])
        assert np.all(faces[:, 1] != faces[:, 2])
        assert np.all(faces[:, 0] != faces[:, 2])

    def test_icosahedron_has_no_rim(self, icosahedron_mesh):
        assert not icosahedron_mesh.is_base_perimeter.any()
        assert icosahedron_mesh.variant == "icosahedron"

    def test_edges_follow_faces(self, icosahedron_mesh):
        edges = icosahedron_mesh.edges.reshape(-1, 3, 2)
        np.testing.assert_array_equal(edges[:, :, 0], icosahedron_mesh.faces)
        np.testing.assert_array_equal(
            edges[:, :, 1], np.roll(icosahedron_mesh.faces, -1, axis=1),
        )


class TestColouring:
    @pytest.mark.parametrize("n_colours", [2, 3, 7])
    def test_round_robin(self, n_colours):
        palette = ["red", "blue", "lime", "yellow", "cyan", "magenta", "black"]
        mesh = generate(5.0, 3, "icosahedron", palette[:n_colours])
        expected = np.arange(mesh.n_faces) % n_colours
        np.testing.assert_array_equal(mesh.face_colour_indices, expected)

    def test_palette_normalised(self):
        mesh = generate(5.0, 2, "icosahedron", ["red", (0.0, 0.5, 0.0)])
        assert mesh.palette == ((1.0, 0.0, 0.0), (0.0, 0.5, 0.0))

    def test_set_palette_deterministic(self):
        a = generate(5.0, 2, "icosahedron", {"red", "blue", "lime"})
        b = generate(5.0, 2, "icosahedron", ["blue", "lime", "red"])
        assert a.palette == b.palette


class TestDeterminism:
    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_repeat_calls_identical(self, variant):
        first = generate(10.0, 4, variant, PALETTE)
        second = generate(10.0, 4, variant, PALETTE)
        np.testing.assert_array_equal(first.vertices, second.vertices)
        np.testing.assert_array_equal(first.faces, second.faces)
        np.testing.assert_array_equal(
            first.face_colour_indices, second.face_colour_indices,
        )

    def test_calls_independent(self):
        """A previous call at another radius does not leak vertices."""
        generate(3.0, 5, "icosahedron", PALETTE)
        mesh = generate(8.0, 2, "icosahedron", PALETTE)
        np.testing.assert_allclose(np.linalg.norm(mesh.vertices, axis=1), 8.0)


class TestDomeTriangles:
    def test_matches_generate(self):
        base = build_base(DomeVariant.PENTAGON_RING_FLAT_RIM, 10.0)
        canon = VertexCanonicalizer(10.0, base.rim_height)
        triangles = list(dome_triangles(base, 2, canon))
        assert len(triangles) == 55
        assert len(canon) == 36

    def test_lower_faces_skipped_without_subdividing(self):
        """Icosahedron faces wholly below the equator add no vertices."""
        base = build_base(DomeVariant.ICOSAHEDRON, 1.0)
        canon = VertexCanonicalizer(1.0)
        list(dome_triangles(base, 2, canon))
        assert all(v.y > -0.9 for v in canon._table.values())

    def test_rim_rows_thinned(self):
        base = build_base(DomeVariant.PENTAGON_RING_FLAT_RIM, 10.0)
        canon = VertexCanonicalizer(10.0, base.rim_height)
        for tri in dome_triangles(base, 4, canon):
            if tri.row < 2 and not tri.inverted and tri.a.is_base_perimeter \
                    and tri.b.is_base_perimeter:
                assert tri.column % 2 == 0


class TestLogging:
    def test_debug_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geodome.construction.generate"):
            generate(10.0, 2, DomeVariant.PENTAGON_RING_FLAT_RIM, PALETTE)
        assert "pentagon_ring_flat_rim" in caplog.text
        assert "55 faces" in caplog.text
