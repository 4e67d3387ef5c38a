"""Tests for variant coercion and the rim exclusion policies."""

import pytest

from geodome.construction.base_polyhedron import pentagon_ring_flat_rim
from geodome.construction.variants import (
    DistanceExclusion,
    DomeVariant,
    NoExclusion,
    ParityExclusion,
    coerce_variant,
)
from geodome.errors import InvalidVariantError
from geodome.model.geometry import Triangle, Vertex


def _triangle(row=0, column=0, inverted=False, x=0.0, z=0.0):
    """A triangle whose centroid sits at horizontal position (x, z)."""
    return Triangle(
        Vertex(x, 0.0, z), Vertex(x, 1.0, z), Vertex(x, 2.0, z),
        row=row, column=column, inverted=inverted,
    )


class TestCoerceVariant:
    def test_enum_passes_through(self):
        assert coerce_variant(DomeVariant.ICOSAHEDRON) is DomeVariant.ICOSAHEDRON

    @pytest.mark.parametrize("variant", list(DomeVariant))
    def test_string_values(self, variant):
        assert coerce_variant(variant.value) is variant

    def test_str_enum_compares_to_string(self):
        assert DomeVariant.PENTAGON_RING_FLAT_RIM == "pentagon_ring_flat_rim"

    def test_unknown_raises(self):
        with pytest.raises(InvalidVariantError, match="'cube'"):
            coerce_variant("cube")


class TestNoExclusion:
    def test_keeps_everything(self):
        policy = NoExclusion()
        assert not policy.excludes(_triangle(column=1), 2, 1.0)


class TestParityExclusion:
    @pytest.mark.parametrize("column", [1, 3, 5])
    def test_drops_odd_upright(self, column):
        assert ParityExclusion().excludes(_triangle(column=column), 6, 1.0)

    @pytest.mark.parametrize("column", [0, 2, 4])
    def test_keeps_even_upright(self, column):
        assert not ParityExclusion().excludes(_triangle(column=column), 6, 1.0)

    def test_keeps_inverted(self):
        tri = _triangle(column=1, inverted=True)
        assert not ParityExclusion().excludes(tri, 2, 1.0)

    def test_second_row_covered(self):
        assert ParityExclusion().excludes(_triangle(row=1, column=1), 4, 1.0)

    def test_third_row_not_covered(self):
        assert not ParityExclusion().excludes(_triangle(row=2, column=1), 4, 1.0)

    @pytest.mark.parametrize("frequency", [3, 5])
    def test_odd_frequency_untouched(self, frequency):
        assert not ParityExclusion().excludes(_triangle(column=1), frequency, 1.0)

    def test_custom_rows(self):
        policy = ParityExclusion(rows=3)
        assert policy.excludes(_triangle(row=2, column=1), 4, 1.0)


class TestDistanceExclusion:
    def test_drops_far_triangle(self):
        assert DistanceExclusion().excludes(_triangle(x=6.0, z=8.0), 3, 10.0)

    def test_keeps_near_triangle(self):
        assert not DistanceExclusion().excludes(_triangle(x=3.0, z=4.0), 3, 10.0)

    def test_threshold_is_exclusive(self):
        assert not DistanceExclusion().excludes(_triangle(x=9.0), 3, 10.0)

    def test_upper_rows_untouched(self):
        tri = _triangle(row=2, x=10.0)
        assert not DistanceExclusion().excludes(tri, 3, 10.0)

    @pytest.mark.parametrize("frequency", [2, 3, 4, 5, 6])
    def test_applies_at_every_frequency(self, frequency):
        assert DistanceExclusion().excludes(_triangle(x=10.0), frequency, 10.0)

    def test_custom_fraction(self):
        policy = DistanceExclusion(fraction=0.5)
        assert policy.excludes(_triangle(x=6.0), 3, 10.0)


class TestDomeBaseIsExcluded:
    def test_only_rim_faces(self):
        base = pentagon_ring_flat_rim(10.0)
        tri = _triangle(column=1)
        rim_face = min(base.rim_faces)
        assert base.is_excluded(rim_face, tri, 2)
        assert not base.is_excluded(0, tri, 2)
