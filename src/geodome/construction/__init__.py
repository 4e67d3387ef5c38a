"""Mesh construction: base polyhedra, subdivision, filtering, and assembly."""

from geodome.construction.assembler import assemble_mesh
from geodome.construction.base_polyhedron import (
    build_base,
    icosahedron,
    pentagon_ring_closed_cap,
    pentagon_ring_flat_rim,
)
from geodome.construction.canonicalizer import VertexCanonicalizer, vertex_key
from geodome.construction.colouring import ColourCycler
from geodome.construction.defaults import (
    CHAKRA_COLOURS,
    DEFAULT_PALETTE,
)
from geodome.construction.generate import dome_triangles, generate
from geodome.construction.hemisphere import (
    face_in_hemisphere,
    triangle_in_hemisphere,
)
from geodome.construction.subdivision import subdivide_face
from geodome.construction.variants import (
    DistanceExclusion,
    DomeBase,
    DomeVariant,
    NoExclusion,
    ParityExclusion,
    RimExclusion,
)

__all__ = [
    "CHAKRA_COLOURS",
    "ColourCycler",
    "DEFAULT_PALETTE",
    "DistanceExclusion",
    "DomeBase",
    "DomeVariant",
    "NoExclusion",
    "ParityExclusion",
    "RimExclusion",
    "VertexCanonicalizer",
    "assemble_mesh",
    "build_base",
    "dome_triangles",
    "face_in_hemisphere",
    "generate",
    "icosahedron",
    "pentagon_ring_closed_cap",
    "pentagon_ring_flat_rim",
    "subdivide_face",
    "triangle_in_hemisphere",
    "vertex_key",
]
