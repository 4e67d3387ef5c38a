"""The mesh generation pipeline: :func:`generate` entry point."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator

from geodome._constants import MIN_RADIUS
from geodome.construction.assembler import assemble_mesh
from geodome.construction.base_polyhedron import build_base
from geodome.construction.canonicalizer import VertexCanonicalizer
from geodome.construction.colouring import ColourCycler
from geodome.construction.hemisphere import (
    face_in_hemisphere,
    triangle_in_hemisphere,
)
from geodome.construction.subdivision import check_frequency, subdivide_face
from geodome.construction.variants import DomeBase, DomeVariant, coerce_variant
from geodome.errors import InvalidRadiusError
from geodome.model.colour import Colour
from geodome.model.geometry import Mesh, Triangle

logger = logging.getLogger(__name__)


def check_radius(radius: float) -> float:
    """Return *radius* as a float if it is finite and at least :data:`MIN_RADIUS`.

    Raises:
        InvalidRadiusError: Otherwise.
    """
    if isinstance(radius, bool):
        raise InvalidRadiusError(f"radius must be a number, got {radius!r}")
    try:
        value = float(radius)
    except (TypeError, ValueError):
        raise InvalidRadiusError(
            f"radius must be a number, got {radius!r}"
        ) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidRadiusError(f"radius must be positive, got {radius}")
    if value < MIN_RADIUS:
        raise InvalidRadiusError(
            f"radius must be at least {MIN_RADIUS}, got {radius}"
        )
    return value


def dome_triangles(
    base: DomeBase,
    frequency: int,
    canonicalizer: VertexCanonicalizer,
) -> Iterator[Triangle]:
    """Yield the retained triangles of a dome in generation order.

    Base faces entirely below the hemisphere threshold are skipped
    without subdividing.  Every emitted triangle then has to pass the
    centroid test and, for rim faces, the variant's rim policy.
    """
    for face_index in range(len(base.faces)):
        corners = base.corners(face_index)
        if not face_in_hemisphere(corners, base.threshold):
            continue
        for triangle in subdivide_face(corners, frequency, canonicalizer):
            if not triangle_in_hemisphere(triangle, base.threshold, base.radius):
                continue
            if base.is_excluded(face_index, triangle, frequency):
                continue
            yield triangle


def generate(
    radius: float,
    frequency: int,
    variant: DomeVariant | str,
    palette: Iterable[Colour],
) -> Mesh:
    """Generate a coloured geodesic dome mesh.

    All arguments are validated before any geometry is built.  Each
    call owns its canonicalisation table, so calls are independent
    and repeated calls with equal arguments return identical meshes.

    Example usage::

        from geodome import generate

        mesh = generate(10.0, 3, "pentagon_ring_flat_rim", ["red", "blue"])
        mesh.vertices      # (n, 3) positions
        mesh.faces         # (m, 3) vertex indices
        mesh.face_colours  # one (r, g, b) per face

    Args:
        radius: Sphere radius, at least :data:`MIN_RADIUS`.
        frequency: Class-I subdivision order, 2 to 6.
        variant: A :class:`DomeVariant` or its string value.
        palette: Two or more colours, cycled over the triangles.

    Returns:
        The assembled :class:`Mesh`.

    Raises:
        InvalidRadiusError: If *radius* is not finite or is below
            :data:`MIN_RADIUS`.
        InvalidFrequencyError: If *frequency* is out of range.
        InvalidVariantError: If *variant* is not recognised.
        InsufficientPaletteError: If *palette* has fewer than two
            colours.
        TypeError: If *palette* is a single colour, such as a string.
    """
    radius = check_radius(radius)
    frequency = check_frequency(frequency)
    variant = coerce_variant(variant)
    cycler = ColourCycler(palette)

    base = build_base(variant, radius)
    canonicalizer = VertexCanonicalizer(radius, base.rim_height)
    coloured = cycler.assign(dome_triangles(base, frequency, canonicalizer))
    mesh = assemble_mesh(
        coloured, cycler.palette, radius=radius, variant=variant.value,
    )
    logger.debug(
        "generated %s dome (radius=%g, frequency=%d): %d vertices, "
        "%d faces, %d canonical vertices",
        variant.value, radius, frequency,
        mesh.n_vertices, mesh.n_faces, len(canonicalizer),
    )
    return mesh
