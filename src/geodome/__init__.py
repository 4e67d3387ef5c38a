"""Geodome: geodesic dome meshes from subdivided polyhedra.

Geodome builds coloured triangle meshes of geodesic domes by
subdividing a base polyhedron, projecting onto a sphere, and keeping
the upper part, with static and interactive rendering via matplotlib.

Example usage::

    from geodome import DomeDesign

    design = DomeDesign.from_diameter(20.0, frequency=3)
    mesh = design.generate()
    design.render_mpl("dome.svg")
"""

from geodome.model import (
    CmapSpec,
    Colour,
    DomeDesign,
    Mesh,
    RenderStyle,
    ViewState,
    normalise_colour,
    palette_from_cmap,
)
from geodome.construction import (
    CHAKRA_COLOURS,
    DEFAULT_PALETTE,
    DomeVariant,
    generate,
)
from geodome.errors import (
    DegenerateVertexError,
    DomeError,
    DomeValidationError,
    InsufficientPaletteError,
    InvalidFrequencyError,
    InvalidRadiusError,
    InvalidVariantError,
)
from geodome.rendering import render_mpl, render_mpl_interactive

__all__ = [
    "CHAKRA_COLOURS",
    "CmapSpec",
    "Colour",
    "DEFAULT_PALETTE",
    "DegenerateVertexError",
    "DomeDesign",
    "DomeError",
    "DomeValidationError",
    "DomeVariant",
    "InsufficientPaletteError",
    "InvalidFrequencyError",
    "InvalidRadiusError",
    "InvalidVariantError",
    "Mesh",
    "RenderStyle",
    "ViewState",
    "generate",
    "normalise_colour",
    "palette_from_cmap",
    "render_mpl",
    "render_mpl_interactive",
]
