"""Core data model for geodome: mesh types, colour handling, and view state.

Everything is re-exported here so that ``from geodome.model import
Mesh`` works.
"""

from geodome.model.colour import (
    CmapSpec,
    Colour,
    normalise_colour,
    palette_from_cmap,
    resolve_palette,
)
from geodome.model.geometry import (
    BaseFace,
    ColouredTriangle,
    Mesh,
    Triangle,
    Vec3,
    Vertex,
    VertexKey,
)
from geodome.model.render_style import RenderStyle
from geodome.model.view_state import ViewState
from geodome.model.dome_design import DomeDesign

__all__ = [
    "BaseFace",
    "CmapSpec",
    "Colour",
    "ColouredTriangle",
    "DomeDesign",
    "Mesh",
    "RenderStyle",
    "Triangle",
    "Vec3",
    "Vertex",
    "VertexKey",
    "ViewState",
    "normalise_colour",
    "palette_from_cmap",
    "resolve_palette",
]
