from __future__ import annotations

from dataclasses import dataclass

from geodome.model.colour import Colour


@dataclass
class RenderStyle:
    """Visual settings for drawing a dome mesh.

    Attributes:
        show_faces: Whether to fill triangles with their palette colour.
        show_edges: Whether to draw the wireframe.
        face_alpha: Face opacity (0 = fully transparent, 1 = opaque).
        edge_colour: Wireframe colour.
        edge_width: Wireframe line width in points.
        shading: Strength of the view-angle face shading, from 0
            (flat palette colours) to 1 (strongest darkening of faces
            seen edge-on).
    """

    show_faces: bool = True
    show_edges: bool = True
    face_alpha: float = 1.0
    edge_colour: Colour = (0.0, 0.0, 0.0)
    edge_width: float = 0.6
    shading: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.face_alpha <= 1.0:
            raise ValueError(
                f"face_alpha must be between 0.0 and 1.0, got {self.face_alpha}"
            )
        if self.edge_width < 0:
            raise ValueError(
                f"edge_width must be non-negative, got {self.edge_width}"
            )
        if not 0.0 <= self.shading <= 1.0:
            raise ValueError(
                f"shading must be between 0.0 and 1.0, got {self.shading}"
            )
