"""Painter's algorithm drawing of a dome mesh.

Faces are depth-sorted back-to-front and drawn into a matplotlib Axes
as a single PolyCollection; the bare wireframe uses a LineCollection.
"""

from __future__ import annotations

import matplotlib.patheffects as path_effects
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection

from geodome.model import Mesh, RenderStyle, ViewState, normalise_colour

# Font size (points) for titles rendered inside the viewport.
_TITLE_FONT_SIZE = 12.0

# Fraction of the shading strength applied to a face seen edge-on.
_MAX_DARKENING = 0.6


def _face_order(mesh: Mesh, depth: np.ndarray) -> np.ndarray:
    """Face indices sorted back-to-front by mean vertex depth."""
    face_depth = depth[mesh.faces].mean(axis=1)
    return np.argsort(face_depth, kind="stable")


def _shaded_face_colours(
    mesh: Mesh,
    view: ViewState,
    style: RenderStyle,
) -> np.ndarray:
    """RGBA colour per face, darkened by the angle to the viewer.

    Faces square-on to the camera keep their palette colour; faces
    seen edge-on are darkened by ``shading * _MAX_DARKENING``.  Both
    sides of a face shade alike.
    """
    rotated = (mesh.vertices - view.centre) @ view.rotation.T
    tri = rotated[mesh.faces]
    normals = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    lengths = np.linalg.norm(normals, axis=1)
    cos_angle = np.divide(
        np.abs(normals[:, 2]), lengths,
        out=np.zeros(len(lengths)), where=lengths > 1e-12,
    )
    factor = 1.0 - style.shading * _MAX_DARKENING * (1.0 - cos_angle)

    palette = np.asarray(mesh.palette, dtype=float).reshape(-1, 3)
    base = palette[mesh.face_colour_indices]
    rgb = np.minimum(1.0, base * factor[:, np.newaxis])
    alpha = np.full((len(rgb), 1), style.face_alpha)
    return np.hstack([rgb, alpha])


def _draw_dome(
    ax: Axes,
    mesh: Mesh,
    view: ViewState,
    style: RenderStyle,
    *,
    title: str = "",
    viewport_extent: float | None = None,
) -> None:
    """Paint *mesh* onto *ax* using the painter's algorithm.

    Clears *ax* and redraws everything.  Does **not** create or show
    the figure; the caller owns the figure lifecycle.

    Args:
        ax: A matplotlib ``Axes`` to draw into.
        mesh: The dome to draw.
        view: Camera / projection state.
        style: Visual style settings.
        title: Text drawn at the top of the viewport, if non-empty.
        viewport_extent: If given, use this as the fixed half-extent
            for axis limits instead of computing from projected coords.
            Keeps the dome from appearing to rescale during
            interactive rotation.
    """
    while ax.collections:
        ax.collections[0].remove()
    for t in ax.texts[:]:
        t.remove()

    edge_rgb = normalise_colour(style.edge_colour)
    xy, depth = view.project(mesh.vertices)

    if style.show_faces and mesh.n_faces:
        order = _face_order(mesh, depth)
        face_colours = _shaded_face_colours(mesh, view, style)[order]
        pc = PolyCollection(
            xy[mesh.faces[order]],
            closed=True,
            facecolors=face_colours,
            edgecolors=(*edge_rgb, 1.0) if style.show_edges else "none",
            linewidths=style.edge_width if style.show_edges else 0.0,
        )
        ax.add_collection(pc)
    elif style.show_edges and len(mesh.edges):
        lc = LineCollection(
            xy[mesh.edges],
            colors=[(*edge_rgb, 1.0)],
            linewidths=style.edge_width,
        )
        ax.add_collection(lc)

    # ---- Axes and layout ----
    ax.set_aspect("equal")
    if viewport_extent is not None:
        pad_x = pad_y = viewport_extent * 1.15
        cx = cy = 0.0
    elif len(xy) == 0:
        pad_x = pad_y = 1.0
        cx = cy = 0.0
    else:
        cx = (xy[:, 0].max() + xy[:, 0].min()) / 2
        cy = (xy[:, 1].max() + xy[:, 1].min()) / 2
        span = max(
            xy[:, 0].max() - xy[:, 0].min(),
            xy[:, 1].max() - xy[:, 1].min(),
        )
        pad_x = pad_y = span / 2 * 1.1 + 1e-9
    ax.set_xlim(cx - pad_x, cx + pad_x)
    ax.set_ylim(cy - pad_y, cy + pad_y)
    ax.axis("off")

    if title:
        ax.text(
            0.5, 0.97, title,
            transform=ax.transAxes,
            ha="center", va="top",
            fontsize=_TITLE_FONT_SIZE,
            path_effects=[
                path_effects.withStroke(
                    linewidth=_TITLE_FONT_SIZE * 0.25, foreground="white",
                ),
            ],
        )
