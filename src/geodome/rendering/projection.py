"""Projection helpers and viewport sizing."""

from __future__ import annotations

import numpy as np

from geodome.model import Mesh, ViewState


def _project_point(
    pt: np.ndarray,
    view: ViewState,
) -> tuple[np.ndarray, float]:
    """Project a single 3D rotated point to 2D screen coordinates.

    Args:
        pt: 3D point in rotated (camera) coordinates.
        view: The ViewState defining the projection.

    Returns:
        Tuple of (xy, scale) where *xy* is the 2D position and *scale*
        is the perspective scale factor at this depth.
    """
    z = pt[2]
    if view.perspective > 0:
        s = view.view_distance / (view.view_distance - z * view.perspective)
    else:
        s = 1.0
    xy = pt[:2] * s * view.zoom
    return xy, s


def _mesh_extent(mesh: Mesh, view: ViewState) -> float:
    """Compute rotation-invariant viewport half-extent for *mesh*.

    Returns the radius of a 2D bounding circle centred at the origin
    that encloses every vertex regardless of rotation: the largest 3D
    distance from the view centre, scaled by zoom.
    """
    if mesh.n_vertices == 0:
        return float(view.zoom)

    dists = np.linalg.norm(mesh.vertices - view.centre, axis=1)
    max_extent = float(np.max(dists))

    # Under perspective the worst case is a vertex rotated to depth
    # z = +d, closest to the camera.
    if view.perspective > 0:
        denom = view.view_distance - max_extent * view.perspective
        if denom > 0:
            _, persp_scale = _project_point(
                np.array([0.0, 0.0, max_extent]), view,
            )
        else:
            persp_scale = view.view_distance / 1e-6
        max_extent *= persp_scale

    return float(max_extent * view.zoom)
