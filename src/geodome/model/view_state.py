"""Camera state shared by the static and interactive renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_WORLD_UP = (0.0, 1.0, 0.0)

# Used in place of the world up vector when the camera looks along the
# dome axis.
_AXIS_FALLBACK_UP = (0.0, 0.0, 1.0)


def _unit(vector: np.ndarray) -> np.ndarray | None:
    length = np.linalg.norm(vector)
    if length < 1e-12:
        return None
    return vector / length


@dataclass
class ViewState:
    """Where the camera sits and how it projects the dome to 2D.

    The rows of :attr:`rotation` are the camera's right, up and
    towards-viewer axes expressed in world coordinates, so a world
    point ``p`` lands at ``rotation @ (p - centre)`` in camera space.

    Attributes:
        rotation: 3x3 rotation matrix.
        zoom: Magnification factor.
        centre: World point that appears at the middle of the view.
        perspective: Perspective strength; 0 gives an orthographic view.
        view_distance: Distance from the camera to :attr:`centre`.
    """

    rotation: np.ndarray = field(default_factory=lambda: np.eye(3))
    zoom: float = 1.0
    centre: np.ndarray = field(default_factory=lambda: np.zeros(3))
    perspective: float = 0.0
    view_distance: float = 10.0

    def __post_init__(self) -> None:
        for name in ("zoom", "view_distance"):
            if getattr(self, name) <= 0:
                raise ValueError(
                    f"{name} must be positive, got {getattr(self, name)}"
                )
        if self.perspective < 0:
            raise ValueError(
                f"perspective must be non-negative, got {self.perspective}"
            )

    def copy(self) -> ViewState:
        """Return a copy that shares no arrays with this view."""
        return ViewState(
            self.rotation.copy(),
            self.zoom,
            self.centre.copy(),
            self.perspective,
            self.view_distance,
        )

    def project(self, coords: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Map world points to screen positions and depths.

        The eye sits at ``z = view_distance`` in camera space, looking
        towards the origin, and points are projected onto ``z = 0``.

        Args:
            coords: Points of shape ``(n, 3)``; a single point is
                accepted as well.

        Returns:
            ``(xy, depth)``: screen coordinates of shape ``(n, 2)`` and
            camera-space depth of shape ``(n,)``, larger meaning closer
            to the viewer.
        """
        camera = (np.asarray(coords, dtype=float).reshape(-1, 3) - self.centre) @ self.rotation.T
        depth = camera[:, 2]
        scale = np.full(len(camera), self.zoom)
        if self.perspective > 0:
            gap = np.maximum(self.view_distance - depth * self.perspective, 1e-6)
            scale *= self.view_distance / gap
        return camera[:, :2] * scale[:, np.newaxis], depth

    def look_along(
        self,
        direction: np.ndarray | list[float] | tuple[float, ...],
        *,
        up: np.ndarray | list[float] | tuple[float, ...] = _WORLD_UP,
    ) -> ViewState:
        """Put the camera on the *direction* side of :attr:`centre`.

        *direction* becomes the towards-viewer axis, and *up* is
        projected onto the screen to decide which way is up.  With the
        default *up*, a camera directly above or below the dome falls
        back to the world z axis instead of failing.

        Returns ``self`` so the call can be chained::

            view = ViewState(zoom=1.5).look_along([1, 1, 1])

        Raises:
            ValueError: If *direction* is zero, or an explicit *up*
                is parallel to it.
        """
        forward = _unit(np.asarray(direction, dtype=float))
        if forward is None:
            raise ValueError("direction must be non-zero")

        right = _unit(np.cross(np.asarray(up, dtype=float), forward))
        if right is None:
            if tuple(float(x) for x in up) != _WORLD_UP:
                raise ValueError("up vector is parallel to the viewing direction")
            right = _unit(np.cross(np.array(_AXIS_FALLBACK_UP), forward))

        self.rotation = np.array([right, np.cross(forward, right), forward])
        return self
