"""Interactive matplotlib viewer with mouse and keyboard controls.

View keys (rotate, pan, zoom, toggles) only repaint.  Parameter keys
(frequency, variant, size) swap in an edited :class:`DomeDesign` and
regenerate the whole mesh before repainting.
"""

from __future__ import annotations

import logging
import time

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geodome._constants import MAX_FREQUENCY, MIN_FREQUENCY
from geodome.construction.defaults import DIAMETER_RANGE
from geodome.construction.variants import DomeVariant
from geodome.model import (
    Colour,
    DomeDesign,
    RenderStyle,
    ViewState,
    normalise_colour,
)
from geodome.rendering.painter import _draw_dome
from geodome.rendering.projection import _mesh_extent
from geodome.rendering.static import _resolve_style

logger = logging.getLogger(__name__)


def _axis_rotation(axis: int, angle: float) -> np.ndarray:
    """Rotation matrix about coordinate *axis* (0, 1 or 2) by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    i, j = (axis + 1) % 3, (axis + 2) % 3
    r = np.eye(3)
    r[i, i] = r[j, j] = c
    r[i, j] = -s
    r[j, i] = s
    return r


def _rotation_x(angle: float) -> np.ndarray:
    return _axis_rotation(0, angle)


def _rotation_y(angle: float) -> np.ndarray:
    return _axis_rotation(1, angle)


# ---------------------------------------------------------------------------
# Key bindings
# ---------------------------------------------------------------------------

_KEY_ROTATION_STEP = 0.05  # radians (~3 degrees) per key press
_KEY_ZOOM_FACTOR = 1.1  # multiplicative zoom per key press / scroll step
_KEY_PAN_FRACTION = 0.05  # fraction of dome extent per key press
_PERSPECTIVE_STEP = 0.1  # perspective increment per key press
_DISTANCE_FACTOR = 1.05  # viewing distance multiplier per key press
_DIAMETER_STEP = 5.0  # diameter change per key press
_ZOOM_LIMITS = (0.01, 100.0)

# key -> (camera axis, sign)
_ROTATE_KEYS = {
    "left": (1, -1),
    "right": (1, +1),
    "up": (0, -1),
    "down": (0, +1),
    ",": (2, +1),
    ".": (2, -1),
}

# Moving the centre towards screen-right moves the camera right, so the
# dome appears to move left; the signs make the dome follow the arrow.
_PAN_KEYS = {
    "shift+left": (0, +1),
    "shift+right": (0, -1),
    "shift+down": (1, +1),
    "shift+up": (1, -1),
}

_FREQUENCY_KEYS = {"[": -1, "]": +1}
_SIZE_KEYS = {"s": _DIAMETER_STEP, "S": -_DIAMETER_STEP}

_HELP_TEXT = """\
Arrows     Rotate          Shift+Arrows  Pan
,  .       Roll            +  =  -       Zoom
p  P       Perspective     d  D          Distance
w          Wireframe       f             Faces
[  ]       Frequency       v             Variant
s  S       Size            r             Reset view
h          Toggle help     Scroll        Zoom
Drag       Rotate"""


def _snapshot(view: ViewState) -> dict:
    """Copy of the view fields restored by the reset key."""
    return {
        "rotation": view.rotation.copy(),
        "zoom": view.zoom,
        "centre": view.centre.copy(),
        "perspective": view.perspective,
        "view_distance": view.view_distance,
    }


def _restore(view: ViewState, snapshot: dict) -> None:
    view.rotation = snapshot["rotation"].copy()
    view.zoom = snapshot["zoom"]
    view.centre = snapshot["centre"].copy()
    view.perspective = snapshot["perspective"]
    view.view_distance = snapshot["view_distance"]


def _edited_design(key: str, design: DomeDesign) -> DomeDesign | None:
    """The design after a parameter key, or ``None`` if *key* changes nothing.

    Frequency stops at its limits and the diameter is held inside
    :data:`DIAMETER_RANGE`; the variant wraps around.
    """
    if key in _FREQUENCY_KEYS:
        frequency = design.frequency + _FREQUENCY_KEYS[key]
        if not MIN_FREQUENCY <= frequency <= MAX_FREQUENCY:
            return None
        return design.replace(frequency=frequency)
    if key == "v":
        variants = list(DomeVariant)
        following = variants[(variants.index(design.variant) + 1) % len(variants)]
        return design.replace(variant=following)
    if key in _SIZE_KEYS:
        lo, hi = DIAMETER_RANGE
        diameter = float(np.clip(design.diameter + _SIZE_KEYS[key], lo, hi))
        if diameter == design.diameter:
            return None
        return design.replace(radius=diameter / 2.0)
    return None


def _apply_key_action(
    key: str,
    view: ViewState,
    style: RenderStyle,
    state: dict,
    *,
    base_extent: float,
    initial_view: dict,
) -> str:
    """Apply a keyboard action, mutating *view*, *style*, and *state*.

    Parameter keys replace ``state["design"]`` with an edited copy;
    the design object itself is never modified.

    Returns:
        ``"view"`` if only the view or style changed, ``"full"`` if
        the design changed and the mesh must be regenerated, or
        ``"none"`` for an unbound key or a parameter already at its
        limit.
    """
    if key in _ROTATE_KEYS:
        axis, sign = _ROTATE_KEYS[key]
        step = _axis_rotation(axis, sign * _KEY_ROTATION_STEP)
        view.rotation = step @ view.rotation
    elif key in _PAN_KEYS:
        axis, sign = _PAN_KEYS[key]
        step = _KEY_PAN_FRACTION * base_extent / view.zoom
        view.centre = view.centre + sign * step * view.rotation[axis]
    elif key in ("+", "="):
        view.zoom = min(_ZOOM_LIMITS[1], view.zoom * _KEY_ZOOM_FACTOR)
    elif key == "-":
        view.zoom = max(_ZOOM_LIMITS[0], view.zoom / _KEY_ZOOM_FACTOR)
    elif key in ("p", "P"):
        step = _PERSPECTIVE_STEP if key == "p" else -_PERSPECTIVE_STEP
        view.perspective = float(np.clip(view.perspective + step, 0.0, 1.0))
    elif key == "d":
        view.view_distance *= _DISTANCE_FACTOR
    elif key == "D":
        view.view_distance = max(0.1, view.view_distance / _DISTANCE_FACTOR)
    elif key == "w":
        style.show_edges = not style.show_edges
    elif key == "f":
        style.show_faces = not style.show_faces
    elif key == "r":
        _restore(view, initial_view)
    elif key == "h":
        state["help_visible"] = not state["help_visible"]
    else:
        edited = _edited_design(key, state["design"])
        if edited is None:
            return "none"
        state["design"] = edited
        return "full"
    return "view"


def _draw_help(ax: Axes) -> None:
    ax.text(
        0.02, 0.98, _HELP_TEXT,
        transform=ax.transAxes,
        fontsize=7,
        fontfamily="monospace",
        verticalalignment="top",
        bbox=dict(
            boxstyle="round,pad=0.5",
            facecolor="white",
            alpha=0.85,
            edgecolor="grey",
        ),
        zorder=1000,
    )


class _ViewerSession:
    """State and event handlers behind one interactive window.

    The viewport extent is fixed per mesh so the dome does not appear
    to rescale while it is being dragged; it is recomputed only when
    the mesh is regenerated.
    """

    DRAG_SENSITIVITY = 0.01  # radians per pixel
    MIN_INTERVAL = 0.03  # seconds between drag redraws (~30 fps cap)

    def __init__(
        self,
        fig: Figure,
        ax: Axes,
        design: DomeDesign,
        style: RenderStyle,
    ) -> None:
        self.fig = fig
        self.ax = ax
        self.style = style
        self.view = design.view.copy()
        self.initial_view = _snapshot(self.view)
        self.state: dict = {"design": design, "help_visible": False}
        self.mesh = design.generate()
        self.extent = _mesh_extent(self.mesh, self.view)
        self._drag_from: tuple[float, float] | None = None
        self._last_draw = 0.0

    @property
    def design(self) -> DomeDesign:
        return self.state["design"]

    def connect(self) -> None:
        canvas = self.fig.canvas
        canvas.mpl_connect("button_press_event", self.on_press)
        canvas.mpl_connect("motion_notify_event", self.on_motion)
        canvas.mpl_connect("button_release_event", self.on_release)
        canvas.mpl_connect("scroll_event", self.on_scroll)
        canvas.mpl_connect("key_press_event", self.on_key)

        # Matplotlib's default bindings clash with ours ('f' full
        # screen, 's' save, 'p' pan tool).
        manager = canvas.manager
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            canvas.mpl_disconnect(handler_id)

    # ---- Drawing ----

    def redraw(self) -> None:
        _draw_dome(
            self.ax, self.mesh, self.view, self.style,
            title=self.design.title,
            viewport_extent=self.extent,
        )
        if self.state["help_visible"]:
            _draw_help(self.ax)
        self.fig.canvas.draw_idle()
        self._last_draw = time.monotonic()

    def throttled_redraw(self) -> None:
        if time.monotonic() - self._last_draw >= self.MIN_INTERVAL:
            self.redraw()

    def regenerate(self) -> None:
        design = self.design
        self.mesh = design.generate()
        self.extent = _mesh_extent(self.mesh, self.view)
        logger.debug(
            "regenerated %s dome: frequency %d, diameter %g, %d faces",
            design.variant.value, design.frequency, design.diameter,
            self.mesh.n_faces,
        )
        self.redraw()

    # ---- Event handlers ----

    def on_press(self, event) -> None:
        if event.inaxes is self.ax and event.button == 1:
            self._drag_from = (event.x, event.y)

    def on_motion(self, event) -> None:
        if self._drag_from is None or event.x is None:
            return
        x0, y0 = self._drag_from
        dx, dy = event.x - x0, event.y - y0
        self._drag_from = (event.x, event.y)
        # Horizontal drag turns about the screen Y axis, vertical drag
        # about screen X.
        self.view.rotation = (
            _rotation_y(dx * self.DRAG_SENSITIVITY)
            @ _rotation_x(-dy * self.DRAG_SENSITIVITY)
            @ self.view.rotation
        )
        self.throttled_redraw()

    def on_release(self, event) -> None:
        if self._drag_from is not None:
            self._drag_from = None
            self.redraw()

    def on_scroll(self, event) -> None:
        if event.inaxes is not self.ax:
            return
        zoom = self.view.zoom * _KEY_ZOOM_FACTOR ** event.step
        self.view.zoom = float(np.clip(zoom, *_ZOOM_LIMITS))
        self.redraw()

    def on_key(self, event) -> None:
        if event.key is None:
            return
        kind = _apply_key_action(
            event.key, self.view, self.style, self.state,
            base_extent=self.extent,
            initial_view=self.initial_view,
        )
        if kind == "full":
            self.regenerate()
        elif kind == "view":
            self.throttled_redraw()


def render_mpl_interactive(
    design: DomeDesign,
    *,
    style: RenderStyle | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    **style_kwargs: object,
) -> tuple[DomeDesign, ViewState, RenderStyle]:
    """Interactive matplotlib viewer with mouse and keyboard controls.

    **Mouse:** left-drag rotates the dome; scroll zooms.

    **Keyboard:**

    - **Arrow keys** rotate around the horizontal/vertical axes.
    - **,** / **.** roll in the screen plane.
    - **Shift+Arrow** keys pan the view.
    - **+** / **=** / **-** zoom in/out.
    - **p** / **P** increase/decrease perspective strength.
    - **d** / **D** increase/decrease viewing distance.
    - **w** toggle the wireframe, **f** toggle filled faces.
    - **[** / **]** lower/raise the subdivision frequency.
    - **v** cycle through the dome variants.
    - **s** / **S** grow/shrink the diameter within the design range.
    - **r** reset the view to its initial state.
    - **h** toggle a help overlay listing all keybindings.

    Every parameter change regenerates the whole mesh.  The design
    passed in is left untouched; when the window is closed the edited
    design, view, and style are returned::

        design, view, style = design.render_mpl_interactive()
        design.render_mpl("dome.svg", style=style)

    Args:
        design: The dome to show.
        style: A :class:`RenderStyle` controlling visual appearance.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution.
        background: Background colour.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        A ``(DomeDesign, ViewState, RenderStyle)`` tuple reflecting
        any changes made during the interactive session.  The
        returned design already carries the returned view.
    """
    resolved = _resolve_style(style, **style_kwargs)

    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(normalise_colour(background))
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    session = _ViewerSession(fig, ax, design, resolved)
    session.connect()
    session.redraw()
    plt.show()

    final = session.design.replace(view=session.view)
    return final, session.view, resolved
