"""Static figures of a dome, for files or an embedded Axes."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geodome.model import (
    Colour,
    DomeDesign,
    Mesh,
    RenderStyle,
    ViewState,
    normalise_colour,
)
from geodome.rendering.painter import _draw_dome

_STYLE_FIELDS = frozenset(f.name for f in dataclasses.fields(RenderStyle))


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Copy *style* (or the defaults) with keyword overrides applied.

    ``None`` values are skipped so callers can forward optional
    arguments without checking them.

    Raises:
        TypeError: For a keyword that is not a ``RenderStyle`` field.
    """
    unknown = sorted(kwargs.keys() - _STYLE_FIELDS)
    if unknown:
        raise TypeError(f"Unknown style option(s): {', '.join(unknown)}")

    overrides = {k: v for k, v in kwargs.items() if v is not None}
    base = style if style is not None else RenderStyle()
    return dataclasses.replace(base, **overrides)


def _resolve_target(
    target: DomeDesign | Mesh,
    view: ViewState | None,
) -> tuple[Mesh, ViewState, str]:
    """Return the mesh, view, and title to draw for *target*.

    A :class:`DomeDesign` is generated afresh and supplies its own view
    and title unless *view* is given.  A bare :class:`Mesh` uses *view*
    or the default diagonal camera.
    """
    if isinstance(target, DomeDesign):
        return target.generate(), view if view is not None else target.view, target.title
    if isinstance(target, Mesh):
        if view is None:
            view = ViewState().look_along([1.0, 1.0, 1.0])
        return target, view, ""
    raise TypeError(
        f"expected a DomeDesign or Mesh, got {type(target).__name__}"
    )


def render_mpl(
    target: DomeDesign | Mesh,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    style: RenderStyle | None = None,
    view: ViewState | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Draw a dome into a static matplotlib figure.

    Faces are painted back-to-front by mean depth in their palette
    colours, darkened as they turn edge-on to the camera, with the
    wireframe drawn over them.

    Example usage::

        design = DomeDesign(radius=10.0, frequency=3,
                            palette=["purple", "indigo", "blue"])

        design.render_mpl("dome.png")

        # Wireframe only.
        render_mpl(design, "wire.svg", show_faces=False)

        # An existing mesh seen from the side.
        mesh = design.generate()
        render_mpl(mesh, "side.png", view=ViewState().look_along([1, 0.2, 0]))

        # Two frequencies side by side.
        fig, (left, right) = plt.subplots(1, 2, figsize=(10, 5))
        render_mpl(design, ax=left)
        render_mpl(design.replace(frequency=5), ax=right)
        fig.savefig("compare.pdf")

    Args:
        target: A :class:`DomeDesign`, generated on the spot, or a
            :class:`Mesh` that has already been generated.
        output: Where to save the figure; the file extension picks the
            format (``.svg``, ``.pdf``, ``.png`` and so on).  Not used
            together with *ax*.
        ax: Axes to draw into.  The caller then owns the figure, and
            *output*, *figsize*, *dpi*, *background* and *show* have
            no effect.
        style: Base :class:`RenderStyle`; defaults when ``None``.
            Individual fields can be overridden by keyword, e.g.
            ``show_edges=False``.
        view: Camera to use instead of the design's own view.
        figsize: Width and height of a new figure, in inches.
        dpi: Dots per inch for a new figure and for raster output.
        background: Figure colour, in any form
            :func:`normalise_colour` understands.
        show: Open a window with ``plt.show()``.  When ``None`` a
            window opens only if nothing is being saved.
        **style_kwargs: :class:`RenderStyle` field overrides.

    Returns:
        The figure that was drawn into.

    Raises:
        TypeError: If *target* is neither a design nor a mesh, or a
            style keyword is unknown.
    """
    resolved = _resolve_style(style, **style_kwargs)
    mesh, view, title = _resolve_target(target, view)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_dome(ax, mesh, view, resolved, title=title)
        return fig

    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    fig.set_facecolor(normalise_colour(background))

    _draw_dome(ax, mesh, view, resolved, title=title)

    fig.tight_layout()

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
