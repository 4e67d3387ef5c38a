from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geodome.construction.defaults import (
    DEFAULT_DIAMETER,
    DEFAULT_FREQUENCY,
    DEFAULT_PALETTE,
    DEFAULT_VARIANT,
)
from geodome.construction.generate import check_radius, generate
from geodome.construction.subdivision import check_frequency
from geodome.construction.variants import DomeVariant, coerce_variant
from geodome.model.colour import (
    Colour,
    check_palette_container,
    resolve_palette,
)
from geodome.model.geometry import Mesh
from geodome.model.render_style import RenderStyle
from geodome.model.view_state import ViewState


def _default_view() -> ViewState:
    """Camera on the (1, 1, 1) diagonal, looking down at the dome."""
    return ViewState().look_along([1.0, 1.0, 1.0])


@dataclass
class DomeDesign:
    """The user-editable parameters of a dome, plus how it is viewed.

    Parameters are validated on construction and whenever they are
    reassigned, so a design can always be generated.  Nothing is
    cached: :meth:`generate` rebuilds the full mesh on every call.

    Attributes:
        radius: Sphere radius.
        frequency: Class-I subdivision order, 2 to 6.
        variant: Base-shape variant.
        palette: Two or more colours cycled over the triangles.  A
            ``set`` is accepted and ordered by RGB value.
        view: Camera / projection state.
        title: Title drawn above the dome, if any.
    """

    radius: float = DEFAULT_DIAMETER / 2.0
    frequency: int = DEFAULT_FREQUENCY
    variant: DomeVariant = DEFAULT_VARIANT
    palette: Iterable[Colour] = field(
        default_factory=lambda: list(DEFAULT_PALETTE)
    )
    view: ViewState = field(default_factory=_default_view)
    title: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        if name == "radius":
            value = check_radius(value)  # type: ignore[arg-type]
        elif name == "frequency":
            value = check_frequency(value)  # type: ignore[arg-type]
        elif name == "variant":
            value = coerce_variant(value)  # type: ignore[arg-type]
        elif name == "palette":
            check_palette_container(value)
            if not isinstance(value, (set, frozenset)):
                value = list(value)  # type: ignore[call-overload]
            resolve_palette(value)  # type: ignore[arg-type]
        elif name == "view" and not isinstance(value, ViewState):
            hint = ""
            if isinstance(value, tuple):
                hint = (
                    " (hint: render_mpl_interactive() returns a"
                    " (DomeDesign, ViewState, RenderStyle) tuple; did"
                    " you forget to unpack it?)"
                )
            raise TypeError(
                f"view must be a ViewState, got {type(value).__name__}"
                + hint
            )
        super().__setattr__(name, value)

    @classmethod
    def from_diameter(cls, diameter: float, **kwargs: object) -> DomeDesign:
        """Create a design from its diameter rather than its radius."""
        return cls(radius=check_radius(diameter) / 2.0, **kwargs)  # type: ignore[arg-type]

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    def replace(self, **changes: object) -> DomeDesign:
        """Return a copy with some parameters changed.

        The view is copied so the two designs can be rotated
        independently.
        """
        changes.setdefault("view", self.view.copy())
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def generate(self) -> Mesh:
        """Generate the dome mesh for the current parameters.

        See Also:
            :func:`geodome.construction.generate.generate`
        """
        return generate(self.radius, self.frequency, self.variant, self.palette)

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        ax: Axes | None = None,
        style: RenderStyle | None = None,
        figsize: tuple[float, float] = (5.0, 5.0),
        dpi: int = 150,
        background: Colour = "white",
        show: bool | None = None,
        **style_kwargs: object,
    ) -> Figure:
        """Draw this design with :func:`geodome.rendering.static.render_mpl`.

        Arguments are passed through unchanged; the design is generated
        afresh and drawn from its own :attr:`view`.
        """
        from geodome.rendering.static import render_mpl

        return render_mpl(
            self, output, ax=ax, style=style, figsize=figsize, dpi=dpi,
            background=background, show=show, **style_kwargs,
        )

    def render_mpl_interactive(
        self,
        *,
        style: RenderStyle | None = None,
        figsize: tuple[float, float] = (5.0, 5.0),
        dpi: int = 150,
        background: Colour = "white",
        **style_kwargs: object,
    ) -> tuple[DomeDesign, ViewState, RenderStyle]:
        """Open an interactive viewer with mouse and keyboard controls.

        Left-drag rotates, scroll zooms, and keyboard shortcuts change
        the view, the display toggles, and the dome parameters
        themselves.  Press **h** for a help overlay.

        The design is not modified.  When the window is closed the
        edited design, view, and style are returned::

            design, view, style = design.render_mpl_interactive()
            design.view = view
            design.render_mpl("dome.svg", style=style)

        See Also:
            :func:`geodome.rendering.interactive.render_mpl_interactive`
        """
        from geodome.rendering.interactive import render_mpl_interactive

        return render_mpl_interactive(
            self, style=style, figsize=figsize, dpi=dpi,
            background=background, **style_kwargs,
        )
