"""Default palette and design parameters.

The palette follows the seven chakra colours, crown to root.  Names are
the labels shown to users; values are CSS colour names understood by
:func:`~geodome.model.colour.normalise_colour`.
"""

from __future__ import annotations

from geodome.construction.variants import DomeVariant
from geodome.model.colour import Colour

CHAKRA_COLOURS: dict[str, Colour] = {
    "Crown (Violet)": "purple",
    "Third Eye (Indigo)": "indigo",
    "Throat (Blue)": "blue",
    "Heart (Green)": "green",
    "Solar Plexus (Yellow)": "yellow",
    "Sacral (Orange)": "orange",
    "Root (Red)": "red",
}

#: Colours selected when a design is first created: crown and third eye.
DEFAULT_PALETTE: tuple[Colour, ...] = tuple(CHAKRA_COLOURS.values())[:2]

DEFAULT_DIAMETER: float = 20.0
"""Initial dome diameter."""

DIAMETER_RANGE: tuple[float, float] = (10.0, 100.0)
"""Diameter range offered by the design form."""

DEFAULT_FREQUENCY: int = 2

DEFAULT_VARIANT: DomeVariant = DomeVariant.ICOSAHEDRON
