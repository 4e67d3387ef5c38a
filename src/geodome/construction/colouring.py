"""Round-robin palette assignment."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from geodome.model.colour import Colour, resolve_palette
from geodome.model.geometry import ColouredTriangle, Triangle


class ColourCycler:
    """Assigns palette colours to triangles by emission order.

    The colour of the ``n``-th retained triangle is ``n mod P`` for a
    palette of ``P`` colours.  Geometry plays no part.

    Args:
        palette: Two or more colours.  Resolved once, on construction.

    Raises:
        InsufficientPaletteError: If fewer than two colours are given.
    """

    def __init__(self, palette: Iterable[Colour]) -> None:
        self.palette = resolve_palette(palette)

    def __len__(self) -> int:
        return len(self.palette)

    def colour_index(self, ordinal: int) -> int:
        """Palette index for the triangle at position *ordinal*."""
        return ordinal % len(self.palette)

    def assign(self, triangles: Iterable[Triangle]) -> Iterator[ColouredTriangle]:
        """Pair each triangle with its colour, in the order given."""
        for ordinal, triangle in enumerate(triangles):
            yield ColouredTriangle(triangle, self.colour_index(ordinal))
