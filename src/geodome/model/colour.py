from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from geodome._constants import MIN_PALETTE_SIZE
from geodome.errors import InsufficientPaletteError

#: A colour specification accepted throughout geodome.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#ff0000"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float]

#: A colourmap specification for sampling palettes.
#:
#: Either a matplotlib colourmap name (e.g. ``"viridis"``), a
#: matplotlib :class:`~matplotlib.colors.Colormap`, or any callable
#: mapping a float in ``[0, 1]`` to an RGB or RGBA sequence.
CmapSpec = str | Callable[[float], Sequence[float]]

RGB = tuple[float, float, float]


def normalise_colour(colour: Colour) -> RGB:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), grey floats (e.g. ``0.7``), or RGB tuples
    (e.g. ``(1.0, 0.3, 0.3)``).

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return (f, f, f)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return (r, g, b)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def check_palette_container(palette: object) -> None:
    """Reject a single colour passed where a palette is expected.

    A string would otherwise be read one character at a time, and an
    RGB tuple as three grey values.

    Raises:
        TypeError: If *palette* is a string or an RGB tuple.
    """
    if isinstance(palette, str):
        raise TypeError(
            f"palette must be a collection of colours, got the string {palette!r}"
        )
    if (
        isinstance(palette, tuple)
        and len(palette) == 3
        and all(
            isinstance(c, (int, float)) and not isinstance(c, bool)
            for c in palette
        )
    ):
        raise TypeError(
            f"palette must be a collection of colours, got the RGB tuple "
            f"{palette!r}; wrap it in a list"
        )


def resolve_palette(palette: Iterable[Colour]) -> tuple[RGB, ...]:
    """Fix a palette into an ordered tuple of normalised colours.

    Sequences keep their order.  Unordered collections (``set`` and
    ``frozenset``) are sorted by their normalised RGB value, so the
    resulting order never depends on hash iteration order.

    Args:
        palette: The user's colour choices.

    Returns:
        A tuple of ``(r, g, b)`` tuples, one per input colour.

    Raises:
        InsufficientPaletteError: If fewer than two colours are given.
        TypeError: If *palette* is a single colour rather than a
            collection of them.
        ValueError: If any colour cannot be interpreted.
    """
    check_palette_container(palette)
    if isinstance(palette, (set, frozenset)):
        resolved = tuple(sorted(normalise_colour(c) for c in palette))
    else:
        resolved = tuple(normalise_colour(c) for c in palette)
    if len(resolved) < MIN_PALETTE_SIZE:
        raise InsufficientPaletteError(
            f"palette must contain at least {MIN_PALETTE_SIZE} colours, "
            f"got {len(resolved)}"
        )
    return resolved


def _resolve_cmap(cmap: CmapSpec) -> Callable[[float], RGB]:
    """Turn a colourmap specification into a callable float -> RGB.

    The returned wrapper always produces a 3-tuple ``(r, g, b)`` even if
    the underlying callable returns RGBA.

    Raises:
        TypeError: If *cmap* is not a string and not callable.
    """
    if isinstance(cmap, str):
        import matplotlib
        fn: Callable[..., Sequence[float]] = matplotlib.colormaps[cmap]
    elif callable(cmap):
        fn = cmap
    else:
        raise TypeError(f"Unsupported cmap type: {type(cmap)}")

    def _wrap(val: float) -> RGB:
        result = fn(val)
        return (float(result[0]), float(result[1]), float(result[2]))
    return _wrap


def palette_from_cmap(cmap: CmapSpec, n_colours: int) -> tuple[RGB, ...]:
    """Sample *n_colours* evenly spaced colours from a colourmap.

    The first and last samples sit at the ends of the colourmap.

    Example::

        mesh = generate(10.0, 3, "icosahedron", palette_from_cmap("viridis", 5))

    Raises:
        InsufficientPaletteError: If *n_colours* is below two.
        TypeError: If *cmap* is not a string and not callable.
    """
    if n_colours < MIN_PALETTE_SIZE:
        raise InsufficientPaletteError(
            f"palette must contain at least {MIN_PALETTE_SIZE} colours, "
            f"got {n_colours}"
        )
    fn = _resolve_cmap(cmap)
    return tuple(fn(i / (n_colours - 1)) for i in range(n_colours))
