"""Shared constants used across the construction and rendering layers."""

KEY_PRECISION: float = 1000.0
"""Scale applied before rounding vertex coordinates into a deduplication key.

Three decimal digits.  See :data:`MIN_RADIUS` for the smallest dome the
key can resolve.
"""

MIN_RADIUS: float = 0.1
"""Smallest accepted radius.

Keys round absolute coordinates to 1/KEY_PRECISION, so the dome must be
large enough that neighbouring vertices at MAX_FREQUENCY stay many key
steps apart.  At this radius they are about 17 steps apart.  Somewhere between 0.01 and 0.001 distinct vertices begin
to share a key and the mesh silently loses vertices.
"""

MIN_FREQUENCY: int = 2
"""Lowest supported Class-I subdivision frequency."""

MAX_FREQUENCY: int = 6
"""Highest supported Class-I subdivision frequency."""

MIN_PALETTE_SIZE: int = 2
"""Fewest colours a palette may hold."""

RIM_DROP_FRACTION: float = 0.2
"""Depth of the pentagon-ring rim below the equator, as a fraction of radius."""

RIM_TOLERANCE: float = 1e-9
"""Relative tolerance (times radius) for recognising a point on the rim plane."""

HEIGHT_TOLERANCE: float = 1e-9
"""Relative tolerance (times radius) for the centroid-height comparison."""

DEGENERATE_LENGTH: float = 1e-12
"""Relative length (times radius) below which a point cannot be projected."""
