"""Shared test fixtures for geodome."""

import matplotlib
import pytest

matplotlib.use("Agg")

from geodome import DomeVariant, generate  # noqa: E402


@pytest.fixture
def two_colours():
    """Return a minimal two-colour palette."""
    return ["red", "blue"]


@pytest.fixture
def flat_rim_mesh(two_colours):
    """The frequency-2 open pentagon-ring dome at radius 10."""
    return generate(10.0, 2, DomeVariant.PENTAGON_RING_FLAT_RIM, two_colours)


@pytest.fixture
def icosahedron_mesh(two_colours):
    """A frequency-3 icosahedral dome at radius 5."""
    return generate(5.0, 3, DomeVariant.ICOSAHEDRON, two_colours)
