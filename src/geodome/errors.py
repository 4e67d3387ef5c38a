"""Exception types raised by geodome.

Validation errors subclass :class:`ValueError` so callers that already
catch ``ValueError`` around parameter handling keep working.
"""

from __future__ import annotations


class DomeError(Exception):
    """Base class for all geodome errors."""


class DomeValidationError(DomeError, ValueError):
    """A generation parameter is outside its permitted domain.

    Raised before any geometry work begins; retrying with the same
    arguments will always fail.
    """


class InvalidRadiusError(DomeValidationError):
    """The radius is not a finite number greater than zero."""


class InvalidFrequencyError(DomeValidationError):
    """The subdivision frequency is not an integer in the supported range."""


class InsufficientPaletteError(DomeValidationError):
    """The palette holds fewer than two colours."""


class InvalidVariantError(DomeValidationError):
    """The variant name does not match any known dome variant."""


class DegenerateVertexError(DomeError, ArithmeticError):
    """A point too close to the origin reached sphere projection."""
