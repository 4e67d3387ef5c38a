"""Hemisphere selection for base faces and subdivided triangles."""

from __future__ import annotations

import numpy as np

from geodome._constants import HEIGHT_TOLERANCE
from geodome.model.geometry import Triangle


def face_in_hemisphere(corners: np.ndarray, threshold: float) -> bool:
    """Coarse test: whether a base face can contribute any triangle.

    A face is skipped only when all three corners lie strictly below
    *threshold*.
    """
    heights = np.asarray(corners, dtype=float)[:, 1]
    return bool(np.any(heights >= threshold))


def triangle_in_hemisphere(
    triangle: Triangle, threshold: float, radius: float = 1.0,
) -> bool:
    """Authoritative test: whether a triangle's centroid is high enough.

    The comparison allows ``HEIGHT_TOLERANCE * radius`` of slack so
    triangles lying flat on the rim plane, whose centroid is the mean
    of three identical heights, are not lost to rounding.
    """
    centroid_y = (triangle.a.y + triangle.b.y + triangle.c.y) / 3.0
    return centroid_y >= threshold - HEIGHT_TOLERANCE * abs(radius)
