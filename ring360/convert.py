"""Ring conversions for plain numbers.

Shortcuts that promote a plain real number to a Ring360, or query its ring
properties, without constructing the value explicitly.

Example:
    >>> from ring360.convert import reduce_mod_360, angle_to
    >>> reduce_mod_360(-31.5)
    328.5
    >>> angle_to(271.5, 24.5)
    113.0
"""

from __future__ import annotations

from .config import Number
from .unit import Ring360


def to_ring(x: Number) -> Ring360:
    """Promote ``x`` to a Ring360 holding it as the raw value."""
    return Ring360(x)


def to_ring_gis(x: Number) -> Ring360:
    """Promote a -180°..+180° value to a Ring360 (see Ring360.from_gis)."""
    return Ring360.from_gis(x)


def reduce_mod_360(x: Number) -> float:
    """Return ``x`` reduced into [0, 360)."""
    return Ring360(x).degrees()


def angle_to(x: Number, y: Number) -> float:
    """Return the signed shortest angle from ``x`` to ``y`` in (-180, 180]."""
    return Ring360(x).angle_to(y)


def absolute_angle_to(x: Number, y: Number) -> float:
    """Return the clockwise angle from ``x`` to ``y`` in [0, 360)."""
    return Ring360(x).absolute_angle_to(y)
