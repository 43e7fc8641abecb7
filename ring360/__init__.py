"""Circular degree values for bearings, longitudes and other 360° quantities.

ring360 provides a value type for quantities that live on a ring of real
numbers modulo 360. Ordinary float arithmetic gets such quantities wrong at
the wrap-around point: the shortest turn from 350° to 10° is +20°, not -340°,
and a longitude of -75° is the same position as 285°. Ring360 keeps the raw,
unreduced number and derives every circular reading from it on demand.

Package Structure:
    - ring360.unit: Ring360 value type and the Unit family base class
    - ring360.convert: shortcuts over plain numbers (to_ring, reduce_mod_360, ...)
    - ring360.vectorized: NumPy batch versions of the same rules
    - ring360.display: rich tables for terminal output
    - ring360.config: constants (BASE, HALF_TURN) and type aliases

Core Readings:
    - degrees():   raw value reduced into [0, 360)
    - rotations(): signed whole-turn count, floor(raw / 360)
    - progress():  raw / 360 including partial turns
    - to_gis():    reading in the -180°..+180° convention

Angles Between Values:
    - angle_to():          signed shortest turn in (-180, 180], ties go to +180
    - absolute_angle_to(): clockwise turn in [0, 360)

Usage:
    >>> from ring360 import Ring360, reduce_mod_360
    >>> a = Ring360(271.893635)
    >>> b = Ring360(134.635893)
    >>> round((a + b).degrees(), 6)
    46.529528
    >>> Ring360.from_gis(-179.0).angle_to(Ring360.from_gis(179.0))
    -2.0
    >>> reduce_mod_360(-31.5)
    328.5

Error Model:
    Values are never validated. NaN and infinities propagate through every
    reading, and division by zero yields IEEE-754 results instead of raising.
    Only operands of the wrong kind (strings, other unit families) raise
    TypeError.
"""

import logging

from .config import BASE, HALF_TURN
from .convert import absolute_angle_to, angle_to, reduce_mod_360, to_ring, to_ring_gis
from .unit import Ring360, Unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Constants
    "BASE",
    "HALF_TURN",
    # Value types
    "Ring360",
    "Unit",
    # Conversions
    "to_ring",
    "to_ring_gis",
    "reduce_mod_360",
    "angle_to",
    "absolute_angle_to",
]
