"""Unit types for circular quantities.

The unit package holds the value types of ring360:

    - unit_base: Unit base class with unit-family (ROOT) management
    - unit_ring: Ring360, a float-based degree value on a 360° ring

Unit Families:
    Operations that combine two values check that both belong to the same
    family. Ring360 is the root of its own family; subclasses (for example a
    project-specific ``Bearing``) join it automatically.

Example:
    >>> from ring360.unit import Ring360
    >>> a = Ring360(350.0)
    >>> b = Ring360(10.0)
    >>> a.angle_to(b)
    20.0
    >>> (a + b).as_pair()
    (0.0, 1)
"""

from .unit_base import Unit
from .unit_ring import Ring360

__all__ = [
    "Unit",
    "Ring360",
]
