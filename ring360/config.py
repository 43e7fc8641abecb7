"""Global constants and type definitions for the ring360 package.

This module gathers the numeric constants that define the 360° ring and the
type aliases shared by the scalar value type and the numpy batch helpers.
There is no runtime configuration: the ring base is a property of the
domain, not a tunable.

Constants:
    BASE: Length of one full rotation in degrees (360.0).
    HALF_TURN: Half of BASE; the boundary of the shortest-angle rule.

Type Definitions:
    Number: Real scalars (int, float, numpy scalars) accepted by the value type.
    BASE_TYPE: Scalar or NumPy array, accepted by the vectorized helpers.

Example:
    >>> from ring360.config import BASE, BASE_TYPE
    >>> import numpy as np
    >>> longitudes: BASE_TYPE = np.array([-75.0, 179.0, 181.0])
    >>> BASE
    360.0
"""

from numbers import Real

from numpy import ndarray

BASE = 360.0
HALF_TURN = BASE / 2

# numbers.Real also covers numpy scalars such as np.int64 and np.float32
Number = Real
BASE_TYPE = Real | ndarray
