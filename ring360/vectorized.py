"""NumPy batch versions of the ring rules.

Data pipelines usually hold bearings or longitudes as whole columns rather
than one value at a time. The functions here apply exactly the rules of
:class:`ring360.unit.Ring360` elementwise to array-like inputs, so
``degrees_array(x)[i] == Ring360(x[i]).degrees()`` for every element.

All functions accept anything ``np.asarray(..., dtype=float)`` accepts
(scalars, lists, arrays) and broadcast their arguments. NaN and infinities
propagate as NaN without numpy floating-point warnings.

Example:
    >>> import numpy as np
    >>> from ring360.vectorized import degrees_array, angle_to_array
    >>> degrees_array([-90.0, 370.0, 180.0])
    array([270.,  10., 180.])
    >>> angle_to_array([271.5, 24.5], [24.5, 271.5])
    array([ 113., -113.])
"""

from __future__ import annotations

import logging

import numpy as np

from .config import BASE, BASE_TYPE, HALF_TURN

logger = logging.getLogger(__name__)


def _as_float_array(values: BASE_TYPE) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if not np.isfinite(array).all():
        logger.debug("non-finite ring values in batch of %d", array.size)
    return array


def degrees_array(raw: BASE_TYPE) -> np.ndarray:
    """Reduce raw values into [0, 360) elementwise.

    Args:
        raw: Raw degree values.

    Returns:
        np.ndarray: Normalized degrees.
    """
    values = _as_float_array(raw)
    with np.errstate(invalid="ignore"):
        reduced = np.mod(values, BASE)
    return np.where(reduced == BASE, 0.0, reduced)


def rotations_array(raw: BASE_TYPE) -> np.ndarray:
    """Return ``floor(raw / 360)`` elementwise.

    The result stays a float array so NaN and infinities can be represented.
    """
    values = _as_float_array(raw)
    return np.floor(values / BASE)


def angle_to_array(source: BASE_TYPE, target: BASE_TYPE) -> np.ndarray:
    """Signed shortest angles from ``source`` to ``target`` in (-180, 180].

    Args:
        source: Raw degree values to measure from.
        target: Raw degree values to measure to.

    Returns:
        np.ndarray: Signed angles, positive clockwise.
    """
    diff = degrees_array(target) - degrees_array(source)
    return np.select(
        [diff > HALF_TURN, diff <= -HALF_TURN],
        [diff - BASE, diff + BASE],
        default=diff,
    )


def absolute_angle_to_array(source: BASE_TYPE, target: BASE_TYPE) -> np.ndarray:
    """Clockwise angles from ``source`` to ``target`` in [0, 360)."""
    angles = angle_to_array(source, target)
    clockwise = np.where(angles < 0, angles + BASE, angles)
    return np.where(clockwise == BASE, 0.0, clockwise)


def to_gis_array(raw: BASE_TYPE) -> np.ndarray:
    """Convert raw values to the -180°..+180° convention."""
    degrees = degrees_array(raw)
    return np.where(degrees <= HALF_TURN, degrees, degrees - BASE)


def from_gis_array(lng180: BASE_TYPE) -> np.ndarray:
    """Convert -180°..+180° values to raw ring values (see Ring360.from_gis)."""
    values = _as_float_array(lng180)
    return np.where(values < 0, BASE + values, values)
