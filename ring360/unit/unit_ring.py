"""Circular degree values on a 360° ring.

This module provides the Ring360 class, a float-based value type for
quantities that wrap around every full turn: compass bearings, longitudes,
orbital phase, clock positions. Plain float arithmetic gives wrong distances
for such quantities (the gap between 359° and 1° is 2°, not 358°); Ring360
keeps the unreduced number and reduces it only when a degree reading is asked
for.

Storage Model:
    A Ring360 *is* a float holding the raw, unreduced number of degrees. The
    raw value may be negative or exceed 360 and is never altered after
    construction. Degrees, rotation count and progress are derived on read:

    - degrees():   raw reduced into [0, 360)
    - rotations(): floor(raw / 360), a signed whole-turn count
    - progress():  raw / 360, a signed fractional-turn count

Arithmetic:
    Addition and subtraction combine raw values, multiplication and division
    scale the raw value by a plain number. Every operation returns a new
    Ring360, so rotation counts survive chains of operations.

Non-finite Values:
    NaN and infinities are accepted and propagate. Division by zero follows
    IEEE-754 (signed infinity, or NaN for 0/0) instead of raising.

Example:
    >>> heading = Ring360(-82.467352)
    >>> round(heading.degrees(), 6)
    277.532648
    >>> heading.rotations()
    -1
    >>> Ring360(271.5).angle_to(24.5)
    113.0
    >>> Ring360.from_gis(-75.0).degrees()
    285.0
"""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from ..config import BASE, HALF_TURN, Number
from .unit_base import Unit


def _reduce(raw: float) -> float:
    # Python's float % already moves a negative remainder into [0, BASE)
    # (remainder + BASE); a tiny negative raw can round up to BASE itself.
    remainder = raw % BASE
    return 0.0 if remainder == BASE else remainder


class Ring360(float, Unit):
    """Angle or bearing on a 360°-periodic scale.

    Ring360 stores the raw number of degrees it was built from and exposes
    the normalized reading through methods. Operations that combine two
    values only accept members of the Ring360 unit family or plain numbers.

    Attributes:
        BASE (ClassVar[float]): Degrees in one full rotation.
        SYMBOL (ClassVar[str]): "°", used by repr().
        IS_FAMILY_ROOT (ClassVar[bool]): True, Ring360 roots its own family.

    Example:
        >>> total = Ring360(271.893635) + Ring360(134.635893)
        >>> round(total.degrees(), 6)
        46.529528
        >>> total.rotations()
        1
    """

    IS_FAMILY_ROOT = True
    BASE: ClassVar[float] = BASE
    SYMBOL = "°"

    def __new__(cls, value: Number = 0.0):
        """Create a ring value holding ``value`` verbatim as its raw number.

        Args:
            value: Raw degrees, any real number (int, float, numpy scalar).
                The range is not validated; NaN and infinities pass through.

        Returns:
            Ring360: New instance.

        Raises:
            TypeError: If ``value`` is not a real number (strings included).
        """
        if not isinstance(value, Number):
            msg = f"raw value must be a real number, not {type(value).__name__}"
            raise TypeError(msg)
        return float.__new__(cls, value)

    @classmethod
    def from_gis(cls, lng180: Number) -> Ring360:
        """Create a ring value from the -180°..+180° (GIS) convention.

        Negative values are shifted by one full turn so the raw number starts
        at 0°. The degree reading is the same as ``Ring360(lng180)`` but the
        rotation count is not: ``Ring360(-90).rotations()`` is -1 while
        ``Ring360.from_gis(-90).rotations()`` is 0.

        Args:
            lng180: Longitude or bearing in the GIS convention.

        Returns:
            Ring360: New instance.
        """
        value = cls._scalar_operand(lng180)
        return cls(BASE + value if value < 0 else value)

    # -------------------------------- Readings --------------------------------
    def degrees(self) -> float:
        """Return the raw value reduced into [0, 360)."""
        return _reduce(float(self))

    def rotations(self) -> int | float:
        """Return the signed number of whole turns, ``floor(raw / 360)``.

        A raw value between -360 and 0 reports -1. Non-finite raw values have
        no integer count; the non-finite quotient is returned instead.
        """
        quotient = float(self) / BASE
        if not math.isfinite(quotient):
            return quotient
        return math.floor(quotient)

    def progress(self) -> float:
        """Return ``raw / 360``, the number of turns including partial turns."""
        return float(self) / BASE

    def value(self) -> float:
        """Return the raw, unreduced number."""
        return float(self)

    def as_pair(self) -> tuple[float, int | float]:
        """Return ``(degrees(), rotations())``."""
        return self.degrees(), self.rotations()

    # -------------------------------- Operands --------------------------------
    def _raw_operand(self, other: Ring360 | Number) -> float:
        if isinstance(other, Unit):
            self._check_same_root(type(other))
            return float(other)
        if isinstance(other, Number):
            return float(other)
        msg = f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
        raise TypeError(msg)

    @staticmethod
    def _scalar_operand(k: Number) -> float:
        if isinstance(k, Number):
            return float(k)
        msg = f"scalar must be a real number, not {type(k).__name__}"
        raise TypeError(msg)

    # -------------------------------- Arithmetic Operations --------------------------------
    def add(self, other: Ring360 | Number) -> Ring360:
        """Add another ring value (or a raw number of degrees).

        Args:
            other: Value to add.

        Returns:
            Ring360: New value with raw ``self.raw + other.raw``.

        Raises:
            TypeError: If ``other`` is neither a number nor a Ring360.
        """
        return type(self)(float(self) + self._raw_operand(other))

    def subtract(self, other: Ring360 | Number) -> Ring360:
        """Subtract another ring value (or a raw number of degrees).

        Args:
            other: Value to subtract.

        Returns:
            Ring360: New value with raw ``self.raw - other.raw``.

        Raises:
            TypeError: If ``other`` is neither a number nor a Ring360.
        """
        return type(self)(float(self) - self._raw_operand(other))

    def scale(self, k: Number) -> Ring360:
        """Multiply the raw value by a scalar.

        Raises:
            TypeError: If ``k`` is not a real number.
        """
        return type(self)(float(self) * self._scalar_operand(k))

    def divide(self, k: Number) -> Ring360:
        """Divide the raw value by a scalar.

        Division by zero is not an error: it yields a signed infinity, or NaN
        when the raw value is itself zero or NaN.

        Args:
            k: Divisor.

        Returns:
            Ring360: New value with raw ``self.raw / k``.

        Raises:
            TypeError: If ``k`` is not a real number.
        """
        divisor = self._scalar_operand(k)
        with np.errstate(divide="ignore", invalid="ignore"):
            quotient = np.float64(float(self)) / np.float64(divisor)
        return type(self)(float(quotient))

    # Arrays are left to numpy, which broadcasts on the raw value.
    def __add__(self, other: Ring360 | Number) -> Ring360:
        if isinstance(other, np.ndarray):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Number) -> Ring360:
        if isinstance(other, np.ndarray):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Ring360 | Number) -> Ring360:
        if isinstance(other, np.ndarray):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Number) -> Ring360:
        if isinstance(other, np.ndarray):
            return NotImplemented
        return type(self)(self._raw_operand(other) - float(self))

    def __mul__(self, k: Number) -> Ring360:
        if isinstance(k, np.ndarray):
            return NotImplemented
        return self.scale(k)

    def __rmul__(self, k: Number) -> Ring360:
        if isinstance(k, np.ndarray):
            return NotImplemented
        return self.scale(k)

    def __truediv__(self, k: Number) -> Ring360:
        if isinstance(k, np.ndarray):
            return NotImplemented
        return self.divide(k)

    def __neg__(self) -> Ring360:
        return type(self)(-float(self))

    def __pos__(self) -> Ring360:
        return self

    # -------------------------------- Angles --------------------------------
    def angle_to(self, other: Ring360 | Number) -> float:
        """Return the signed shortest rotation from this value to ``other``.

        Positive results are clockwise (increasing degrees), negative results
        counter-clockwise. The result lies in (-180, 180]; an exact half turn
        is reported as +180.

        Args:
            other: Target, as a Ring360 or a plain number of degrees. Plain
                numbers are reduced mod 360 first.

        Returns:
            float: Signed angle in degrees.

        Example:
            >>> Ring360(271.5).angle_to(24.5)
            113.0
            >>> Ring360(24.5).angle_to(271.5)
            -113.0
        """
        diff = _reduce(self._raw_operand(other)) - self.degrees()
        if diff > HALF_TURN:
            diff -= BASE
        elif diff <= -HALF_TURN:
            diff += BASE
        return diff

    def angle_to_value(self, other: Ring360) -> float:
        """Same as angle_to(), accepting only members of the Ring360 family.

        Raises:
            TypeError: If ``other`` is not a Ring360.
        """
        self._check_same_root(type(other))
        return self.angle_to(other)

    def absolute_angle_to(self, other: Ring360 | Number) -> float:
        """Return the clockwise angle from this value to ``other`` in [0, 360).

        Example:
            >>> Ring360(24.5).absolute_angle_to(271.5)
            247.0
        """
        angle = self.angle_to(other)
        if angle < 0:
            angle += BASE
            # a tiny negative angle rounds up to a full turn
            if angle == BASE:
                return 0.0
        return angle

    def absolute_angle_to_value(self, other: Ring360) -> float:
        """Same as absolute_angle_to(), accepting only Ring360 values."""
        self._check_same_root(type(other))
        return self.absolute_angle_to(other)

    # -------------------------------- GIS --------------------------------
    def to_gis(self) -> float:
        """Return the degree reading in the -180°..+180° (GIS) convention.

        Readings up to and including 180 are returned unchanged, larger ones
        have a full turn subtracted.
        """
        degrees = self.degrees()
        if degrees <= HALF_TURN:
            return degrees
        return degrees - BASE

    # -------------------------------- Trigonometry --------------------------------
    def to_radians(self) -> float:
        """Return the degree reading converted to radians."""
        return math.radians(self.degrees())

    def sin(self) -> float:
        return math.sin(self.to_radians())

    def cos(self) -> float:
        return math.cos(self.to_radians())

    def tan(self) -> float:
        return math.tan(self.to_radians())

    def asin(self) -> float:
        """Arc sine of the radian reading; NaN outside [-1, 1]."""
        radians = self.to_radians()
        if -1.0 <= radians <= 1.0:
            return math.asin(radians)
        return math.nan

    def acos(self) -> float:
        """Arc cosine of the radian reading; NaN outside [-1, 1]."""
        radians = self.to_radians()
        if -1.0 <= radians <= 1.0:
            return math.acos(radians)
        return math.nan

    def atan(self) -> float:
        return math.atan(self.to_radians())

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the degree reading as text, e.g. ``"285.0"``."""
        return str(self.degrees())

    def __format__(self, format_spec: str) -> str:
        return format(self.degrees(), format_spec)

    def __repr__(self) -> str:
        """Return the degree reading with its symbol and the raw value.

        Returns:
            str: e.g. ``"Ring360(277.533 °, raw=-82.4674)"``.
        """
        return f"{type(self).__name__}({self.degrees():g} {self.SYMBOL}, raw={float(self):g})"

    def __rich_repr__(self):
        yield "degrees", self.degrees()
        yield "rotations", self.rotations()
