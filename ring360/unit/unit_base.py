"""Unit-family bookkeeping for ring values.

Operations that combine two values (addition, subtraction, angle comparison)
are only allowed between members of the same unit family, so a ring bearing
is never silently mixed with an unrelated quantity that is also a float.

A family is rooted at the first class in the MRO that sets
``IS_FAMILY_ROOT = True``; every subclass shares that root.

Example:
    >>> class Ring360(float, Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Bearing(Ring360):
    ...     pass
    >>> Bearing.ROOT is Ring360
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for value types that belong to a unit family.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the family, set per subclass.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks a class as the root of its family.
    """

    ROOT: ClassVar[type[Unit]]
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        roots = (base for base in cls.__mro__ if base.__dict__.get("IS_FAMILY_ROOT", False))
        cls.ROOT = next(roots, cls)

    @classmethod
    def _same_family(cls, unit_type: type) -> bool:
        return getattr(unit_type, "ROOT", None) is cls.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check that another type belongs to the same unit family.

        Raises:
            TypeError: If ``unit_type`` belongs to a different family, or to none.
        """
        if not cls._same_family(unit_type):
            other = getattr(unit_type, "ROOT", unit_type)
            msg = f"incompatible unit families: {cls.ROOT.__name__} and {other.__name__}"
            raise TypeError(msg)
