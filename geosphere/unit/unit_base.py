"""Unit family foundation for angle and length quantities.

Every unit belongs to exactly one family (angles, lengths, ...). The family
is identified by its ROOT class, the first class in the MRO that sets
``IS_FAMILY_ROOT = True``. Quantities of the same family can be combined and
converted; quantities of different families cannot.

Classes:
    Unit: Base class for all unit types with family management.

Example:
    >>> class Radian(Unit):
    ...     IS_FAMILY_ROOT = True  # root of the angle family
    >>> class Degree(Radian):
    ...     pass  # ROOT = Radian
    >>> class Meter(Unit):
    ...     IS_FAMILY_ROOT = True  # root of the length family
    >>> # Radian and Degree share a ROOT, Meter does not
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root class of a family.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family ROOT of every new subclass."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def same_family(cls, unit_type: type) -> bool:
        """Return True if ``unit_type`` is a unit of the same family as ``cls``."""
        return isinstance(unit_type, type) and issubclass(unit_type, Unit) and (
            cls.ROOT is unit_type.ROOT
        )

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Raises:
            TypeError: If the units belong to different families, e.g. adding
                a Kilometer to a Degree.
        """
        if not cls.same_family(unit_type):
            root = getattr(unit_type, "ROOT", unit_type)
            msg = f"incompatible units: {cls.ROOT.__name__} and {getattr(root, '__name__', root)}"
            raise TypeError(msg)
