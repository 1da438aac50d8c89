"""Top-level package for enumerant, closed families of integer-valued names.

Concrete families derive from :class:`NumericEnum` and declare their members in
the class body with :func:`define`. Subpackages hold the registry itself, the
measurement helpers built on it, configuration and telemetry.
"""

from .registry import EnumFamilyMeta, Family, NumericEnum, define

__all__ = ["EnumFamilyMeta", "Family", "NumericEnum", "define"]
