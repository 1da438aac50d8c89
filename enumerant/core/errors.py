"""Error hierarchy shared by the enumerant subsystems.

Declaration-time failures derive from :class:`EnumDefinitionError` so callers
setting up a family can catch them as a group. Lookup misses are never errors:
``get`` and ``parse`` return ``None`` instead.
"""
from __future__ import annotations


class EnumerantError(Exception):
    """Base class for all custom exceptions in the package."""


class EnumDefinitionError(EnumerantError):
    """Raised when a family member cannot be declared."""


class InvalidKeyCase(EnumDefinitionError, ValueError):
    """Raised when a member name is not already lower case."""


class DuplicateKey(EnumDefinitionError, ValueError):
    """Raised when a member name is declared twice in one family."""


class InvalidKeyName(EnumDefinitionError, TypeError):
    """Raised when a member name is not a non-empty string."""


class InvalidMemberValue(EnumDefinitionError, ValueError):
    """Raised when a member value cannot be converted to an integer."""


class FamilyClosed(EnumDefinitionError):
    """Raised when a family is modified or extended after its declaration."""


class IllegalConstruction(EnumerantError, TypeError):
    """Raised when a member is constructed outside its family's declaration."""


class InvalidMeasurementSystem(EnumerantError, ValueError):
    """Raised when a Measurer is given an unknown measurement system."""


class ConfigurationError(EnumerantError):
    """Raised when configuration files are missing or invalid."""
