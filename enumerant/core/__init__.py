"""Core primitives shared across all subsystems.

Error classes and type aliases live here so that the registry, measurement and
config packages can import them without circular dependencies.
"""

from . import errors, types

__all__ = ["errors", "types"]
