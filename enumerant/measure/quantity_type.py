"""Fundamental physical quantity types."""
from __future__ import annotations

from enumerant.registry import NumericEnum, define


class QuantityType(NumericEnum):
    """Physical dimension a measured value belongs to."""

    LENGTH = define("length", 1)
    MASS = define("mass", 2)
