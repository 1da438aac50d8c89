"""Enum registry: family base type, member declarations and lookup tables."""

from .enum import Declaration, EnumFamilyMeta, NumericEnum, define
from .family import Family

__all__ = ["Declaration", "EnumFamilyMeta", "Family", "NumericEnum", "define"]
