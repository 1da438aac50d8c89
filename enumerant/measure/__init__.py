"""Measurement helpers built on the enum registry."""

from .measurer import MeasurementSystem, Measurer
from .quantity_type import QuantityType

__all__ = ["MeasurementSystem", "Measurer", "QuantityType"]
