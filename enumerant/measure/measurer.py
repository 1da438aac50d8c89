"""Measurement-system value object.

A :class:`Measurer` is bound to one of the :class:`MeasurementSystem` members
and rejects anything else at construction time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from enumerant.core.errors import InvalidMeasurementSystem
from enumerant.registry import NumericEnum, define

logger = logging.getLogger("enumerant.measure")


class MeasurementSystem(NumericEnum):
    """Unit systems supported by :class:`Measurer`."""

    METRIC = define("metric", 1)
    IMPERIAL = define("imperial", 2)


@dataclass(frozen=True, slots=True)
class Measurer:
    """Validated wrapper around the measurement system in use.

    ``system`` accepts a :class:`MeasurementSystem` member or its exact name
    (``"metric"``/``"imperial"``); after construction it always holds the member.
    """

    system: MeasurementSystem | str = "metric"

    def __post_init__(self) -> None:
        system = self.system
        if isinstance(system, MeasurementSystem):
            return
        if not isinstance(system, str) or not MeasurementSystem.includes(system):
            raise InvalidMeasurementSystem(f"Invalid system {system}")
        object.__setattr__(self, "system", MeasurementSystem.get(system))
        logger.debug("Measurer bound to system", extra={"measurement_system": system})
