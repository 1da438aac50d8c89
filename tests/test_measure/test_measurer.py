from __future__ import annotations

import pytest

from enumerant.core.errors import InvalidMeasurementSystem
from enumerant.measure import MeasurementSystem, Measurer


def test_measurer_has_the_system_provided_when_constructed() -> None:
    m = Measurer("imperial")
    assert m.system is MeasurementSystem.IMPERIAL
    assert m.system.name == "imperial"


def test_measurer_defaults_to_metric() -> None:
    assert Measurer().system is MeasurementSystem.METRIC


def test_measurer_accepts_members() -> None:
    assert Measurer(MeasurementSystem.IMPERIAL) == Measurer("imperial")


@pytest.mark.parametrize("system", ["foo", "METRIC", " metric", 1, None])
def test_measurer_rejects_invalid_systems(system: object) -> None:
    with pytest.raises(InvalidMeasurementSystem, match="(?i)invalid"):
        Measurer(system)  # type: ignore[arg-type]


def test_measurement_system_declares_two_systems() -> None:
    assert MeasurementSystem.keys() == ["metric", "imperial"]
    assert MeasurementSystem.values() == [1, 2]
