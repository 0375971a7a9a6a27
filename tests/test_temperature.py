from __future__ import annotations

import pytest

from postal_climate.domain.temperature import build_result, convert


@pytest.mark.parametrize(
    ("celsius", "fahrenheit", "kelvin"),
    [
        (0, 32, 273.15),
        (30, 86, 303.15),
        (-273.15, -459.67, 0),
        (100, 212, 373.15),
    ],
)
def test_convert(celsius: float, fahrenheit: float, kelvin: float) -> None:
    f, k = convert(celsius)
    assert f == pytest.approx(fahrenheit)
    assert k == pytest.approx(kelvin, abs=1e-9)


def test_convert_uses_exact_formulas() -> None:
    celsius = 21.7
    assert convert(celsius) == (celsius * 1.8 + 32, celsius + 273.15)


def test_build_result_serializes_with_wire_keys() -> None:
    result = build_result(city="Rio de Janeiro", celsius=30)
    wire = result.to_wire()

    assert list(wire) == ["city", "temp_C", "temp_F", "temp_K"]
    assert wire["city"] == "Rio de Janeiro"
    assert wire["temp_C"] == 30
    assert wire["temp_F"] == pytest.approx(86)
    assert wire["temp_K"] == pytest.approx(303.15)
