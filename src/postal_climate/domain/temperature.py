"""
postal_climate.domain.temperature

Celsius to Fahrenheit/Kelvin conversion.
"""

from __future__ import annotations

from postal_climate.domain.models import TemperatureResult


def convert(celsius: float) -> tuple[float, float]:
    fahrenheit = celsius * 1.8 + 32
    kelvin = celsius + 273.15
    return fahrenheit, kelvin


def build_result(*, city: str, celsius: float) -> TemperatureResult:
    fahrenheit, kelvin = convert(celsius)
    return TemperatureResult(city=city, celsius=celsius, fahrenheit=fahrenheit, kelvin=kelvin)
