"""Temperature scales, reference points and linear conversions."""

from tempconv.conversion.linear import (
    LinearConversion,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
)
from tempconv.conversion.model import ReferencePoint, SweepRange, TemperatureScale

__all__ = [
    "LinearConversion",
    "ReferencePoint",
    "SweepRange",
    "TemperatureScale",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
]
