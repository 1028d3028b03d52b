from __future__ import annotations

from dataclasses import dataclass

from tempconv.conversion.model import TemperatureScale


@dataclass(frozen=True, slots=True)
class LinearConversion:
    """target = (value - source_offset) * numerator / denominator + target_offset"""

    source: TemperatureScale
    target: TemperatureScale
    numerator: float
    denominator: float
    source_offset: float = 0.0
    target_offset: float = 0.0

    def convert(self, value: float) -> float:
        # Multiply before dividing so 32F -> 0C and 212F -> 100C come out exact
        return (value - self.source_offset) * self.numerator / self.denominator + self.target_offset

    def __call__(self, value: float) -> float:
        return self.convert(value)

    def inverse(self) -> LinearConversion:
        return LinearConversion(
            source=self.target,
            target=self.source,
            numerator=self.denominator,
            denominator=self.numerator,
            source_offset=self.target_offset,
            target_offset=self.source_offset,
        )

    @property
    def title(self) -> str:
        return f"{self.source.display_name} to {self.target.display_name}"


def fahrenheit_to_celsius() -> LinearConversion:
    return LinearConversion(source=TemperatureScale.FAHRENHEIT,
                            target=TemperatureScale.CELSIUS,
                            numerator=5.0, denominator=9.0,
                            source_offset=32.0)


def celsius_to_fahrenheit() -> LinearConversion:
    return LinearConversion(source=TemperatureScale.CELSIUS,
                            target=TemperatureScale.FAHRENHEIT,
                            numerator=9.0, denominator=5.0,
                            target_offset=32.0)
