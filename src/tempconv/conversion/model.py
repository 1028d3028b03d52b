from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TemperatureScale(str, Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class ReferencePoint:
    label: str
    value: float


@dataclass(frozen=True, slots=True)
class SweepRange:
    """Inclusive arithmetic progression lower, lower+step, ... <= upper."""

    lower: float
    upper: float
    step: float

    def __post_init__(self) -> None:
        for name in ("lower", "upper", "step"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"SweepRange.{name} must be finite, got {getattr(self, name)!r}")
        if self.step <= 0:
            raise ValueError(f"SweepRange.step must be positive, got {self.step!r}")

    @property
    def count(self) -> int:
        """Number of values; unbounded int, unlike len()."""
        if self.upper < self.lower:
            return 0
        # Tolerance keeps `upper` in the progression when it sits on the grid
        n = math.floor((self.upper - self.lower) / self.step + 1e-9) + 1
        last = self.lower + (n - 1) * self.step
        if last > self.upper and not self._at_upper(last):
            n -= 1
        return n

    def __len__(self) -> int:
        return self.count

    def _at_upper(self, value: float) -> bool:
        return math.isclose(value, self.upper, rel_tol=1e-12, abs_tol=1e-12 * self.step)

    def values(self) -> Iterator[float]:
        """Yield each value as lower + i*step so no drift accumulates."""
        for i in range(self.count):
            # Never step past upper through rounding
            yield min(self.lower + i * self.step, self.upper)

    def __iter__(self) -> Iterator[float]:
        return self.values()
