from __future__ import annotations

from dataclasses import dataclass, replace

from tempconv.conversion.linear import LinearConversion
from tempconv.conversion.model import ReferencePoint, SweepRange

DEFAULT_SWEEP = SweepRange(lower=0.0, upper=300.0, step=20.0)


@dataclass(frozen=True, slots=True)
class Exercise:
    """One K&R temperature table program: a conversion, a sweep and reference points."""

    number: str
    conversion: LinearConversion
    references: tuple[ReferencePoint, ...]
    sweep: SweepRange = DEFAULT_SWEEP

    def with_sweep(self, sweep: SweepRange) -> Exercise:
        return replace(self, sweep=sweep)
