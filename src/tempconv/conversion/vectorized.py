"""Vectorized (array / DataFrame) conversion functions."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

from tempconv.conversion.linear import LinearConversion
from tempconv.conversion.model import ReferencePoint, SweepRange


def convert_array(conversion: LinearConversion, values: Iterable[float] | np.ndarray) -> np.ndarray:
    if not isinstance(values, np.ndarray):
        values = list(values)
    arr = np.asarray(values, dtype=float)
    scaled = (arr - conversion.source_offset) * conversion.numerator / conversion.denominator
    return scaled + conversion.target_offset


def sweep_array(sweep: SweepRange) -> np.ndarray:
    values = sweep.lower + np.arange(sweep.count, dtype=float) * sweep.step
    return np.minimum(values, sweep.upper)


def conversion_frame(conversion: LinearConversion, sweep: SweepRange) -> pd.DataFrame:
    """Swept range as a two-column DataFrame named after the source and target scales."""
    source = sweep_array(sweep)
    return pd.DataFrame({
        conversion.source.value: source,
        conversion.target.value: convert_array(conversion, source),
    })


def reference_frame(conversion: LinearConversion,
                    points: Iterable[ReferencePoint]) -> pd.DataFrame:
    points = list(points)
    source = np.array([p.value for p in points], dtype=float)
    return pd.DataFrame({
        conversion.source.value: source,
        conversion.target.value: convert_array(conversion, source),
        "reference": [p.label for p in points],
    })
