"""Configuration management for tempconv using TOML files + kwargs overrides."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from tempconv.conversion.model import SweepRange

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

OUTPUT_FORMATS = ("text", "csv")


@dataclass
class SweepConfig:
    lower: float = 0.0
    upper: float = 300.0
    step: float = 20.0


@dataclass
class OutputConfig:
    format: str = "text"  # "text" or "csv"


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class TableConfig:
    exercise: str = "1-3"
    sweep: SweepConfig = field(default_factory=SweepConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def defaults() -> TableConfig:
        return TableConfig()

    @staticmethod
    def load(path: str | Path) -> TableConfig:
        """Load config from a TOML file. Missing file returns defaults."""
        cfg = TableConfig()
        p = Path(path)
        if not p.exists():
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> TableConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation:
          sweep.step=10
          output.format=csv
          logging.level=DEBUG
        """
        cfg = TableConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg

    def sweep_range(self) -> SweepRange:
        return SweepRange(lower=self.sweep.lower, upper=self.sweep.upper,
                          step=self.sweep.step)

    def validate(self) -> None:
        if self.output.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output.format!r}, "
                f"expected one of {list(OUTPUT_FORMATS)}"
            )
        self.sweep_range()


def _apply_toml(cfg: TableConfig, data: dict) -> None:
    if "exercise" in data:
        cfg.exercise = str(data["exercise"])

    if "sweep" in data:
        s = data["sweep"]
        if "lower" in s:
            cfg.sweep.lower = float(s["lower"])
        if "upper" in s:
            cfg.sweep.upper = float(s["upper"])
        if "step" in s:
            cfg.sweep.step = float(s["step"])

    if "output" in data:
        o = data["output"]
        if "format" in o:
            cfg.output.format = str(o["format"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])


def _apply_overrides(cfg: TableConfig, overrides: dict[str, object]) -> None:
    mapping: dict[str, tuple[object, str]] = {
        "exercise": (cfg, "exercise"),
        "sweep.lower": (cfg.sweep, "lower"),
        "sweep.upper": (cfg.sweep, "upper"),
        "sweep.step": (cfg.sweep, "step"),
        "output.format": (cfg.output, "format"),
        "logging.level": (cfg.logging, "level"),
    }

    for key, value in overrides.items():
        if key in mapping:
            obj, attr = mapping[key]
            # Coerce to the same type as the default
            current = getattr(obj, attr)
            if isinstance(current, float):
                value = float(value)  # type: ignore[arg-type]
            else:
                value = str(value)
            setattr(obj, attr, value)
