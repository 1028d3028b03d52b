"""Tests for tempconv config loading."""

import tempfile
from pathlib import Path

import pytest

from tempconv.conversion.model import SweepRange
from tempconv.core.config import TableConfig


def test_defaults():
    cfg = TableConfig.defaults()
    assert cfg.exercise == "1-3"
    assert cfg.sweep.lower == 0.0
    assert cfg.sweep.upper == 300.0
    assert cfg.sweep.step == 20.0
    assert cfg.output.format == "text"
    assert cfg.logging.level == "INFO"
    assert cfg.sweep_range() == SweepRange(lower=0.0, upper=300.0, step=20.0)


def test_load_from_file():
    toml_content = b"""
exercise = "1-4"

[sweep]
lower = -40
upper = 100.0
step = 10.0

[output]
format = "csv"

[logging]
level = "DEBUG"
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = TableConfig.load(path)
    assert cfg.exercise == "1-4"
    assert cfg.sweep.lower == -40.0
    assert isinstance(cfg.sweep.lower, float)
    assert cfg.sweep.upper == 100.0
    assert cfg.sweep.step == 10.0
    assert cfg.output.format == "csv"
    assert cfg.logging.level == "DEBUG"
    assert len(cfg.sweep_range()) == 15

    Path(path).unlink()


def test_missing_file_returns_defaults():
    cfg = TableConfig.load("/nonexistent/path.toml")
    assert cfg.exercise == "1-3"
    assert cfg.sweep.step == 20.0
    assert cfg.output.format == "text"


def test_load_with_overrides():
    toml_content = b"""
[sweep]
step = 20.0
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = TableConfig.load_with_overrides(
        path,
        **{
            "sweep.step": 5,
            "sweep.upper": "50",
            "output.format": "csv",
            "logging.level": "WARNING",
            "unknown.key": 1,
        },
    )
    assert cfg.sweep.step == 5.0
    assert cfg.sweep.upper == 50.0
    assert cfg.output.format == "csv"
    assert cfg.logging.level == "WARNING"

    Path(path).unlink()


def test_partial_toml():
    toml_content = b"""
[output]
format = "csv"
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = TableConfig.load(path)
    assert cfg.output.format == "csv"
    # Other sections use defaults
    assert cfg.sweep.upper == 300.0
    assert cfg.logging.level == "INFO"

    Path(path).unlink()


def test_validate_rejects_bad_format():
    cfg = TableConfig.defaults()
    cfg.output.format = "xml"
    with pytest.raises(ValueError, match="xml"):
        cfg.validate()


def test_validate_rejects_bad_step():
    cfg = TableConfig.defaults()
    cfg.sweep.step = 0.0
    with pytest.raises(ValueError, match="step"):
        cfg.validate()
