#!/usr/bin/env python3
"""Print an exercise's conversion tables with a custom sweep or as CSV."""

import argparse
import sys

from tempconv.conversion.vectorized import conversion_frame, reference_frame
from tempconv.core.config import TableConfig
from tempconv.core.logging import setup_logging
from tempconv.exercises import EXERCISES, get_exercise
from tempconv.render.program import write_program


def main() -> None:
    parser = argparse.ArgumentParser(description="Print K&R temperature conversion tables")
    parser.add_argument("--config", default="config/tables.toml", help="Path to TOML config file")
    parser.add_argument("--exercise", choices=sorted(EXERCISES))
    parser.add_argument("--sweep.lower", type=float, dest="sweep_lower")
    parser.add_argument("--sweep.upper", type=float, dest="sweep_upper")
    parser.add_argument("--sweep.step", type=float, dest="sweep_step")
    parser.add_argument("--output.format", dest="output_format")
    parser.add_argument("--logging.level", dest="logging_level")
    args = parser.parse_args()

    # Build overrides from CLI args
    overrides: dict[str, object] = {}
    if args.exercise is not None:
        overrides["exercise"] = args.exercise
    if args.sweep_lower is not None:
        overrides["sweep.lower"] = args.sweep_lower
    if args.sweep_upper is not None:
        overrides["sweep.upper"] = args.sweep_upper
    if args.sweep_step is not None:
        overrides["sweep.step"] = args.sweep_step
    if args.output_format is not None:
        overrides["output.format"] = args.output_format
    if args.logging_level is not None:
        overrides["logging.level"] = args.logging_level

    cfg = TableConfig.load_with_overrides(args.config, **overrides)
    setup_logging(cfg.logging.level)
    cfg.validate()

    exercise = get_exercise(cfg.exercise).with_sweep(cfg.sweep_range())

    if cfg.output.format == "csv":
        # Swept range, blank line, then reference points
        frame = conversion_frame(exercise.conversion, exercise.sweep)
        frame.to_csv(sys.stdout, index=False, float_format="%.1f", lineterminator="\n")
        sys.stdout.write("\n")
        refs = reference_frame(exercise.conversion, exercise.references)
        refs.to_csv(sys.stdout, index=False, float_format="%.1f", lineterminator="\n")
    else:
        write_program(exercise)


if __name__ == "__main__":
    main()
