"""Exercise 1-3: print a heading above the Fahrenheit to Celsius table."""

from __future__ import annotations

from tempconv.conversion.linear import fahrenheit_to_celsius
from tempconv.conversion.model import ReferencePoint
from tempconv.exercises.base import Exercise
from tempconv.render.program import write_program

REFERENCES = (
    ReferencePoint("Water freezing point", 32.0),
    ReferencePoint("Water boiling point", 212.0),
    ReferencePoint("Normal body temperature", 98.6),
    ReferencePoint("Lowest temperature on Earth (Antarctica)", -128.6),
    ReferencePoint("Highest temperature on Earth (Death Valley)", 134.0),
    ReferencePoint("Where F and C are equal", -40.0),
)

EXERCISE = Exercise(
    number="1-3",
    conversion=fahrenheit_to_celsius(),
    references=REFERENCES,
)


def main() -> None:
    write_program(EXERCISE)


if __name__ == "__main__":
    main()
