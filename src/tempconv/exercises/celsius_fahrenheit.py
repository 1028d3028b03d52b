"""Exercise 1-4: the corresponding Celsius to Fahrenheit table."""

from __future__ import annotations

from tempconv.conversion.linear import celsius_to_fahrenheit
from tempconv.conversion.model import ReferencePoint
from tempconv.exercises.base import Exercise
from tempconv.render.program import write_program

REFERENCES = (
    ReferencePoint("Water freezing point", 0.0),
    ReferencePoint("Water boiling point", 100.0),
    ReferencePoint("Normal body temperature", 37.0),
    ReferencePoint("Lowest temperature on Earth (Antarctica)", -89.2),
    ReferencePoint("Highest temperature on Earth (Death Valley)", 56.7),
    ReferencePoint("Where F and C are equal", -40.0),
)

EXERCISE = Exercise(
    number="1-4",
    conversion=celsius_to_fahrenheit(),
    references=REFERENCES,
)


def main() -> None:
    write_program(EXERCISE)


if __name__ == "__main__":
    main()
