"""K&R chapter 1 temperature table exercises."""

from tempconv.exercises.base import DEFAULT_SWEEP, Exercise
from tempconv.exercises.celsius_fahrenheit import EXERCISE as CELSIUS_FAHRENHEIT
from tempconv.exercises.fahrenheit_celsius import EXERCISE as FAHRENHEIT_CELSIUS

EXERCISES: dict[str, Exercise] = {
    FAHRENHEIT_CELSIUS.number: FAHRENHEIT_CELSIUS,
    CELSIUS_FAHRENHEIT.number: CELSIUS_FAHRENHEIT,
}


def get_exercise(number: str) -> Exercise:
    try:
        return EXERCISES[number]
    except KeyError:
        raise KeyError(
            f"Unknown exercise {number!r}. Known: {sorted(EXERCISES)}"
        ) from None


__all__ = [
    "CELSIUS_FAHRENHEIT",
    "DEFAULT_SWEEP",
    "EXERCISES",
    "Exercise",
    "FAHRENHEIT_CELSIUS",
    "get_exercise",
]
