import logging

import pytest

from tempconv.conversion.linear import celsius_to_fahrenheit, fahrenheit_to_celsius
from tempconv.conversion.model import SweepRange
from tempconv.exercises import CELSIUS_FAHRENHEIT, FAHRENHEIT_CELSIUS


@pytest.fixture
def textbook_sweep():
    return SweepRange(lower=0.0, upper=300.0, step=20.0)


@pytest.fixture
def f_to_c():
    return fahrenheit_to_celsius()


@pytest.fixture
def c_to_f():
    return celsius_to_fahrenheit()


@pytest.fixture
def f_to_c_exercise():
    return FAHRENHEIT_CELSIUS


@pytest.fixture
def c_to_f_exercise():
    return CELSIUS_FAHRENHEIT


@pytest.fixture
def tempconv_logger():
    logger = logging.getLogger("tempconv")
    saved = (logger.level, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
