import logging
import sys

from tempconv.core.logging import HANDLER_NAME, setup_logging
from tempconv.exercises import FAHRENHEIT_CELSIUS
from tempconv.render.program import write_program


def test_setup_logging_level_and_handler(tempconv_logger):
    setup_logging("debug")
    assert tempconv_logger.level == logging.DEBUG
    handler = tempconv_logger.handlers[-1]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_unknown_level_falls_back_to_info(tempconv_logger):
    setup_logging("chatty")
    assert tempconv_logger.level == logging.INFO


def test_repeated_setup_keeps_one_handler(tempconv_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")
    ours = [h for h in tempconv_logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert ours[0].level == logging.DEBUG
    assert tempconv_logger.level == logging.DEBUG


def test_logs_stay_off_stdout(capsys, tempconv_logger):
    setup_logging("DEBUG")
    write_program(FAHRENHEIT_CELSIUS)
    captured = capsys.readouterr()
    assert "[DEBUG]" not in captured.out
    assert "Printing exercise 1-3" in captured.err
    assert captured.err.count("Printing exercise 1-3") == 1
