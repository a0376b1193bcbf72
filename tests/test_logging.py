"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from optbox.logging import configure_logging, get_logger, set_log_level
from optbox.optimize import BarzilaiBorweinOptions, minimize_barzilai_borwein


def test_get_logger_returns_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "optbox.test_module"


def test_get_logger_keeps_package_names():
    logger = get_logger("optbox.optimize.gradient")
    assert logger.name == "optbox.optimize.gradient"
    assert get_logger().name == "optbox"


def test_get_logger_caching():
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_configure_logging_writes_to_stream():
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        assert "[DEBUG] optbox.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_solver_warns_on_zero_gradient_difference():
    # linear objective: the gradient never changes
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        res = minimize_barzilai_borwein(
            lambda x: float(np.sum(x)),
            np.zeros(2),
            BarzilaiBorweinOptions(gradient=lambda x: np.ones(2)),
        )
    finally:
        configure_logging(level=logging.WARNING)
    assert not res.success
    assert "zero gradient difference" in stream.getvalue()
