import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import pytest

from pyvecmath import (
    LogLevel, Settings, Vec2, Vec3, ZeroLengthError, ZeroLengthPolicy,
    configure_logging, settings,
)
from pyvecmath.defaults import Vec2f


@pytest.fixture(autouse=True)
def restore_settings():
    yield
    settings.reset()
    logging.getLogger("pyvecmath").setLevel(logging.NOTSET)


def test_defaults():
    fresh = Settings()
    assert fresh.zero_length_policy is ZeroLengthPolicy.PROPAGATE
    assert fresh.log_level is LogLevel.WARNING
    assert fresh.approx_tolerance == Settings.APPROX_TOLERANCE


def test_zero_length_norm_propagates_python_float_error():
    with pytest.raises(ZeroDivisionError):
        Vec2(0.0, 0.0).norm()


def test_zero_length_norm_propagates_numpy_nan():
    with pytest.warns(RuntimeWarning):
        result = Vec2f(0, 0).norm()
    assert np.isnan(result.x)
    assert np.isnan(result.y)


def test_zero_policy_returns_zero_vector(caplog):
    settings.zero_length_policy = "zero"
    with caplog.at_level(logging.WARNING, logger="pyvecmath"):
        result = Vec3(0.0, 0.0, 0.0).norm()
    assert result == Vec3(0.0, 0.0, 0.0)
    assert result.item_type is float
    assert "zero-length" in caplog.text


def test_raise_policy():
    settings.zero_length_policy = ZeroLengthPolicy.RAISE
    with pytest.raises(ZeroLengthError):
        Vec2(0.0, 0.0).norm()
    assert Vec2(3.0, 4.0).norm() == Vec2(0.6, 0.8)


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        settings.zero_length_policy = "ignore"
    assert settings.zero_length_policy is ZeroLengthPolicy.PROPAGATE


def test_approx_tolerance_setting():
    settings.approx_tolerance = 0.5
    assert Vec2(1.0, 2.0).is_close(Vec2(1.4, 2.0))


def test_configure_logging_levels():
    assert configure_logging(LogLevel.DEBUG).level == logging.DEBUG
    assert configure_logging(LogLevel.ERROR).level == logging.ERROR
    assert configure_logging().level == logging.WARNING
    assert configure_logging(LogLevel.NONE).level > logging.CRITICAL


def test_configure_logging_uses_settings_level():
    settings.log_level = LogLevel.INFO
    assert configure_logging().name == "pyvecmath"
    assert logging.getLogger("pyvecmath").level == logging.INFO
