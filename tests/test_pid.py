import pytest

from minerover.pid import PIDController


def test_proportional_only():
    pid = PIDController(2.0, 0.0, 0.0)
    assert pid.update(10.0, 4.0, 0.1) == pytest.approx(12.0)


def test_output_clamped_high():
    pid = PIDController(100.0, 0.0, 0.0)
    assert pid.update(10.0, 0.0, 1.0) == 255.0


def test_output_clamped_low():
    pid = PIDController(100.0, 0.0, 0.0)
    assert pid.update(0.0, 10.0, 1.0) == -255.0


def test_integral_accumulates():
    pid = PIDController(0.0, 1.0, 0.0)
    first = pid.update(1.0, 0.0, 1.0)
    second = pid.update(1.0, 0.0, 1.0)
    assert first > 0.0
    assert second == pytest.approx(2 * first)


def test_zero_dt_ignores_derivative():
    with_kd = PIDController(1.0, 0.0, 1000.0)
    without_kd = PIDController(1.0, 0.0, 0.0)
    assert with_kd.update(5.0, 0.0, 0.0) == without_kd.update(5.0, 0.0, 0.0)


def test_derivative_vanishes_for_constant_error():
    pid = PIDController(0.0, 0.0, 1.0)
    first = pid.update(3.0, 0.0, 1.0)
    second = pid.update(3.0, 0.0, 1.0)
    assert first > 0.0
    assert second == pytest.approx(0.0)


def test_set_output_limits():
    pid = PIDController(100.0, 0.0, 0.0)
    pid.set_output_limits(-10.0, 10.0)
    assert pid.update(5.0, 0.0, 1.0) == 10.0
    assert pid.update(0.0, 5.0, 1.0) == -10.0


def test_set_tunings_to_zero_gives_zero_output():
    pid = PIDController(3.0, 0.0, 0.0)
    pid.set_tunings(0.0, 0.0, 0.0)
    assert pid.update(50.0, 1.0, 0.5) == 0.0
    assert (pid.kp, pid.ki, pid.kd) == (0.0, 0.0, 0.0)


def test_default_limits():
    pid = PIDController(1.0, 1.0, 1.0)
    assert (pid.out_min, pid.out_max) == (-255.0, 255.0)