import pytest

from fourws_tracking.pid import PIDGains, PIDTorque


def test_proportional_only_returns_scaled_error():
    pid = PIDTorque(PIDGains(kp=2.0, ki=0.0, kd=0.0), dt=0.01)
    assert pid.compute(3.0, 1.0) == pytest.approx(4.0)
    assert pid.compute(1.0, 1.0) == pytest.approx(0.0)


def test_zero_error_gives_zero_output():
    pid = PIDTorque(PIDGains(kp=1.5, ki=0.7, kd=0.3), dt=0.1)
    for _ in range(3):
        assert pid.compute(2.0, 2.0) == 0.0


def test_first_step_uses_all_gains_on_error():
    pid = PIDTorque(PIDGains(kp=1.0, ki=1.0, kd=1.0), dt=0.5)
    assert pid.compute(1.0, 0.0) == pytest.approx(3.0)


def test_integral_accumulates_with_time_step():
    pid = PIDTorque(PIDGains(kp=0.0, ki=1.0, kd=0.0), dt=0.5)
    first = pid.compute(2.0, 0.0)
    second = pid.compute(2.0, 0.0)
    third = pid.compute(2.0, 0.0)
    assert first == pytest.approx(2.0)
    assert second - first == pytest.approx(1.0)
    assert third - second == pytest.approx(second - first)


def test_derivative_vanishes_for_constant_error():
    pid = PIDTorque(PIDGains(kp=0.0, ki=0.0, kd=1.0), dt=0.1)
    assert pid.compute(1.0, 0.0) == pytest.approx(1.0)
    assert pid.compute(1.0, 0.0) == pytest.approx(0.0)


def test_derivative_sign_follows_error_change():
    pid = PIDTorque(PIDGains(kp=0.0, ki=0.0, kd=1.0), dt=0.1)
    pid.compute(1.0, 0.0)
    assert pid.compute(2.0, 0.0) > 0.0
    assert pid.compute(0.0, 0.0) < 0.0


def test_controllers_keep_separate_state():
    gains = PIDGains(kp=0.0, ki=1.0, kd=0.0)
    a = PIDTorque(gains, dt=1.0)
    b = PIDTorque(gains, dt=1.0)
    a.compute(1.0, 0.0)
    a.compute(1.0, 0.0)
    assert b.compute(1.0, 0.0) == pytest.approx(1.0)


def test_gains_are_immutable():
    gains = PIDGains(kp=1.0, ki=0.0, kd=0.0)
    with pytest.raises(AttributeError):
        gains.kp = 2.0
    assert gains.kp == 1.0
    pid = PIDTorque(gains, dt=0.1)
    assert pid.compute(3.0, 1.0) == pytest.approx(2.0)