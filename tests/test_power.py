import pytest

from minerover.power import PowerManager


def _const(raw):
    return lambda: raw


def test_full_scale_reading_is_vref():
    pm = PowerManager(_const(4095), 1.0, 12.6, 10.5)
    assert pm.read_voltage() == pytest.approx(3.3)


def test_zero_reading_is_zero_volts():
    pm = PowerManager(_const(0), 4.0, 12.6, 10.5)
    assert pm.read_voltage() == 0.0


def test_divider_ratio_scales_voltage():
    base = PowerManager(_const(2000), 1.0, 12.6, 10.5).read_voltage()
    scaled = PowerManager(_const(2000), 3.0, 12.6, 10.5).read_voltage()
    assert scaled == pytest.approx(3 * base)


def test_percentage_saturates():
    assert PowerManager(_const(4095), 10.0, 12.6, 10.5).read_percentage() == 100.0
    assert PowerManager(_const(0), 10.0, 12.6, 10.5).read_percentage() == 0.0


def test_percentage_midpoint():
    pm = PowerManager(_const(4095), 1.0, 4.4, 2.2)
    assert pm.read_percentage() == pytest.approx(50.0)


def test_percentage_increases_with_reading():
    readings = [PowerManager(_const(r), 4.0, 12.6, 10.5).read_percentage() for r in range(0, 4096, 128)]
    assert all(b >= a for a, b in zip(readings, readings[1:]))
    assert all(0.0 <= p <= 100.0 for p in readings)


def test_battery_low_at_threshold():
    pm = PowerManager(_const(4095), 1.0, 5.0, 3.3)
    assert pm.is_battery_low() is True


def test_battery_not_low_above_threshold():
    pm = PowerManager(_const(4095), 4.0, 12.6, 10.5)
    assert pm.is_battery_low() is False


def test_reads_adc_every_call():
    values = iter([0, 4095])
    pm = PowerManager(lambda: next(values), 1.0, 3.0, 1.0)
    assert pm.is_battery_low() is True
    assert pm.is_battery_low() is False