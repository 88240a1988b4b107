import pytest

from minerover.drive import Drive
from minerover.motor import HIGH, LOW, Motor, RecordingGpio
from minerover.teleop import apply_key, key_to_speeds


class FakeDrive:
    def __init__(self):
        self.calls = []

    def set_speed(self, left, right):
        self.calls.append(("set_speed", left, right))

    def stop(self):
        self.calls.append(("stop",))


@pytest.mark.parametrize(
    "key, speeds",
    [("w", (150, 150)), ("s", (-120, -120)), ("a", (-80, 80)), ("d", (80, -80))],
)
def test_motion_keys(key, speeds):
    assert key_to_speeds(key) == speeds
    drive = FakeDrive()
    assert apply_key(drive, key) is True
    assert drive.calls == [("set_speed", *speeds)]


def test_stop_key_stops():
    drive = FakeDrive()
    assert key_to_speeds("x") is None
    assert apply_key(drive, "x") is True
    assert drive.calls == [("stop",)]


@pytest.mark.parametrize("key", ["q", "W", " ", "\n"])
def test_unknown_keys_ignored(key):
    drive = FakeDrive()
    assert key_to_speeds(key) is None
    assert apply_key(drive, key) is False
    assert drive.calls == []


def test_keys_drive_real_motors():
    gpio = RecordingGpio()
    left = Motor.l298n(gpio, 1, 2, 3, 0, False)
    right = Motor.l298n(gpio, 4, 5, 6, 1, False)
    drive = Drive(left, right, clock=lambda: 0)
    apply_key(drive, "a")
    assert (gpio.levels[1], gpio.levels[2]) == (LOW, HIGH)
    assert (gpio.levels[4], gpio.levels[5]) == (HIGH, LOW)
    apply_key(drive, "x")
    assert [gpio.levels[p] for p in (1, 2, 4, 5)] == [LOW, LOW, LOW, LOW]