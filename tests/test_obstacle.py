import pytest

from minerover.obstacle import ObstacleAvoider, UltrasonicSensor, echo_to_cm


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


class FakeRange:
    def __init__(self, distance):
        self.distance = distance

    def get_distance(self):
        return self.distance


def make_avoider(left, right, now=1000):
    clock = FakeClock(now)
    avoider = ObstacleAvoider(FakeRange(left), FakeRange(right), 40.0, clock)
    avoider.begin()
    return avoider, clock


def test_echo_zero_is_zero_distance():
    assert echo_to_cm(0) == 0.0


def test_echo_conversion_value():
    assert echo_to_cm(1000) == pytest.approx(17.0)


def test_echo_conversion_is_monotonic():
    values = [echo_to_cm(us) for us in (0, 100, 500, 2000, 20000)]
    assert values == sorted(values)


def test_sensor_distance_and_format():
    sensor = UltrasonicSensor(lambda: 2000)
    assert sensor.get_distance() == pytest.approx(echo_to_cm(2000))
    text = sensor.format_distance()
    assert text.startswith("Distance: ")
    assert text.endswith(" cm")


def test_no_check_before_first_interval():
    avoider, _ = make_avoider(10.0, 10.0, now=50)
    assert avoider.check() is None


def test_both_blocked_backs_up():
    avoider, _ = make_avoider(10.0, 20.0)
    assert avoider.check() == (-120, -120)


def test_left_blocked_turns_right():
    avoider, _ = make_avoider(10.0, 100.0)
    assert avoider.check() == (120, -120)


def test_right_blocked_turns_left():
    avoider, _ = make_avoider(100.0, 10.0)
    assert avoider.check() == (-120, 120)


def test_clear_path_needs_no_action():
    avoider, _ = make_avoider(100.0, 100.0)
    assert avoider.check() is None


def test_zero_reading_counts_as_no_echo():
    avoider, _ = make_avoider(0.0, 0.0)
    assert avoider.check() is None


def test_checks_are_rate_limited():
    avoider, clock = make_avoider(10.0, 100.0)
    assert avoider.check() == (120, -120)
    clock.now += 50
    assert avoider.check() is None
    clock.now += 60
    assert avoider.check() == (120, -120)