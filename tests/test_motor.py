import pytest

from minerover.motor import HIGH, LOW, OUTPUT, Motor, RecordingGpio


def make_bts():
    gpio = RecordingGpio()
    motor = Motor.bts7960(gpio, 25, 26, 0, 1)
    motor.begin(20000, 8)
    return gpio, motor


def make_l298(use_enable_pins):
    gpio = RecordingGpio()
    motor = Motor.l298n(gpio, 26, 27, 25, 2, use_enable_pins)
    motor.begin(20000, 8)
    return gpio, motor


def test_bts_begin_configures_channels_and_stops():
    gpio, _ = make_bts()
    assert gpio.pwm_channels == {0: (20000, 8), 1: (20000, 8)}
    assert gpio.attached == {25: 0, 26: 1}
    assert gpio.duties == {0: 0, 1: 0}


def test_max_duty_matches_resolution():
    _, motor = make_bts()
    assert motor.max_duty() == 255


def test_bts_forward_and_reverse():
    gpio, motor = make_bts()
    motor.set_speed(150)
    assert gpio.duties == {0: 150, 1: 0}
    motor.set_speed(-100)
    assert gpio.duties == {0: 0, 1: 100}


def test_bts_speed_is_clamped():
    gpio, motor = make_bts()
    motor.set_speed(1000)
    assert gpio.duties[0] == motor.max_duty()
    motor.set_speed(-1000)
    assert gpio.duties[1] == motor.max_duty()
    assert gpio.duties[0] == 0


def test_bts_zero_speed_stops():
    gpio, motor = make_bts()
    motor.set_speed(200)
    motor.set_speed(0)
    assert gpio.duties == {0: 0, 1: 0}


@pytest.mark.parametrize("speed", [-300, -255, -1, 1, 77, 255, 300])
def test_bts_duty_never_exceeds_max(speed):
    gpio, motor = make_bts()
    motor.set_speed(speed)
    assert all(0 <= d <= motor.max_duty() for d in gpio.duties.values())
    active = 0 if speed > 0 else 1
    assert gpio.duties[1 - active] == 0


def test_l298_without_enable_holds_enable_high():
    gpio, _ = make_l298(False)
    assert gpio.modes == {26: OUTPUT, 27: OUTPUT, 25: OUTPUT}
    assert gpio.levels == {25: HIGH, 26: LOW, 27: LOW}
    assert gpio.pwm_channels == {}


def test_l298_direction_pins():
    gpio, motor = make_l298(False)
    motor.set_speed(120)
    assert (gpio.levels[26], gpio.levels[27]) == (HIGH, LOW)
    motor.set_speed(-120)
    assert (gpio.levels[26], gpio.levels[27]) == (LOW, HIGH)
    motor.set_speed(0)
    assert (gpio.levels[26], gpio.levels[27]) == (LOW, LOW)
    assert gpio.duties == {}


def test_l298_with_enable_uses_pwm():
    gpio, motor = make_l298(True)
    assert gpio.pwm_channels == {2: (20000, 8)}
    assert gpio.attached == {25: 2}
    assert gpio.duties == {2: 0}
    motor.set_speed(-200)
    assert gpio.duties[2] == 200
    assert (gpio.levels[26], gpio.levels[27]) == (LOW, HIGH)
    motor.stop()
    assert gpio.duties[2] == 0
    assert (gpio.levels[26], gpio.levels[27]) == (LOW, LOW)