"""DC motor control for BTS7960 and L298N H-bridge drivers."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from minerover.config import L298N_USE_ENABLE_PINS, MOTOR_PWM_RESOLUTION

INPUT = "input"
INPUT_PULLUP = "input_pullup"
OUTPUT = "output"
LOW = 0
HIGH = 1

_MAX_SPEED = 255


class GpioBackend(Protocol):
    """Pin and PWM operations the motor drivers need from the board."""

    def pin_mode(self, pin: int, mode: str) -> None: ...

    def digital_write(self, pin: int, level: int) -> None: ...

    def pwm_setup(self, channel: int, freq: int, resolution: int) -> None: ...

    def pwm_attach(self, pin: int, channel: int) -> None: ...

    def pwm_write(self, channel: int, duty: int) -> None: ...


class RecordingGpio:
    """In-memory GPIO backend that keeps the latest state of every pin and channel."""

    def __init__(self) -> None:
        self.modes: dict[int, str] = {}
        self.levels: dict[int, int] = {}
        self.pwm_channels: dict[int, tuple[int, int]] = {}
        self.attached: dict[int, int] = {}
        self.duties: dict[int, int] = {}
        self.calls: list[tuple] = []

    def pin_mode(self, pin: int, mode: str) -> None:
        self.calls.append(("pin_mode", pin, mode))
        self.modes[pin] = mode

    def digital_write(self, pin: int, level: int) -> None:
        self.calls.append(("digital_write", pin, level))
        self.levels[pin] = level

    def pwm_setup(self, channel: int, freq: int, resolution: int) -> None:
        self.calls.append(("pwm_setup", channel, freq, resolution))
        self.pwm_channels[channel] = (freq, resolution)

    def pwm_attach(self, pin: int, channel: int) -> None:
        self.calls.append(("pwm_attach", pin, channel))
        self.attached[pin] = channel

    def pwm_write(self, channel: int, duty: int) -> None:
        self.calls.append(("pwm_write", channel, duty))
        self.duties[channel] = duty


class _Driver(Enum):
    BTS7960 = "bts7960"
    L298N = "l298n"


class Motor:
    """One motor; speed runs from -255 to 255 with the sign giving direction."""

    def __init__(
        self,
        gpio: GpioBackend,
        *,
        driver: _Driver,
        pin_a: int = -1,
        pin_b: int = -1,
        channel_a: int = 0,
        channel_b: int = 0,
        en_pin: int = -1,
        use_enable_pins: bool = False,
    ) -> None:
        self.gpio = gpio
        self._driver = driver
        self._pin_a = pin_a
        self._pin_b = pin_b
        self._chan_a = channel_a
        self._chan_b = channel_b
        self._en_pin = en_pin
        self._use_enable = use_enable_pins

    @classmethod
    def bts7960(cls, gpio: GpioBackend, pin_a: int, pin_b: int, channel_a: int, channel_b: int) -> Motor:
        """Motor wired to a BTS7960 with one PWM input per direction."""
        return cls(gpio, driver=_Driver.BTS7960, pin_a=pin_a, pin_b=pin_b, channel_a=channel_a, channel_b=channel_b)

    @classmethod
    def l298n(
        cls,
        gpio: GpioBackend,
        in1_pin: int,
        in2_pin: int,
        en_pin: int,
        en_channel: int,
        use_enable_pins: bool = L298N_USE_ENABLE_PINS,
    ) -> Motor:
        """Motor wired to an L298N: IN1/IN2 for direction, EN for power."""
        return cls(
            gpio,
            driver=_Driver.L298N,
            pin_a=in1_pin,
            pin_b=in2_pin,
            channel_a=en_channel,
            en_pin=en_pin,
            use_enable_pins=use_enable_pins,
        )

    @property
    def is_l298(self) -> bool:
        return self._driver is _Driver.L298N

    def begin(self, freq: int, resolution: int) -> None:
        gpio = self.gpio
        if self.is_l298:
            gpio.pin_mode(self._pin_a, OUTPUT)
            gpio.pin_mode(self._pin_b, OUTPUT)
            if self._use_enable:
                gpio.pwm_setup(self._chan_a, freq, resolution)
                gpio.pwm_attach(self._en_pin, self._chan_a)
                gpio.pwm_write(self._chan_a, 0)
            elif self._en_pin >= 0:
                gpio.pin_mode(self._en_pin, OUTPUT)
                gpio.digital_write(self._en_pin, HIGH)
            gpio.digital_write(self._pin_a, LOW)
            gpio.digital_write(self._pin_b, LOW)
            return
        gpio.pwm_setup(self._chan_a, freq, resolution)
        gpio.pwm_setup(self._chan_b, freq, resolution)
        gpio.pwm_attach(self._pin_a, self._chan_a)
        gpio.pwm_attach(self._pin_b, self._chan_b)
        self.stop()

    def max_duty(self) -> int:
        return (1 << MOTOR_PWM_RESOLUTION) - 1

    def set_speed(self, speed: int) -> None:
        speed = max(-_MAX_SPEED, min(_MAX_SPEED, int(speed)))
        duty = abs(speed) * self.max_duty() // _MAX_SPEED
        gpio = self.gpio

        if self.is_l298:
            if speed > 0:
                gpio.digital_write(self._pin_a, HIGH)
                gpio.digital_write(self._pin_b, LOW)
            elif speed < 0:
                gpio.digital_write(self._pin_a, LOW)
                gpio.digital_write(self._pin_b, HIGH)
            else:
                gpio.digital_write(self._pin_a, LOW)
                gpio.digital_write(self._pin_b, LOW)
                duty = 0
            if self._use_enable:
                gpio.pwm_write(self._chan_a, duty)
            return

        if speed > 0:
            gpio.pwm_write(self._chan_a, duty)
            gpio.pwm_write(self._chan_b, 0)
        elif speed < 0:
            gpio.pwm_write(self._chan_a, 0)
            gpio.pwm_write(self._chan_b, duty)
        else:
            self.stop()

    def stop(self) -> None:
        gpio = self.gpio
        if self.is_l298:
            if self._use_enable:
                gpio.pwm_write(self._chan_a, 0)
            gpio.digital_write(self._pin_a, LOW)
            gpio.digital_write(self._pin_b, LOW)
            return
        gpio.pwm_write(self._chan_a, 0)
        gpio.pwm_write(self._chan_b, 0)