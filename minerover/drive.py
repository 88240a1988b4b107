"""Differential drive made of a left and a right motor."""

from __future__ import annotations

import time
from collections.abc import Callable

from minerover.config import E_STOP_PIN, MOTOR_PWM_FREQ, MOTOR_PWM_RESOLUTION
from minerover.motor import INPUT_PULLUP, Motor


def _millis() -> int:
    return int(time.monotonic() * 1000)


class Drive:
    """Commands both motors together; speeds run from -255 to 255."""

    COMMAND_TIMEOUT_MS = 5000

    def __init__(self, left: Motor, right: Motor, clock: Callable[[], int] = _millis) -> None:
        self.left = left
        self.right = right
        self._clock = clock
        self.last_command_ms = 0

    def begin(self) -> None:
        self.left.begin(MOTOR_PWM_FREQ, MOTOR_PWM_RESOLUTION)
        self.right.begin(MOTOR_PWM_FREQ, MOTOR_PWM_RESOLUTION)
        self.left.gpio.pin_mode(E_STOP_PIN, INPUT_PULLUP)

    def set_speed(self, left: int, right: int) -> None:
        self.last_command_ms = self._clock()
        self.left.set_speed(left)
        self.right.set_speed(right)

    def stop(self) -> None:
        self.left.stop()
        self.right.stop()

    def emergency_stop(self) -> None:
        self.stop()