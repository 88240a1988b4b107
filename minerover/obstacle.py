"""Ultrasonic ranging and reactive obstacle avoidance."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

_SOUND_CM_PER_US = 0.034
_CHECK_INTERVAL_MS = 100
_AVOID_SPEED = 120


def _millis() -> int:
    return int(time.monotonic() * 1000)


def echo_to_cm(duration_us: float) -> float:
    """Convert a round-trip echo time in microseconds to distance in cm."""
    return duration_us * _SOUND_CM_PER_US / 2


class UltrasonicSensor:
    """HC-SR04 style sensor; the callable triggers a ping and returns the echo time."""

    def __init__(self, measure_echo_us: Callable[[], float]) -> None:
        self._measure = measure_echo_us

    def get_distance(self) -> float:
        return echo_to_cm(self._measure())

    def format_distance(self) -> str:
        return f"Distance: {self.get_distance():.2f} cm"


class _RangeSensor(Protocol):
    def get_distance(self) -> float: ...


class ObstacleAvoider:
    """Suggests wheel speeds that turn away from obstacles seen by two sensors."""

    def __init__(
        self,
        left: _RangeSensor,
        right: _RangeSensor,
        threshold_cm: float,
        clock: Callable[[], int] = _millis,
    ) -> None:
        self.left = left
        self.right = right
        self.threshold_cm = threshold_cm
        self._clock = clock
        self._last_check = 0

    def begin(self) -> None:
        """Reset the check timer so the next check samples the sensors."""
        self._last_check = 0

    def check(self) -> tuple[int, int] | None:
        """Return (left, right) avoidance speeds, or None when no action is needed."""
        if self._clock() - self._last_check < _CHECK_INTERVAL_MS:
            return None
        self._last_check = self._clock()

        ldist = self.left.get_distance()
        rdist = self.right.get_distance()
        left_blocked = 0 < ldist < self.threshold_cm
        right_blocked = 0 < rdist < self.threshold_cm

        if left_blocked and right_blocked:
            return (-_AVOID_SPEED, -_AVOID_SPEED)
        if left_blocked:
            return (_AVOID_SPEED, -_AVOID_SPEED)
        if right_blocked:
            return (-_AVOID_SPEED, _AVOID_SPEED)
        return None