"""Heading estimation from a 9-axis IMU with magnetometer hard-iron calibration."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, MutableMapping
from typing import Protocol

from minerover.madgwick import Madgwick

_FILTER_BETA = 0.08
_FILTER_RATE_HZ = 100.0
_MIN_DT = 0.001
_CAL_START_MIN = 1e6
_CAL_START_MAX = -1e6
_OFFSET_KEYS = ("ox", "oy", "oz")

Vector3 = tuple[float, float, float]


class _InertialSensor(Protocol):
    def begin(self) -> bool: ...

    def read_accel_gyro(self) -> tuple[float, float, float, float, float, float] | None: ...

    def read_mag(self) -> Vector3 | None: ...


class IMUFusion:
    """Runs a Madgwick filter over sensor readings and reports heading in degrees.

    The clock returns seconds; calibration offsets persist in ``store``.
    """

    def __init__(
        self,
        sensor: _InertialSensor,
        clock: Callable[[], float] = time.monotonic,
        store: MutableMapping[str, float] | None = None,
    ) -> None:
        self.sensor = sensor
        self._clock = clock
        self.store: MutableMapping[str, float] = {} if store is None else store
        self.filter = Madgwick(_FILTER_BETA)
        self._last_time = 0.0
        self._heading = 0.0
        self._last_mag: Vector3 = (0.0, 0.0, 0.0)
        self.mag_offset: Vector3 = (0.0, 0.0, 0.0)
        self._cal_active = False
        self._cal_start = 0.0
        self._cal_end = 0.0
        self._cal_min = [_CAL_START_MIN] * 3
        self._cal_max = [_CAL_START_MAX] * 3
        self._cal_samples = 0

    def begin(self) -> bool:
        """Start the sensor and load stored calibration; False if the sensor fails."""
        if not self.sensor.begin():
            return False
        self.filter.begin(_FILTER_RATE_HZ)
        self._last_time = self._clock()
        self.load_mag_calibration()
        return True

    def update(self) -> bool:
        """Read the sensor and advance the filter; False if no reading was available."""
        now = self._clock()
        dt = now - self._last_time
        if dt <= 0.0:
            dt = _MIN_DT
        self._last_time = now

        motion = self.sensor.read_accel_gyro()
        if motion is None:
            return False
        ax, ay, az, gx, gy, gz = motion
        mag = self.sensor.read_mag()
        fresh_mag = mag is not None
        if fresh_mag:
            self._last_mag = tuple(mag)

        if self._cal_active and fresh_mag:
            self._cal_min = [min(lo, v) for lo, v in zip(self._cal_min, self._last_mag)]
            self._cal_max = [max(hi, v) for hi, v in zip(self._cal_max, self._last_mag)]
            self._cal_samples += 1
        if self._cal_active and self._clock() >= self._cal_end:
            self._finish_calibration()

        mx, my, mz = (v - o for v, o in zip(self._last_mag, self.mag_offset))
        self.filter.update(gx, gy, gz, ax, ay, az, mx, my, mz, dt)
        heading = self.filter.yaw()
        self._heading = heading + 360.0 if heading < 0 else heading
        return True

    def heading(self) -> float:
        """Last heading in degrees, 0..360."""
        return self._heading

    def read_raw(self) -> tuple[float, ...] | None:
        """Return (ax, ay, az, gx, gy, gz, mx, my, mz); magnetometer values are NaN if unread."""
        motion = self.sensor.read_accel_gyro()
        mag = self.sensor.read_mag()
        if motion is None:
            return None
        if mag is None:
            mag = (math.nan, math.nan, math.nan)
        return (*motion, *mag)

    def start_mag_calibration(self, duration_seconds: float = 10) -> None:
        """Begin collecting magnetometer extremes for at least one second."""
        duration_seconds = max(1, duration_seconds)
        self._cal_active = True
        self._cal_start = self._clock()
        self._cal_end = self._cal_start + duration_seconds
        self._cal_min = [_CAL_START_MIN] * 3
        self._cal_max = [_CAL_START_MAX] * 3
        self._cal_samples = 0

    def stop_mag_calibration(self) -> None:
        """End calibration early, keeping the result if any samples were taken."""
        if not self._cal_active:
            return
        if self._cal_samples > 0:
            self._finish_calibration()
        else:
            self._cal_active = False

    def _finish_calibration(self) -> None:
        self._cal_active = False
        self.mag_offset = tuple((hi + lo) * 0.5 for lo, hi in zip(self._cal_min, self._cal_max))
        self.save_mag_calibration()

    def is_mag_calibrating(self) -> bool:
        return self._cal_active

    def mag_cal_progress(self) -> int:
        """Calibration progress, 0..100 percent."""
        if not self._cal_active:
            return 0
        now = self._clock()
        if now >= self._cal_end:
            return 100
        total = self._cal_end - self._cal_start
        if total <= 0:
            return 0
        pct = int((now - self._cal_start) * 100 / total)
        return max(0, min(100, pct))

    def load_mag_calibration(self) -> None:
        self.mag_offset = tuple(float(self.store.get(key, 0.0)) for key in _OFFSET_KEYS)

    def save_mag_calibration(self) -> None:
        for key, value in zip(_OFFSET_KEYS, self.mag_offset):
            self.store[key] = value