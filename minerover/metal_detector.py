"""Metal detection: NE555 oscillator frequency shift and a simple digital sensor."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from minerover.config import (
    NE555_CALIBRATION_DURATION_MS,
    NE555_DETECTION_THRESHOLD_PCT,
    NE555_SAMPLE_HISTORY_SIZE,
    NE555_SAMPLE_WINDOW_MS,
)

_CALIBRATION_POLL_MS = 10
_HYSTERESIS_MS = 300
_MIN_DETECT_SAMPLES = 3
_FULL_CONFIDENCE_PCT = 50.0
_RELIABLE_SAMPLES = 5
_DEBOUNCE_MS = 150


def _millis() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


class CalibrationError(RuntimeError):
    """Raised when the detector baseline cannot be measured."""


class MetalDetectorNE555:
    """Detects metal as a deviation of the NE555 output frequency from a baseline.

    Each rising edge of the oscillator output is reported through ``pulse``.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _millis,
        sleep: Callable[[float], None] = _sleep_ms,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._initialized = False
        self._calibrated = False
        self._pulses = 0
        self._last_sample_ms = 0
        self._baseline = 0.0
        self._current = 0.0
        self._deviation = 0.0
        self._history: deque[float] = deque(maxlen=NE555_SAMPLE_HISTORY_SIZE)
        self._detected = False
        self._detection_start_ms = 0

    def begin(self) -> None:
        if self._initialized:
            return
        self._last_sample_ms = self._clock()
        self._initialized = True

    def pulse(self) -> None:
        """Count one oscillator edge."""
        self._pulses += 1

    def calibrate(self) -> float:
        """Measure the metal-free baseline frequency (blocking) and return it."""
        if not self._initialized:
            raise Calibration_not_ready()
        start = self._clock()
        end = start + NE555_CALIBRATION_DURATION_MS
        samples: list[float] = []
        self._pulses = 0
        last_check = start
        while self._clock() < end:
            now = self._clock()
            if now - last_check >= NE555_SAMPLE_WINDOW_MS:
                samples.append(self._pulses * 1000.0 / (now - last_check))
                self._pulses = 0
                last_check = now
            self._sleep(_CALIBRATION_POLL_MS)
        if not samples:
            raise CalibrationError("no frequency samples collected during calibration")
        self._baseline = sum(samples) / len(samples)
        self._current = self._baseline
        self._calibrated = True
        self._pulses = 0
        self._last_sample_ms = self._clock()
        return self._baseline

    def update(self) -> None:
        """Take a frequency sample once per window and update detection state."""
        if not (self._initialized and self._calibrated):
            return
        now = self._clock()
        elapsed = now - self._last_sample_ms
        if elapsed < NE555_SAMPLE_WINDOW_MS:
            return
        self._current = self._pulses * 1000.0 / elapsed
        self._pulses = 0
        self._last_sample_ms = now
        self._history.append(self._current)

        average = sum(self._history) / len(self._history)
        if self._baseline > 0.0:
            self._deviation = (average - self._baseline) / self._baseline * 100.0

        should_detect = (
            abs(self._deviation) > NE555_DETECTION_THRESHOLD_PCT and len(self._history) >= _MIN_DETECT_SAMPLES
        )
        if should_detect and not self._detected:
            self._detected = True
            self._detection_start_ms = now
        elif not should_detect and self._detected and now - self._detection_start_ms > _HYSTERESIS_MS:
            self._detected = False

    def is_metal_detected(self) -> bool:
        return self._detected

    def confidence(self) -> int:
        """Detection confidence from 0 to 100 percent."""
        samples = len(self._history)
        if not self._calibrated or samples == 0:
            return 0
        span = _FULL_CONFIDENCE_PCT - NE555_DETECTION_THRESHOLD_PCT
        conf = int((abs(self._deviation) - NE555_DETECTION_THRESHOLD_PCT) / span * 100.0)
        conf = max(0, min(100, conf))
        if samples < _RELIABLE_SAMPLES:
            conf = conf * samples // _RELIABLE_SAMPLES
        return conf

    def current_frequency(self) -> float:
        return self._current

    def baseline_frequency(self) -> float:
        return self._baseline

    def frequency_deviation(self) -> float:
        """Deviation of the averaged frequency from baseline, in percent."""
        return self._deviation

    def pulse_count(self) -> int:
        return self._pulses


def CalibrationError_message() -> str:
    return "detector must be started with begin() before calibration"


def CalibrationError_not_ready() -> CalibrationError:
    return CalibrationError(CalibrationError_message())


CalibrationError_not_ready.__doc__ = "Error for calibrating before begin()."
CalibrationError_message.__doc__ = "Message for calibrating before begin()."
Calibration_not_ready = CalibrationError_not_ready


class MetalDetector:
    """Single-pin detector module with a digital output and an analog level."""

    def __init__(
        self,
        read_digital: Callable[[], int],
        read_analog: Callable[[], int],
        clock: Callable[[], int] = _millis,
    ) -> None:
        self._read_digital = read_digital
        self._read_analog = read_analog
        self._clock = clock
        self._last_raw = False
        self._last_change_ms = 0
        self._state = False

    def is_metal_detected(self) -> bool:
        return bool(self._read_digital())

    def read_analog(self) -> int:
        return self._read_analog()

    def check_debounced(self) -> bool:
        """Return True once on a rising edge that has been stable for 150 ms."""
        raw = self.is_metal_detected()
        now = self._clock()
        if raw != self._last_raw:
            self._last_raw = raw
            self._last_change_ms = now
        if now - self._last_change_ms > _DEBOUNCE_MS and raw != self._state:
            self._state = raw
            return raw
        return False

    def format_event(self, tag: str, lat: float, lon: float) -> str:
        """CSV line: timestamp,tag,lat,lon,raw."""
        return f"{self._clock()},{tag},{lat:.6f},{lon:.6f},{self.read_analog()}"