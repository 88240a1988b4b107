"""MQ-2 smoke/gas sensor read through a 12-bit ADC."""

from __future__ import annotations

from collections.abc import Callable

from minerover.config import ADC_MAX


class MQ2Sensor:
    """Reports the gas reading as a fraction of full scale."""

    def __init__(self, read_adc: Callable[[], int]) -> None:
        self._read_adc = read_adc

    def read_fraction(self) -> float:
        """Return the raw reading scaled to 0..1."""
        return self._read_adc() / ADC_MAX

    def is_smoke_detected(self, threshold: float = 0.4) -> bool:
        return self.read_fraction() >= threshold