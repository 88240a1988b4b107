"""Battery voltage monitoring through a resistor divider on an ADC pin."""

from __future__ import annotations

from collections.abc import Callable

from minerover.config import (
    ADC_MAX,
    ADC_VREF,
    BATTERY_FULL_VOLTAGE,
    BATTERY_LOW_VOLTAGE,
    BATTERY_VOLT_DIVIDER_RATIO,
)


class PowerManager:
    """Converts raw 12-bit ADC readings into battery voltage and charge."""

    def __init__(
        self,
        read_adc: Callable[[], int],
        divider_ratio: float = BATTERY_VOLT_DIVIDER_RATIO,
        full_voltage: float = BATTERY_FULL_VOLTAGE,
        low_voltage: float = BATTERY_LOW_VOLTAGE,
    ) -> None:
        self._read_adc = read_adc
        self.ratio = divider_ratio
        self.full_voltage = full_voltage
        self.low_voltage = low_voltage

    def read_voltage(self) -> float:
        raw = self._read_adc()
        return (raw / ADC_MAX) * ADC_VREF * self.ratio

    def read_percentage(self) -> float:
        v = self.read_voltage()
        if v >= self.full_voltage:
            return 100.0
        if v <= self.low_voltage:
            return 0.0
        return (v - self.low_voltage) / (self.full_voltage - self.low_voltage) * 100.0

    def is_battery_low(self) -> bool:
        return self.read_voltage() <= self.low_voltage