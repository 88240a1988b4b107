"""Environmental sensing rover: distance, temperature and humidity with climate actuators."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from minerover.config import (
    COOLER_LED_PIN,
    HEATER_LED_PIN,
    TEMP_COOLER_THRESHOLD,
    TEMP_HEATER_THRESHOLD,
)
from minerover.motor import HIGH, LOW, OUTPUT, GpioBackend
from minerover.obstacle import UltrasonicSensor


def _reading(value: float | None) -> float:
    if value is None or math.isnan(value):
        return math.nan
    return float(value)


class DHT11Sensor:
    """Temperature (C) and relative humidity (%) sensor; failed reads give NaN."""

    def __init__(
        self,
        read_temperature: Callable[[], float | None],
        read_humidity: Callable[[], float | None],
    ) -> None:
        self._read_temperature = read_temperature
        self._read_humidity = read_humidity

    def temperature(self) -> float:
        return _reading(self._read_temperature())

    def humidity(self) -> float:
        return _reading(self._read_humidity())

    def format_data(self) -> str:
        temperature = self.temperature()
        humidity = self.humidity()
        lines = [
            "Error reading temperature!" if math.isnan(temperature) else f"Temperature: {temperature:.2f} C",
            "Error reading humidity!" if math.isnan(humidity) else f"Humidity: {humidity:.2f} %",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class RoverData:
    distance: float
    temperature: float
    humidity: float


class MineDetectionRover:
    """Collects sensor readings and switches the heater and cooler outputs."""

    def __init__(self, ultrasonic: UltrasonicSensor, dht: DHT11Sensor, gpio: GpioBackend) -> None:
        self.ultrasonic = ultrasonic
        self.dht = dht
        self.gpio = gpio

    def init(self) -> None:
        """Configure the actuator pins and switch both actuators off."""
        for pin in (HEATER_LED_PIN, COOLER_LED_PIN):
            self.gpio.pin_mode(pin, OUTPUT)
        for pin in (HEATER_LED_PIN, COOLER_LED_PIN):
            self.gpio.digital_write(pin, LOW)

    def collect_data(self) -> RoverData:
        return RoverData(
            distance=self.ultrasonic.get_distance(),
            temperature=self.dht.temperature(),
            humidity=self.dht.humidity(),
        )

    def format_data(self, data: RoverData) -> str:
        return "\n".join(
            [
                "--- Sensor Data ---",
                f"Distance: {data.distance:.2f} cm",
                f"Temperature: {data.temperature:.2f} C",
                f"Humidity: {data.humidity:.2f} %",
            ]
        )

    def update_actuators(self, data: RoverData) -> str | None:
        """Drive heater/cooler from temperature; return a status line, or None if unread."""
        if math.isnan(data.temperature):
            return None
        heater = data.temperature < TEMP_HEATER_THRESHOLD
        cooler = not heater and data.temperature > TEMP_COOLER_THRESHOLD
        self.gpio.digital_write(HEATER_LED_PIN, HIGH if heater else LOW)
        self.gpio.digital_write(COOLER_LED_PIN, HIGH if cooler else LOW)
        return f"Actuator: Heater {'ON' if heater else 'OFF'}, Cooler {'ON' if cooler else 'OFF'}"