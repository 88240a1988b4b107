"""Minimal MPU9250 accelerometer/gyroscope with AK8963 magnetometer over I2C."""

from __future__ import annotations

import struct
import time
from typing import Protocol

DEFAULT_ADDRESS = 0x68

PWR_MGMT_1 = 0x6B
INT_PIN_CFG = 0x37
ACCEL_XOUT_H = 0x3B
GYRO_XOUT_H = 0x43

AK8963_ADDRESS = 0x0C
AK8963_CNTL1 = 0x0A
AK8963_ST1 = 0x02
AK8963_XOUT_L = 0x03

# Default full-scale ranges: +-2 g and +-250 deg/s
ACCEL_LSB_PER_G = 16384.0
GYRO_LSB_PER_DPS = 131.0

_BYPASS_ENABLE = 0x02
_MAG_CONTINUOUS_16BIT_100HZ = 0x16
_MAG_DATA_READY = 0x01
_MOTION_BLOCK = 14
_MAG_BLOCK = 7


def to_int16(hi: int, lo: int) -> int:
    """Combine a big-endian byte pair into a signed 16-bit integer."""
    value = ((hi & 0xFF) << 8) | (lo & 0xFF)
    return value - 0x10000 if value & 0x8000 else value


class I2CBus(Protocol):
    """Register access the driver needs from an I2C bus."""

    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, register: int, length: int) -> bytes: ...


class MPU9250:
    """Reads acceleration (g), angular rate (deg/s) and raw magnetic field."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS) -> None:
        self.bus = bus
        self.address = address

    def _write_register(self, address: int, register: int, value: int) -> None:
        self.bus.write(address, bytes((register, value)))

    def begin(self) -> bool:
        """Wake the device, enable magnetometer bypass and start continuous mode."""
        self._write_register(self.address, PWR_MGMT_1, 0x00)
        time.sleep(0.1)
        self._write_register(self.address, INT_PIN_CFG, _BYPASS_ENABLE)
        time.sleep(0.01)
        self._write_register(AK8963_ADDRESS, AK8963_CNTL1, _MAG_CONTINUOUS_16BIT_100HZ)
        time.sleep(0.01)
        return True

    def read_accel_gyro(self) -> tuple[float, float, float, float, float, float] | None:
        """Return (ax, ay, az, gx, gy, gz), or None on a short read."""
        buf = bytes(self.bus.read(self.address, ACCEL_XOUT_H, _MOTION_BLOCK))
        if len(buf) < _MOTION_BLOCK:
            return None
        ax, ay, az, _temp, gx, gy, gz = struct.unpack(">7h", buf[:_MOTION_BLOCK])
        return (
            ax / ACCEL_LSB_PER_G,
            ay / ACCEL_LSB_PER_G,
            az / ACCEL_LSB_PER_G,
            gx / GYRO_LSB_PER_DPS,
            gy / GYRO_LSB_PER_DPS,
            gz / GYRO_LSB_PER_DPS,
        )

    def read_mag(self) -> tuple[float, float, float] | None:
        """Return raw (mx, my, mz), or None if no fresh sample is ready."""
        buf = bytes(self.bus.read(AK8963_ADDRESS, AK8963_ST1, _MAG_BLOCK))
        if len(buf) < _MAG_BLOCK or not buf[0] & _MAG_DATA_READY:
            return None
        x, y, z = struct.unpack("<3h", buf[1:_MAG_BLOCK])
        return (float(x), float(y), float(z))