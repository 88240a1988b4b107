"""Madgwick gradient-descent AHRS orientation filter."""

from __future__ import annotations

import math


class Madgwick:
    """Fuses gyroscope, accelerometer and magnetometer readings into a quaternion."""

    def __init__(self, beta: float = 0.1) -> None:
        self.beta = beta
        self.sample_freq: float | None = None
        self._q = (1.0, 0.0, 0.0, 0.0)

    def begin(self, sample_freq: float) -> None:
        """Record the nominal sample rate; updates integrate with their own dt."""
        self.sample_freq = sample_freq

    def quaternion(self) -> tuple[float, float, float, float]:
        return self._q

    def yaw(self) -> float:
        q0, q1, q2, q3 = self._q
        return math.degrees(math.atan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3)))

    def pitch(self) -> float:
        q0, q1, q2, q3 = self._q
        value = max(-1.0, min(1.0, 2.0 * (q0 * q2 - q3 * q1)))
        return math.degrees(math.asin(value))

    def roll(self) -> float:
        q0, q1, q2, q3 = self._q
        return math.degrees(math.atan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2)))

    def update(self, gx, gy, gz, ax, ay, az, mx, my, mz, dt) -> None:
        """Advance the filter by dt seconds; gyro in deg/s.

        Readings with a zero accelerometer or magnetometer vector are ignored.
        """
        q0, q1, q2, q3 = self._q
        gx, gy, gz = math.radians(gx), math.radians(gy), math.radians(gz)

        norm = math.sqrt(ax * ax + ay * ay + az * az)
        if norm == 0.0:
            return
        ax, ay, az = ax / norm, ay / norm, az / norm

        norm = math.sqrt(mx * mx + my * my + mz * mz)
        if norm == 0.0:
            return
        mx, my, mz = mx / norm, my / norm, mz / norm

        q0q0, q1q1, q2q2, q3q3 = q0 * q0, q1 * q1, q2 * q2, q3 * q3

        # Reference direction of Earth's magnetic field
        hx = mx * (q0q0 + q1q1 - q2q2 - q3q3) + my * (2.0 * (q1 * q2 - q0 * q3)) + mz * (2.0 * (q1 * q3 + q0 * q2))
        hy = mx * (2.0 * (q1 * q2 + q0 * q3)) + my * (q0q0 - q1q1 + q2q2 - q3q3) + mz * (2.0 * (q2 * q3 - q0 * q1))
        bx = math.sqrt(hx * hx + hy * hy)
        bz = mx * (2.0 * (q1 * q3 - q0 * q2)) + my * (2.0 * (q2 * q3 + q0 * q1)) + mz * (q0q0 - q1q1 - q2q2 + q3q3)

        # Gradient descent corrective step
        f1 = 2.0 * (q1 * q3 - q0 * q2) - ax
        f2 = 2.0 * (q0 * q1 + q2 * q3) - ay
        f3 = 2.0 * (0.5 - q1q1 - q2q2) - az
        f4 = 2.0 * bx * (0.5 - q2q2 - q3q3) + 2.0 * bz * (q1 * q3 - q0 * q2) - mx
        f5 = 2.0 * bx * (q1 * q2 - q0 * q3) + 2.0 * bz * (q0 * q1 + q2 * q3) - my
        f6 = 2.0 * bx * (q0 * q2 + q1 * q3) + 2.0 * bz * (0.5 - q1q1 - q2q2) - mz

        s0 = -f2 * q2 + f1 * q3 - f4 * q2 + f5 * q3 - f6 * q1
        s1 = f2 * q1 + f3 * q2 - f1 * q0 + f4 * q3 - f5 * q0 + f6 * q2
        s2 = -f3 * q1 + f2 * q0 + f1 * q3 - f4 * q0 + f5 * q3 - f6 * q3
        s3 = f1 * q1 + f2 * q0 - f3 * q3 + f4 * q1 - f5 * q2 + f6 * q0

        step_norm = math.sqrt(s0 * s0 + s1 * s1 + s2 * s2 + s3 * s3)
        if step_norm > 0.0:
            s0, s1, s2, s3 = s0 / step_norm, s1 / step_norm, s2 / step_norm, s3 / step_norm

        beta = self.beta
        q_dot0 = 0.5 * (-q1 * gx - q2 * gy - q3 * gz) - beta * s0
        q_dot1 = 0.5 * (q0 * gx + q2 * gz - q3 * gy) - beta * s1
        q_dot2 = 0.5 * (q0 * gy - q1 * gz + q3 * gx) - beta * s2
        q_dot3 = 0.5 * (q0 * gz + q1 * gy - q2 * gx) - beta * s3

        q0 += q_dot0 * dt
        q1 += q_dot1 * dt
        q2 += q_dot2 * dt
        q3 += q_dot3 * dt

        norm = math.sqrt(q0 * q0 + q1 * q1 + q2 * q2 + q3 * q3)
        self._q = (q0 / norm, q1 / norm, q2 / norm, q3 / norm)