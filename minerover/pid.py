"""Simple PID controller with output clamping."""

from __future__ import annotations


class PIDController:
    """Proportional-integral-derivative controller."""

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        out_min: float = -255.0,
        out_max: float = 255.0,
    ) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.out_min = out_min
        self.out_max = out_max
        self._integrator = 0.0
        self._prev_error = 0.0

    def set_tunings(self, kp: float, ki: float, kd: float) -> None:
        self.kp, self.ki, self.kd = kp, ki, kd

    def set_output_limits(self, minimum: float, maximum: float) -> None:
        self.out_min, self.out_max = minimum, maximum

    def update(self, setpoint: float, measured: float, dt: float) -> float:
        """Return the clamped control output for one step of dt seconds."""
        error = setpoint - measured
        self._integrator += error * dt
        derivative = (error - self._prev_error) / dt if dt > 0.0 else 0.0
        out = self.kp * error + self.ki * self._integrator + self.kd * derivative
        out = min(out, self.out_max)
        out = max(out, self.out_min)
        self._prev_error = error
        return out