"""Tilt-uncompensated magnetic compass heading."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence


class IMUCompass:
    """Derives heading from the horizontal magnetic field components.

    ``read_magnetic`` returns the field as (x, y, z).
    """

    def __init__(self, read_magnetic: Callable[[], Sequence[float]]) -> None:
        self._read_magnetic = read_magnetic
        self.offset = 0.0

    def read_heading(self) -> float:
        """Heading in degrees, 0..360."""
        x, y = self._read_magnetic()[:2]
        heading = math.degrees(math.atan2(y, x)) + self.offset
        if heading < 0:
            heading += 360.0
        if heading >= 360.0:
            heading -= 360.0
        return heading

    def calibrate(self) -> None:
        """Reset the heading offset."""
        self.offset = 0.0