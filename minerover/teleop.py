"""Single-key manual driving commands."""

from __future__ import annotations

from typing import Protocol

STOP_KEY = "x"

_KEY_SPEEDS: dict[str, tuple[int, int]] = {
    "w": (150, 150),  # forward
    "s": (-120, -120),  # backward
    "a": (-80, 80),  # spin left
    "d": (80, -80),  # spin right
}


class _Drivable(Protocol):
    def set_speed(self, left: int, right: int) -> None: ...

    def stop(self) -> None: ...


def key_to_speeds(key: str) -> tuple[int, int] | None:
    """Return the (left, right) speeds for a motion key, or None for any other key."""
    return _KEY_SPEEDS.get(key)


def apply_key(drive: _Drivable, key: str) -> bool:
    """Apply a key press to the drive; return False if the key has no meaning."""
    if key == STOP_KEY:
        drive.stop()
        return True
    speeds = key_to_speeds(key)
    if speeds is None:
        return False
    drive.set_speed(*speeds)
    return True