"""Control building blocks for a mine-detection rover: drive, orientation, obstacle, metal and environment sensing."""

__version__ = "0.1.0"