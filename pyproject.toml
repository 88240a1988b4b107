[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minerover"
version = "0.1.0"
description = "Control building blocks for a mine-detection rover: motors and drive, orientation fusion, PID, obstacle avoidance, metal and environment sensing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rover",
    "robotics",
    "ahrs",
    "madgwick",
    "imu",
    "mpu9250",
    "pid",
    "motor-driver",
    "metal-detector",
    "ultrasonic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minerover"]

[tool.hatch.build.targets.sdist]
include = ["minerover", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
