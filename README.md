# minerover

Control building blocks for a small mine-detection rover: motor drivers and a
differential drive, an orientation filter and IMU fusion, a PID controller,
ultrasonic obstacle avoidance, metal detection, battery and gas sensing, and
climate actuators.

Hardware is always reached through callables or backend objects that you pass
in (ADC readers, a GPIO backend, an I2C bus, a clock). Every part can
therefore run against real devices or against plain Python values.

## Modules

| Module | Contents |
| --- | --- |
| `minerover.config` | Pin map, thresholds and tuning constants |
| `minerover.madgwick` | `Madgwick` AHRS filter (gyro, accelerometer, magnetometer to quaternion, yaw/pitch/roll) |
| `minerover.pid` | `PIDController` with output clamping |
| `minerover.power` | `PowerManager`: battery voltage, charge percentage, low-battery check |
| `minerover.mq2` | `MQ2Sensor`: gas reading as a 0..1 fraction, smoke threshold check |
| `minerover.motor` | `Motor` for BTS7960 and L298N drivers, `GpioBackend` protocol, `RecordingGpio` in-memory backend |
| `minerover.drive` | `Drive`: left and right motors commanded together |
| `minerover.obstacle` | `echo_to_cm`, `UltrasonicSensor`, `ObstacleAvoider` |
| `minerover.metal_detector` | `MetalDetectorNE555` (frequency shift), `MetalDetector` (single pin, debounced), `CalibrationError` |
| `minerover.mpu9250` | `MPU9250` register-level driver over an `I2CBus`, `to_int16` |
| `minerover.imu_fusion` | `IMUFusion`: heading from a 9-axis sensor with magnetometer hard-iron calibration |
| `minerover.compass` | `IMUCompass`: heading from horizontal magnetic field |
| `minerover.rover` | `DHT11Sensor`, `RoverData`, `MineDetectionRover` with heater/cooler outputs |
| `minerover.teleop` | `key_to_speeds`, `apply_key` for single-key driving |

## Examples

### Driving motors

```python
from minerover.drive import Drive
from minerover.motor import Motor, RecordingGpio
from minerover.teleop import apply_key

gpio = RecordingGpio()
left = Motor.l298n(gpio, 26, 27, 25, 0)
right = Motor.l298n(gpio, 14, 12, 13, 2)
drive = Drive(left, right)
drive.begin()

apply_key(drive, "w")     # forward: (150, 150)
print(gpio.levels)         # latest level of every pin written
apply_key(drive, "x")     # stop
```

Speeds run from -255 to 255; the sign gives the direction. Keys `w`, `s`,
`a`, `d` move, `x` stops, and `apply_key` returns `False` for any other key.
Replace `RecordingGpio` with any object that provides the `GpioBackend`
methods (`pin_mode`, `digital_write`, `pwm_setup`, `pwm_attach`, `pwm_write`)
to drive real pins.

### A PID loop

```python
from minerover.pid import PIDController

pid = PIDController(2.0, 0.01, 0.1, -255, 255)
command = pid.update(90.0, 75.0, 0.05)
```

### Orientation from IMU samples

```python
from minerover.madgwick import Madgwick

ahrs = Madgwick(0.1)
# gyro in deg/s, accel in g, magnetometer in any consistent unit, dt in seconds
ahrs.update(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.3, 0.0, 0.5, 0.01)
print(ahrs.quaternion(), ahrs.yaw(), ahrs.pitch(), ahrs.roll())
```

`IMUFusion` wraps this filter around a sensor such as `MPU9250`. Its clock
returns seconds, and magnetometer offsets found by
`start_mag_calibration` / `stop_mag_calibration` are saved in the mapping
passed as `store` under the keys `ox`, `oy`, `oz`.

### Obstacle avoidance

```python
from minerover.obstacle import ObstacleAvoider, UltrasonicSensor

left = UltrasonicSensor(lambda: 1000.0)   # echo time in microseconds
right = UltrasonicSensor(lambda: 5000.0)
avoider = ObstacleAvoider(left, right, 40.0)
print(left.get_distance())                 # cm
print(avoider.check())                     # (left, right) speeds, or None
```

### Metal detection

`MetalDetectorNE555` counts oscillator edges reported through `pulse()`.
Call `begin()`, then `calibrate()` (blocking for the calibration period, with
no metal nearby; it returns the baseline frequency and raises
`CalibrationError` if `begin()` was not called or no sample was taken), then
`update()` regularly. `is_metal_detected()`, `confidence()` (0..100),
`current_frequency()` and `frequency_deviation()` report the state.

`MetalDetector` reads a digital and an analog level; `check_debounced()`
returns `True` once per rising edge that stays stable for 150 ms, and
`format_event(tag, lat, lon)` builds a `timestamp,tag,lat,lon,raw` CSV line.

### Battery, gas and climate

```python
from minerover.mq2 import MQ2Sensor
from minerover.power import PowerManager

battery = PowerManager(lambda: 3900)       # raw 12-bit ADC reading
print(battery.read_voltage(), battery.read_percentage(), battery.is_battery_low())

gas = MQ2Sensor(lambda: 2500)
print(gas.read_fraction(), gas.is_smoke_detected(0.5))
```

`MineDetectionRover` combines an `UltrasonicSensor`, a `DHT11Sensor` and a
GPIO backend: `collect_data()` returns a `RoverData`, and
`update_actuators(data)` switches the heater below 18 °C and the cooler above
28 °C, returning a status line (or `None` when the temperature could not be
read).

## What the package does not do

The package provides the rover's parts, not a whole rover program. It has no
GPS parsing or position filtering, no waypoint navigation or search-pattern
planning, no radio link, no log file storage, and no mission controller that
reads commands and reports telemetry. There is no command-line entry point;
the caller owns the main loop and wires the parts together.

## Tests

The tests use pytest and need no hardware:

```
pip install .[test]
pytest
```