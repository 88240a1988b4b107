"""Board wiring and tuning constants for the rover."""

# Ultrasonic sensor (front)
ULTRASONIC_TRIG_PIN = 33
ULTRASONIC_ECHO_PIN = 32
ULTRASONIC_FRONT_TRIG_PIN = 33
ULTRASONIC_FRONT_ECHO_PIN = 32

# Temperature / humidity sensor
DHT11_PIN = 4
DHT_TYPE = "DHT11"

BAUD_RATE = 115200

# Manual control power override
MANUAL_FORCE_MAX_POWER = True
MANUAL_MAX_POWER = 255

# Actuator pins
HEATER_LED_PIN = 15
COOLER_LED_PIN = 2

# Temperature thresholds (degrees Celsius)
TEMP_HEATER_THRESHOLD = 18
TEMP_COOLER_THRESHOLD = 28

MAX_DISTANCE = 400
MIN_DISTANCE = 2

# True selects L298N wiring, False the BTS7960 driver.
MOTOR_DRIVER_L298N = True

# BTS7960 pins
MOTOR_L_PWM_A = 25
MOTOR_L_PWM_B = 26
MOTOR_R_PWM_A = 27
MOTOR_R_PWM_B = 14

# L298N pins (IN1/IN2 + EN)
MOTOR_L_IN1_PIN = 26
MOTOR_L_IN2_PIN = 27
MOTOR_L_EN_PIN = 25
MOTOR_R_IN1_PIN = 14
MOTOR_R_IN2_PIN = 12
MOTOR_R_EN_PIN = 13

# True: PWM through ENA/ENB; False: enable pins held HIGH for full power.
L298N_USE_ENABLE_PINS = False

# Emergency stop input (active LOW)
E_STOP_PIN = 36

# PWM settings
MOTOR_PWM_FREQ = 20000
MOTOR_PWM_RESOLUTION = 8

# Battery monitoring
BATTERY_ADC_PIN = 35
BATTERY_VOLT_DIVIDER_RATIO = (100.0 + 33.0) / 33.0
BATTERY_FULL_VOLTAGE = 12.6
BATTERY_LOW_VOLTAGE = 10.5

# ADC characteristics (12-bit, approximate reference)
ADC_MAX = 4095
ADC_VREF = 3.3

# LoRa (SX1278) pins
LORA_MOSI_PIN = 23
LORA_MISO_PIN = 19
LORA_SCK_PIN = 18
LORA_SS_PIN = 5
LORA_RST_PIN = 22
LORA_DIO0_PIN = 21

# GPS serial pins
GPS_RX_PIN = 16
GPS_TX_PIN = 17

# Legacy single-pin metal detector
METAL_DETECTOR_PIN_OLD = 34

# NE555 frequency-based metal detector
NE555_OUTPUT_PIN = 39
NE555_CALIBRATION_DURATION_MS = 3000
NE555_SAMPLE_WINDOW_MS = 100
NE555_DETECTION_THRESHOLD_PCT = 15
NE555_SAMPLE_HISTORY_SIZE = 10

# MQ-2 smoke/gas sensor
MQ2_PIN = 34

# SD card logging
USE_SD = False
SD_CS_PIN = 13
SD_LOG_MAX_BYTES = 1024 * 512
SD_LOG_BACKUPS = 3

USE_IMU = False

# Without an IMU, GPS course is used as heading above this speed (m/s).
HEADING_FALLBACK_SPEED_THRESHOLD_MPS = 0.5