import pytest

from minerover.compass import IMUCompass


def test_field_along_y_gives_ninety_degrees():
    assert IMUCompass(lambda: (0.0, 1.0, 0.0)).read_heading() == pytest.approx(90.0)


def test_negative_angle_wraps_into_range():
    assert IMUCompass(lambda: (0.0, -1.0, 0.0)).read_heading() == pytest.approx(270.0)


@pytest.mark.parametrize(
    "field",
    [(1.0, 0.0, 0.0), (-1.0, 0.0, 0.0), (0.3, -0.7, 0.2), (-0.5, -0.5, 1.0), (2.0, 3.0, -1.0)],
)
def test_heading_always_in_range(field):
    heading = IMUCompass(lambda: field).read_heading()
    assert 0.0 <= heading < 360.0


@pytest.mark.parametrize("offset", [30.0, 300.0])
def test_offset_shifts_heading(offset):
    compass = IMUCompass(lambda: (0.0, 1.0, 0.0))
    base = compass.read_heading()
    compass.offset = offset
    shifted = compass.read_heading()
    assert 0.0 <= shifted < 360.0
    assert (shifted - base) % 360.0 == pytest.approx(offset)


def test_calibrate_resets_offset():
    compass = IMUCompass(lambda: (0.5, 0.5, 0.0))
    base = compass.read_heading()
    compass.offset = 45.0
    assert compass.read_heading() != pytest.approx(base)
    compass.calibrate()
    assert compass.offset == 0.0
    assert compass.read_heading() == pytest.approx(base)