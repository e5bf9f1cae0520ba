"""Tests for wind values and wind group decoding."""

import unittest
from dataclasses import FrozenInstanceError

from metardecode.errors import (
    ConsistencyError,
    DirectionOutOfRangeError,
    IncompleteVariableRangeError,
    InvalidFormatError,
    NegativeGustSpeedError,
    NegativeSpeedError,
    VariableFromOutOfRangeError,
    VariableToOutOfRangeError,
)
from metardecode.units import SpeedUnits
from metardecode.wind import Wind, decode_wind_group


class TestWind(unittest.TestCase):
    """Test Wind construction and display."""

    def test_display_without_variable_winds(self):
        """Test display of a non-variable wind."""
        wind = Wind(210, 12, 17, SpeedUnits.KNOTS)
        self.assertEqual(wind.to_display_string(), "Wind direction 210°, speed 12KT gusting 17KT")
        self.assertFalse(wind.is_variable)

    def test_display_with_variable_winds(self):
        """Test display with a variable direction range."""
        wind = Wind(100, 7, 15, SpeedUnits.METERS_PER_SEC, 60, 130)
        self.assertEqual(
            wind.to_display_string(),
            "Wind direction 100°, speed 7MPS gusting 15MPS, variable from 60° to 130°",
        )
        self.assertTrue(wind.is_variable)

    def test_display_with_variable_from_zero(self):
        """Test a variable range starting at 0 degrees is still shown."""
        wind = Wind(30, 15, 26, SpeedUnits.MILES_PER_HOUR, 0, 80)
        self.assertEqual(
            wind.to_display_string(),
            "Wind direction 30°, speed 15MPH gusting 26MPH, variable from 0° to 80°",
        )

    def test_display_is_stable(self):
        """Test repeated calls render the same text."""
        wind = Wind(210, 12, 17, SpeedUnits.KNOTS, 60, 130)
        self.assertEqual(wind.to_display_string(), wind.to_display_string())
        self.assertTrue(wind.to_display_string().endswith(", variable from 60° to 130°"))

    def test_display_variable_direction(self):
        """Test VRB direction is shown as variable."""
        wind = Wind(None, 3, 3, SpeedUnits.KNOTS)
        self.assertEqual(wind.to_display_string(), "Wind direction variable, speed 3KT gusting 3KT")

    def test_boundaries_accepted(self):
        """Test 0 and 360 degrees are accepted."""
        Wind(0, 0, 0, SpeedUnits.KNOTS, 0, 360)
        Wind(360, 0, 0, SpeedUnits.KILOMETERS_PER_HR, 360, 0)

    def test_immutable(self):
        """Test fields cannot be reassigned."""
        wind = Wind(210, 12, 17, SpeedUnits.KNOTS)
        with self.assertRaises(FrozenInstanceError):
            wind.speed = 20

    def test_negative_speed(self):
        """Test a negative speed is rejected."""
        with self.assertRaises(NegativeSpeedError) as ctx:
            Wind(90, -5, 10, SpeedUnits.KNOTS)
        self.assertEqual(str(ctx.exception), "speed cannot be negative: -5")
        self.assertEqual(ctx.exception.field, "speed")
        self.assertEqual(ctx.exception.value, -5)

    def test_negative_gust_speed(self):
        """Test a negative gust speed is rejected."""
        with self.assertRaises(NegativeGustSpeedError) as ctx:
            Wind(50, 15, -7, SpeedUnits.MILES_PER_HOUR)
        self.assertEqual(str(ctx.exception), "gust_speed cannot be negative: -7")

    def test_direction_out_of_range(self):
        """Test directions outside 0-360 are rejected."""
        with self.assertRaises(DirectionOutOfRangeError) as ctx:
            Wind(361, 5, 10, SpeedUnits.METERS_PER_SEC)
        self.assertEqual(str(ctx.exception), "direction: 361, must be between 0 and 360 degrees")
        with self.assertRaises(DirectionOutOfRangeError):
            Wind(-1, 5, 10, SpeedUnits.METERS_PER_SEC)

    def test_only_variable_from(self):
        """Test variable_from without variable_to is rejected."""
        with self.assertRaises(IncompleteVariableRangeError) as ctx:
            Wind(10, 12, 16, SpeedUnits.KNOTS, 12)
        self.assertEqual(
            str(ctx.exception),
            "when using variable winds, both variable_from and variable_to must be given",
        )

    def test_only_variable_to(self):
        """Test variable_to without variable_from is rejected."""
        with self.assertRaises(IncompleteVariableRangeError):
            Wind(10, 12, 16, SpeedUnits.KNOTS, variable_to=40)

    def test_incomplete_range_is_consistency_error(self):
        """Test an incomplete range is a consistency error."""
        with self.assertRaises(ConsistencyError):
            Wind(10, 12, 16, SpeedUnits.KNOTS, 20)

    def test_variable_from_out_of_range(self):
        """Test variable_from above 360 is rejected."""
        with self.assertRaises(VariableFromOutOfRangeError) as ctx:
            Wind(10, 12, 16, SpeedUnits.KNOTS, 400, 10)
        self.assertEqual(ctx.exception.value, 400)

    def test_variable_to_out_of_range(self):
        """Test variable_to above 360 is rejected."""
        with self.assertRaises(VariableToOutOfRangeError) as ctx:
            Wind(10, 12, 16, SpeedUnits.KNOTS, 10, 400)
        self.assertEqual(str(ctx.exception), "variable_to: 400, must be between 0 and 360 degrees")

    def test_first_failing_check_wins(self):
        """Test speed is checked before gust speed and direction."""
        with self.assertRaises(NegativeSpeedError):
            Wind(400, -1, -1, SpeedUnits.KNOTS, 500)
        with self.assertRaises(NegativeGustSpeedError):
            Wind(400, 1, -1, SpeedUnits.KNOTS, 500)
        with self.assertRaises(DirectionOutOfRangeError):
            Wind(400, 1, 1, SpeedUnits.KNOTS, 500)
        with self.assertRaises(IncompleteVariableRangeError):
            Wind(100, 1, 1, SpeedUnits.KNOTS, 500)
        with self.assertRaises(VariableFromOutOfRangeError):
            Wind(100, 1, 1, SpeedUnits.KNOTS, 500, 500)


class TestDecodeWindGroup(unittest.TestCase):
    """Test wind group decoding."""

    def test_wind_with_gust(self):
        """Test a gusting wind group."""
        wind = decode_wind_group("21012G17KT")
        self.assertEqual(wind.direction, 210)
        self.assertEqual(wind.speed, 12)
        self.assertEqual(wind.gust_speed, 17)
        self.assertEqual(wind.speed_unit, SpeedUnits.KNOTS)
        self.assertEqual(wind.to_display_string(), "Wind direction 210°, speed 12KT gusting 17KT")

    def test_wind_without_gust(self):
        """Test the gust defaults to the sustained speed."""
        wind = decode_wind_group("12015KT")
        self.assertEqual(wind.speed, 15)
        self.assertEqual(wind.gust_speed, 15)

    def test_calm(self):
        """Test a calm wind group."""
        wind = decode_wind_group("00000KT")
        self.assertEqual(wind.direction, 0)
        self.assertEqual(wind.speed, 0)

    def test_variable_direction(self):
        """Test VRB gives no direction."""
        wind = decode_wind_group("VRB03KT")
        self.assertIsNone(wind.direction)
        self.assertEqual(wind.speed, 3)

    def test_meters_per_second(self):
        """Test MPS units."""
        wind = decode_wind_group("05010MPS")
        self.assertEqual(wind.speed_unit, SpeedUnits.METERS_PER_SEC)

    def test_three_digit_speed(self):
        """Test three digit speed and gust."""
        wind = decode_wind_group("270105G130KT")
        self.assertEqual(wind.speed, 105)
        self.assertEqual(wind.gust_speed, 130)

    def test_variable_group(self):
        """Test the variable direction group is applied."""
        wind = decode_wind_group("10007G15MPS", "060V130")
        self.assertEqual(
            wind.to_display_string(),
            "Wind direction 100°, speed 7MPS gusting 15MPS, variable from 60° to 130°",
        )

    def test_direction_out_of_range(self):
        """Test directions outside 0-360 are rejected."""
        with self.assertRaises(DirectionOutOfRangeError):
            decode_wind_group("37010KT")

    def test_variable_group_out_of_range(self):
        """Test a variable group above 360 degrees."""
        with self.assertRaises(VariableToOutOfRangeError):
            decode_wind_group("18010KT", "170V370")

    def test_invalid_groups(self):
        """Test groups with the wrong shape."""
        for group in ("", "21012", "2101KT", "21012G1KT", "21012KTS", "ABC12KT"):
            with self.assertRaises(InvalidFormatError, msg=group):
                decode_wind_group(group)

    def test_non_ascii_digits_rejected(self):
        """Test digits outside 0-9 do not pass the shape check."""
        for group in ("٢١٠١٢KT", "210١٢KT", "21012G١٧KT"):
            with self.assertRaises(InvalidFormatError, msg=group):
                decode_wind_group(group)
        with self.assertRaises(InvalidFormatError):
            decode_wind_group("21012KT", "١٨٠V240")

    def test_invalid_variable_group(self):
        """Test a malformed variable group."""
        with self.assertRaises(InvalidFormatError):
            decode_wind_group("21012KT", "60V130")

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = decode_wind_group("21012G17KT", "180V240").to_dict()
        self.assertEqual(data["speed_unit"], "KT")
        self.assertEqual(data["variable_from"], 180)
        self.assertEqual(data["variable_to"], 240)
        self.assertIn("variable from 180° to 240°", data["display"])


if __name__ == "__main__":
    unittest.main()
