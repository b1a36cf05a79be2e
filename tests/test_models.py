"""Tests for the input and result records."""

import dataclasses
import unittest

from heatload.core.config import default_inputs
from heatload.engines import calculate_blast_freezer_heat_load
from heatload.models import (
    MiscellaneousData,
    ProductData,
    RoomData,
    convert_units,
    fill_defaults,
)
from heatload.physics.thermal import FreezingRegime


class TestRecordValidation(unittest.TestCase):
    """Test construction-time validation of the input records."""

    def test_room_defaults_are_none(self):
        """Test an empty RoomData leaves every value to the engine defaults."""
        room = RoomData()
        self.assertIsNone(room.length)
        self.assertEqual(room.length_unit, "m")

    def test_room_rejects_bad_unit(self):
        """Test that an unsupported length unit raises ValueError."""
        with self.assertRaises(ValueError):
            RoomData(length=10, length_unit="yd")

    def test_room_rejects_non_positive_dimension(self):
        """Test that zero or negative dimensions raise ValueError."""
        with self.assertRaises(ValueError):
            RoomData(length=0)
        with self.assertRaises(ValueError):
            RoomData(height=-3)

    def test_room_rejects_negative_thickness(self):
        """Test that negative insulation thickness raises ValueError."""
        with self.assertRaises(ValueError):
            RoomData(wall_insulation_thickness=-10)

    def test_product_rejects_bad_units(self):
        """Test mass and temperature unit validation."""
        with self.assertRaises(ValueError):
            ProductData(mass_unit="oz")
        with self.assertRaises(ValueError):
            ProductData(temp_unit="K")

    def test_product_accepts_lbs_alias(self):
        """Test lbs is accepted as a mass unit."""
        self.assertEqual(ProductData(mass=100, mass_unit="lbs").mass_unit, "lbs")

    def test_product_rejects_negative_mass(self):
        """Test negative mass raises ValueError."""
        with self.assertRaises(ValueError):
            ProductData(mass=-1)

    def test_product_rejects_negative_pull_down_hours(self):
        """Test negative pull-down hours raise ValueError."""
        with self.assertRaises(ValueError):
            ProductData(pull_down_hours=-1)
        self.assertEqual(ProductData(pull_down_hours=0).pull_down_hours, 0)

    def test_misc_rejects_bad_unit(self):
        """Test that an unsupported temperature unit raises ValueError."""
        with self.assertRaises(ValueError):
            MiscellaneousData(temp_unit="R")

    def test_records_are_frozen(self):
        """Test that records cannot be mutated."""
        room = RoomData(length=5)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            room.length = 6  # type: ignore


class TestConvertUnits(unittest.TestCase):
    """Test re-expressing a record in other unit tags."""

    def test_room_to_feet(self):
        """Test dimensions follow a new length unit."""
        room = convert_units(RoomData(length=3.048, width=6.096, height=3.0), length_unit="ft")
        self.assertEqual(room.length_unit, "ft")
        self.assertAlmostEqual(room.length, 10.0, places=9)
        self.assertAlmostEqual(room.width, 20.0, places=9)

    def test_optional_fields_are_converted(self):
        """Test freezing point and product temperature overrides follow the unit."""
        product = convert_units(ProductData(freezing_point=0.0), temp_unit="F")
        self.assertAlmostEqual(product.freezing_point, 32.0, places=9)
        misc = convert_units(MiscellaneousData(product_incoming=100.0), temp_unit="F")
        self.assertAlmostEqual(misc.product_incoming, 212.0, places=9)
        self.assertIsNone(misc.product_outgoing)

    def test_same_unit_returns_record(self):
        """Test an unchanged unit returns the record itself."""
        room = RoomData(length=5)
        self.assertIs(convert_units(room, length_unit="m"), room)

    def test_unknown_unit_tag(self):
        """Test a unit tag the record does not have raises ValueError."""
        with self.assertRaises(ValueError):
            convert_units(RoomData(), mass_unit="lb")


class TestFillDefaults(unittest.TestCase):
    """Test filling None fields from an engine default record."""

    def test_fills_missing_fields(self):
        """Test None fields take the default record values."""
        default_room, _, _ = default_inputs("cold_room")
        room = fill_defaults(RoomData(length=6.0), default_room)
        self.assertEqual(room.length, 6.0)
        self.assertEqual(room.width, 4.5)
        self.assertEqual(room.height, 3.0)

    def test_optional_fields_stay_none(self):
        """Test U-factor overrides are not copied from the defaults."""
        default_room, _, _ = default_inputs("cold_room")
        room = fill_defaults(RoomData(), default_room)
        self.assertIsNone(room.wall_u_factor)
        self.assertEqual(room.wall_insulation_thickness, 100)

    def test_optional_misc_fields(self):
        """Test maximum storage and product temperature overrides stay None."""
        _, _, default_misc = default_inputs("freezer")
        misc = fill_defaults(MiscellaneousData(), default_misc)
        self.assertIsNone(misc.maximum_storage)
        self.assertIsNone(misc.product_incoming)
        self.assertEqual(misc.ambient_temp, 45)

    def test_defaults_follow_fahrenheit_record(self):
        """Test default temperatures are converted to a °F record."""
        _, _, default_misc = default_inputs("cold_room")
        misc = fill_defaults(MiscellaneousData(temp_unit="F", ambient_temp=113), default_misc)
        self.assertEqual(misc.ambient_temp, 113)
        self.assertAlmostEqual(misc.room_temp, 35.6, places=9)

    def test_defaults_follow_feet_record(self):
        """Test default dimensions are converted to a ft record."""
        default_room, _, _ = default_inputs("cold_room")
        room = fill_defaults(RoomData(length_unit="ft", height=9.84), default_room)
        self.assertEqual(room.height, 9.84)
        self.assertAlmostEqual(room.width, 4.5 / 0.3048, places=9)
        self.assertEqual(room.wall_insulation_thickness, 100)

    def test_defaults_follow_pound_record(self):
        """Test default mass is converted to a lb record, temperatures stay in °C."""
        _, default_product, _ = default_inputs("cold_room")
        product = fill_defaults(ProductData(mass_unit="lb"), default_product)
        self.assertAlmostEqual(product.mass, 4000 / 0.453592, places=6)
        self.assertEqual(product.entering_temp, 30)

    def test_defaults_follow_fahrenheit_product(self):
        """Test default product temperatures are converted to °F."""
        _, default_product, _ = default_inputs("cold_room")
        product = fill_defaults(ProductData(temp_unit="F"), default_product)
        self.assertAlmostEqual(product.entering_temp, 86.0, places=9)
        self.assertAlmostEqual(product.final_temp, 39.2, places=9)
        self.assertIsNone(product.freezing_point)

    def test_complete_record_is_returned_unchanged(self):
        """Test a record without None fields is returned as is."""
        _, product, _ = default_inputs("freezer")
        self.assertIs(fill_defaults(product, product), product)

    def test_type_mismatch(self):
        """Test that records of different types cannot be merged."""
        default_room, default_product, _ = default_inputs("freezer")
        with self.assertRaises(TypeError):
            fill_defaults(RoomData(), default_product)


class TestCalculationResults(unittest.TestCase):
    """Test the result record helpers."""

    @classmethod
    def setUpClass(cls):
        cls.results = calculate_blast_freezer_heat_load()

    def test_total_load_sums_components(self):
        """Test total_load is the sum of all component groups."""
        r = self.results
        expected = (
            r.total_transmission_load
            + r.total_product_load
            + r.respiration_load
            + r.air_change_load
            + r.total_misc_load
        )
        self.assertAlmostEqual(r.total_load, expected, places=6)
        self.assertAlmostEqual(r.total_load, r.total_load_kj, places=6)

    def test_component_shares_sum_to_one(self):
        """Test load group shares add up to 1."""
        shares = self.results.component_shares()
        self.assertAlmostEqual(sum(shares.values()), 1.0, places=9)
        self.assertGreater(shares["product"], shares["transmission"])

    def test_to_dict(self):
        """Test the dict view renders the regime as a string."""
        data = self.results.to_dict()
        self.assertEqual(data["product_regime"], FreezingRegime.BELOW_FREEZING.value)
        self.assertEqual(data["engine"], "blast_freezer")
        self.assertEqual(data["component_unit"], "kJ")
        self.assertIn("air_flow_cfm", data)


if __name__ == "__main__":
    unittest.main()
