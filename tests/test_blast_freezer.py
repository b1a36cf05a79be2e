"""Tests for the blast freezer heat-load engine."""

import unittest

from heatload.core.config import BlastFreezerConfig
from heatload.engines import BlastFreezerEngine, calculate_blast_freezer_heat_load
from heatload.models import MiscellaneousData, ProductData, RoomData
from heatload.physics.thermal import FreezingRegime


class TestBlastFreezerDefaults(unittest.TestCase):
    """Test the blast freezer against the reference workbook inputs."""

    @classmethod
    def setUpClass(cls):
        cls.results = calculate_blast_freezer_heat_load()

    def test_engine_identity(self):
        """Test result metadata."""
        self.assertEqual(self.results.engine, "blast_freezer")
        self.assertEqual(self.results.component_unit, "kJ")

    def test_transmission(self):
        """Test kJ over 8 h with the 150 mm panel U of 0.153."""
        r = self.results
        self.assertEqual(r.wall_temp_diff, 78)
        self.assertAlmostEqual(r.wall_load, 24058.944, places=3)
        self.assertAlmostEqual(r.ceiling_load, 8592.48, places=3)
        self.assertAlmostEqual(r.floor_load, 8592.48, places=3)
        self.assertAlmostEqual(r.total_transmission_load, 41243.904, places=3)

    def test_product_segments(self):
        """Test the three workbook segments for -5 -> -30 °C chicken."""
        r = self.results
        self.assertAlmostEqual(r.before_freezing_load, -23034.0, places=3)
        self.assertAlmostEqual(r.latent_heat_load, 466000.0, places=3)
        self.assertAlmostEqual(r.after_freezing_load, 121124.0, places=3)
        self.assertAlmostEqual(r.total_product_load, 564090.0, places=3)
        self.assertEqual(r.product_regime, FreezingRegime.BELOW_FREEZING)

    def test_air_change(self):
        """Test rate * Δh * 3600 * hours."""
        self.assertAlmostEqual(self.results.air_change_load, 4233.6, places=6)

    def test_miscellaneous(self):
        """Test hours-scaled internal loads and heaters."""
        r = self.results
        self.assertAlmostEqual(r.equipment_load, 31968.0, places=6)
        self.assertAlmostEqual(r.occupancy_load, 1800.0, places=6)
        self.assertAlmostEqual(r.light_load, 0.432, places=9)
        self.assertAlmostEqual(r.peripheral_heater_load, 43200.0, places=6)
        self.assertAlmostEqual(r.door_heater_load, 7776.0, places=6)
        self.assertAlmostEqual(r.tray_heater_load, 3168.0, places=6)
        self.assertAlmostEqual(r.drain_heater_load, 1152.0, places=6)
        self.assertAlmostEqual(r.total_misc_load, 89064.432, places=3)

    def test_totals(self):
        """Test the batch total of about 6.9 TR before safety."""
        r = self.results
        self.assertAlmostEqual(r.total_load_kj, 698631.936, places=2)
        self.assertAlmostEqual(r.total_load_kw, 698631.936 / 28800, places=6)
        self.assertTrue(6.8 <= r.total_load_tr <= 7.0)
        self.assertAlmostEqual(r.capacity_tr, r.total_load_tr * 1.05, places=9)

    def test_kw_from_batch(self):
        """Test kW * 3600 * batch hours equals the batch kJ."""
        r = self.results
        self.assertAlmostEqual(r.total_load_kw * 3600 * 8, r.total_load_kj, places=4)

    def test_air_flow_uses_5k_coil(self):
        """Test the 75% sensible share over a 5 K (9 °F) coil."""
        r = self.results
        expected = r.refrigeration_capacity_btu_hr * 0.75 / (1.08 * 9)
        self.assertAlmostEqual(r.air_flow_cfm, expected, places=6)
        self.assertAlmostEqual(r.sensible_heat_kw, r.total_load_kw * 0.75, places=9)


class TestBlastFreezerConfig(unittest.TestCase):
    """Test blast freezer config variants."""

    def test_regime_policy(self):
        """Test the regime policy keeps only the below-freezing phase."""
        engine = BlastFreezerEngine(BlastFreezerConfig(product_phase_policy="regime"))
        r = engine.calculate()
        self.assertEqual(r.before_freezing_load, 0.0)
        self.assertEqual(r.latent_heat_load, 0.0)
        self.assertAlmostEqual(r.after_freezing_load, 2000 * 2.14 * 25, places=6)
        self.assertAlmostEqual(r.total_load_kj, 241541.936, places=2)

    def test_policies_agree_for_crossing_product(self):
        """Test both policies give the same load for a product that crosses."""
        product = ProductData(entering_temp=15, freezing_point=-1.7)
        spreadsheet = BlastFreezerEngine().calculate(product=product)
        regime = BlastFreezerEngine(BlastFreezerConfig(product_phase_policy="regime")).calculate(product=product)
        self.assertEqual(spreadsheet.product_regime, FreezingRegime.CROSSING_FREEZING)
        self.assertAlmostEqual(spreadsheet.total_product_load, regime.total_product_load, places=6)

    def test_chilled_only_product_has_no_latent_load(self):
        """Test a product that stays above freezing only carries sensible heat."""
        product = ProductData(entering_temp=10, final_temp=2, freezing_point=-1.7)
        spreadsheet = BlastFreezerEngine().calculate(product=product)
        regime = BlastFreezerEngine(BlastFreezerConfig(product_phase_policy="regime")).calculate(product=product)
        self.assertEqual(spreadsheet.product_regime, FreezingRegime.ABOVE_FREEZING)
        self.assertEqual(spreadsheet.latent_heat_load, 0.0)
        self.assertEqual(spreadsheet.after_freezing_load, 0.0)
        self.assertAlmostEqual(spreadsheet.before_freezing_load, 2000 * 3.49 * 8, places=6)
        self.assertAlmostEqual(spreadsheet.total_product_load, regime.total_product_load, places=9)

    def test_resistance_model(self):
        """Test switching the blast freezer to the resistance U model."""
        engine = BlastFreezerEngine(BlastFreezerConfig(u_factor_model="resistance"))
        self.assertLess(engine.calculate().wall_load, BlastFreezerEngine().calculate().wall_load)


class TestBlastFreezerInputs(unittest.TestCase):
    """Test batch scaling and duty hours."""

    def test_batch_scales_product(self):
        """Test product phases scale by batch / pull-down hours."""
        misc = MiscellaneousData(batch_hours=4)
        r = calculate_blast_freezer_heat_load(misc=misc)
        self.assertAlmostEqual(r.latent_heat_load, 466000.0 / 2, places=3)

    def test_zero_batch_hours(self):
        """Test zero batch hours give zero rate without dividing by zero."""
        r = calculate_blast_freezer_heat_load(misc=MiscellaneousData(batch_hours=0))
        self.assertEqual(r.total_product_load, 0.0)
        self.assertEqual(r.total_load_kw, 0.0)
        self.assertEqual(r.air_flow_cfm, 0.0)

    def test_zero_surface_hours(self):
        """Test zero duty hours remove the transmission load."""
        room = RoomData(wall_hours=0, ceiling_hours=0, floor_hours=0)
        r = calculate_blast_freezer_heat_load(room=room)
        self.assertEqual(r.total_transmission_load, 0.0)

    def test_untabulated_thickness(self):
        """Test a 90 mm panel uses the 150 mm row."""
        r = calculate_blast_freezer_heat_load(room=RoomData(wall_insulation_thickness=90))
        self.assertAlmostEqual(r.wall_load, 24058.944, places=3)

    def test_thin_panel_clamps(self):
        """Test a 20 mm panel clamps to U = 0.732."""
        r = calculate_blast_freezer_heat_load(room=RoomData(wall_insulation_thickness=20))
        self.assertAlmostEqual(r.wall_load, 78 * 70 * 0.732 / 1000 * 3600 * 8, places=3)

    def test_respiration_over_batch(self):
        """Test respiration converted to kJ over the batch."""
        product = ProductData(respiration_watts_per_tonne=100, freezing_point=-1.7)
        r = calculate_blast_freezer_heat_load(product=product)
        self.assertAlmostEqual(r.respiration_load, 0.2 * 3600 * 8, places=6)

    def test_pounds_input(self):
        """Test a product mass in pounds."""
        product = ProductData(mass=2000 / 0.453592, mass_unit="lb", freezing_point=-1.7)
        r = calculate_blast_freezer_heat_load(product=product)
        self.assertAlmostEqual(r.total_product_load, 564090.0, places=3)


if __name__ == "__main__":
    unittest.main()
