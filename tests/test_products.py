"""Tests for the product preset catalogues."""

import unittest

from heatload.core.config import default_inputs
from heatload.engines import calculate_cold_room_heat_load
from heatload.models import ProductData
from heatload.products import (
    COLD_ROOM_CATALOGUE,
    FROZEN_CATALOGUE,
    apply_preset,
    get_preset,
    list_presets,
)


class TestPresetLookup(unittest.TestCase):
    """Test preset lookup and listing."""

    def test_get_cold_room_preset(self):
        """Test a cold room preset with respiration."""
        preset = get_preset("Apple")
        self.assertEqual(preset.cp_above_freezing, 3.6)
        self.assertEqual(preset.freezing_point, -1.5)
        self.assertEqual(preset.respiration_watts_per_tonne, 250)
        self.assertIsNone(preset.latent_heat)

    def test_get_frozen_preset(self):
        """Test the workbook chicken values in the frozen catalogue."""
        preset = get_preset("Chicken", FROZEN_CATALOGUE)
        self.assertEqual(preset.cp_above_freezing, 3.74)
        self.assertEqual(preset.cp_below_freezing, 1.96)
        self.assertEqual(preset.latent_heat, 233)
        self.assertEqual(preset.freezing_point, -0.8)

    def test_lookup_is_case_insensitive(self):
        """Test names match regardless of case and padding."""
        self.assertEqual(get_preset("  ice cream ", FROZEN_CATALOGUE).name, "Ice Cream")

    def test_unknown_preset(self):
        """Test an unknown preset raises ValueError."""
        with self.assertRaises(ValueError):
            get_preset("Unobtainium")

    def test_unknown_catalogue(self):
        """Test an unknown catalogue raises ValueError."""
        with self.assertRaises(ValueError):
            get_preset("Apple", "chilled")

    def test_list_presets(self):
        """Test listing a whole catalogue keeps table order."""
        presets = list_presets(COLD_ROOM_CATALOGUE)
        self.assertEqual(presets[0].name, "Custom")
        self.assertGreater(len(presets), 40)

    def test_list_by_category(self):
        """Test filtering by category."""
        fruits = list_presets(COLD_ROOM_CATALOGUE, category="fruits")
        self.assertTrue(fruits)
        self.assertTrue(all(p.category == "Fruits" for p in fruits))
        dairy = list_presets(FROZEN_CATALOGUE, category="Dairy Products")
        self.assertIn("Ice Cream", [p.name for p in dairy])


class TestApplyPreset(unittest.TestCase):
    """Test applying presets to product records."""

    def test_apply_cold_room_preset(self):
        """Test thermal properties change while mass and temperatures stay."""
        _, product, _ = default_inputs("cold_room")
        apple = apply_preset(product, "Apple")
        self.assertEqual(apple.name, "Apple")
        self.assertEqual(apple.cp_above_freezing, 3.6)
        self.assertEqual(apple.respiration_watts_per_tonne, 250)
        self.assertEqual(apple.mass, product.mass)
        self.assertEqual(apple.entering_temp, product.entering_temp)
        # No tabulated latent heat: the product's own value is kept
        self.assertEqual(apple.latent_heat, product.latent_heat)

    def test_apply_frozen_preset(self):
        """Test a frozen preset sets latent heat."""
        _, product, _ = default_inputs("blast_freezer")
        butter = apply_preset(product, "Butter", FROZEN_CATALOGUE)
        self.assertEqual(butter.latent_heat, 120)
        self.assertEqual(butter.freezing_point, -3.2)

    def test_apply_preset_converts_freezing_point(self):
        """Test the freezing point follows a Fahrenheit product."""
        product = ProductData(mass=100, entering_temp=86, final_temp=39.2, temp_unit="F")
        ice = apply_preset(product, "Ice")
        self.assertAlmostEqual(ice.freezing_point, 32.0, places=9)

    def test_preset_changes_load(self):
        """Test a higher-respiration preset raises the respiration load."""
        room, product, misc = default_inputs("cold_room")
        base = calculate_cold_room_heat_load(room, product, misc)
        banana = calculate_cold_room_heat_load(room, apply_preset(product, "Banana"), misc)
        self.assertGreater(banana.respiration_load, base.respiration_load)


if __name__ == "__main__":
    unittest.main()
