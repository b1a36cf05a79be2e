"""
Product presets for the heat-load engines.

Two catalogues are shipped:

- ``cold_room``: chilled storage presets with specific heats, freezing point
  and heat of respiration. Latent heat is not tabulated.
- ``frozen``: freezer room and blast freezer presets with specific heats,
  latent heat of fusion and freezing point, grouped by category.

Usage:
    from heatload.products import apply_preset, list_presets

    product = apply_preset(product, "Chicken", "frozen")
    fruits = list_presets("cold_room", category="Fruits")
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional
import logging

from heatload.models import ProductData
from heatload.physics.units import convert_temperature

logger = logging.getLogger(__name__)

COLD_ROOM_CATALOGUE = "cold_room"
FROZEN_CATALOGUE = "frozen"

# Catalogue used by each engine when none is given
ENGINE_CATALOGUES = {
    "cold_room": COLD_ROOM_CATALOGUE,
    "freezer": FROZEN_CATALOGUE,
    "blast_freezer": FROZEN_CATALOGUE,
}


@dataclass(frozen=True)
class ProductPreset:
    """Thermal properties of a product (kJ/(kg·K), kJ/kg, °C, W/tonne)."""

    name: str
    category: str
    cp_above_freezing: float
    cp_below_freezing: float
    freezing_point: float
    latent_heat: Optional[float] = None
    respiration_watts_per_tonne: float = 0.0


def _cold(name, category, cp_above, cp_below, freezing_point, respiration=0.0):
    return ProductPreset(name, category, cp_above, cp_below, freezing_point, None, respiration)


def _frozen(name, category, cp_above, cp_below, latent_heat, freezing_point):
    return ProductPreset(name, category, cp_above, cp_below, freezing_point, latent_heat)


_COLD_ROOM_PRESETS = [
    _cold("Custom", "Custom", 4.1, 2.1, -2, 50),
    # Dairy
    _cold("Butter", "Dairy Products", 2.4, 1.8, -15),
    _cold("Cheese Fat", "Dairy Products", 2.8, 2.0, -10),
    _cold("Cheese Lean", "Dairy Products", 3.2, 2.2, -8),
    _cold("Curd", "Dairy Products", 3.6, 2.4, -3),
    _cold("Margarine", "Dairy Products", 2.5, 1.9, -12),
    _cold("Milk", "Dairy Products", 3.9, 2.8, -0.5),
    _cold("Dairy Mean Value", "Dairy Products", 3.2, 2.2, -5),
    # Fish
    _cold("Fish", "Fish & Seafood", 3.7, 2.5, -2),
    _cold("Fish Mean Value", "Fish & Seafood", 3.6, 2.4, -2),
    _cold("Sea Fish Fat", "Fish & Seafood", 3.4, 2.3, -2.5),
    _cold("Sea Fish Lean", "Fish & Seafood", 3.8, 2.6, -1.8),
    _cold("Sea Fish Smoked", "Fish & Seafood", 3.2, 2.2, -3),
    _cold("Shell Fish", "Fish & Seafood", 3.9, 2.7, -1.5),
    # Fruits
    _cold("Pineapple", "Fruits", 3.8, 2.1, -1.2, 120),
    _cold("Apple", "Fruits", 3.6, 2.0, -1.5, 250),
    _cold("Apricots", "Fruits", 3.7, 2.1, -1.1, 180),
    _cold("Banana", "Fruits", 4.1, 2.1, -2.0, 350),
    _cold("Cherries", "Fruits", 3.5, 1.9, -1.8, 200),
    _cold("Grapes", "Fruits", 3.4, 1.8, -2.1, 150),
    _cold("Mangoes", "Fruits", 3.7, 2.0, -1.3, 300),
    _cold("Fruit Mean Value", "Fruits", 3.6, 2.0, -1.6, 200),
    _cold("Melons", "Fruits", 3.9, 2.2, -0.8, 100),
    _cold("Pears", "Fruits", 3.5, 1.9, -1.6, 180),
    _cold("Strawberries", "Fruits", 3.8, 2.1, -0.9, 280),
    # Other
    _cold("Beer", "Other Food Items", 3.9, 2.8, -2.3),
    _cold("Bread", "Other Food Items", 2.8, 2.0, -5),
    _cold("Chocolate", "Other Food Items", 1.8, 1.4, -8),
    _cold("Cut Flowers", "Other Food Items", 3.7, 2.1, -1, 400),
    _cold("Dough", "Other Food Items", 3.2, 2.3, -3),
    _cold("Eggs", "Other Food Items", 3.1, 2.2, -2.2),
    _cold("Ice", "Other Food Items", 4.2, 2.1, 0),
    # Meat
    _cold("Meat", "Meat & Poultry", 3.35, 2.3, -1.7),
    _cold("Chicken", "Meat & Poultry", 3.4, 2.4, -1.5),
    _cold("Pig Fat", "Meat & Poultry", 2.8, 2.0, -3),
    _cold("Pig Lean", "Meat & Poultry", 3.6, 2.5, -1.8),
    # Vegetables
    _cold("Beans", "Vegetables", 3.2, 2.0, -0.6, 180),
    _cold("Cabbage", "Vegetables", 3.9, 2.2, -0.9, 140),
    _cold("Carrots", "Vegetables", 3.6, 2.0, -1.4, 160),
    _cold("Cucumber", "Vegetables", 4.0, 2.3, -0.5, 110),
    _cold("Lettuce", "Vegetables", 4.0, 2.3, -0.2, 200),
    _cold("Mushroom", "Vegetables", 3.8, 2.1, -0.9, 300),
    _cold("Onions", "Vegetables", 3.7, 2.1, -0.8, 120),
    _cold("Peas", "Vegetables", 3.4, 1.9, -0.6, 250),
    _cold("Potato", "Vegetables", 3.5, 1.9, -0.6, 120),
    _cold("Roots", "Vegetables", 3.5, 1.9, -1.0, 150),
    _cold("Sweet Potato", "Vegetables", 3.4, 1.9, -1.4, 140),
    _cold("Tomatoes", "Vegetables", 3.9, 2.2, -0.5, 200),
]

_FROZEN_PRESETS = [
    _frozen("Custom", "Custom", 3.74, 1.96, 233, -0.8),
    # Meat
    _frozen("Chicken", "Meat & Poultry", 3.74, 1.96, 233, -0.8),
    _frozen("Beef", "Meat & Poultry", 3.74, 1.96, 233, -0.8),
    _frozen("Pork", "Meat & Poultry", 3.6, 1.9, 240, -0.6),
    _frozen("Pig Fat", "Meat & Poultry", 2.8, 1.5, 180, -1.2),
    _frozen("Turkey", "Meat & Poultry", 3.4, 1.8, 215, -0.7),
    # Fish
    _frozen("Fish", "Fish & Seafood", 3.68, 1.89, 245, -1.2),
    _frozen("Sea Fish Fat", "Fish & Seafood", 3.4, 1.7, 220, -1.5),
    _frozen("Sea Fish Lean", "Fish & Seafood", 3.8, 1.9, 260, -1.0),
    _frozen("Sea Fish Smoked", "Fish & Seafood", 3.2, 1.6, 190, -2.0),
    _frozen("Shell Fish", "Fish & Seafood", 3.9, 2.0, 280, -0.8),
    _frozen("Salmon", "Fish & Seafood", 3.5, 1.8, 235, -1.1),
    # Dairy
    _frozen("Butter", "Dairy Products", 2.4, 1.3, 120, -3.2),
    _frozen("Cheese Fat", "Dairy Products", 2.8, 1.5, 160, -2.8),
    _frozen("Cheese Lean", "Dairy Products", 3.2, 1.7, 200, -1.8),
    _frozen("Curd", "Dairy Products", 3.6, 1.9, 220, -1.5),
    _frozen("Margarine", "Dairy Products", 2.5, 1.4, 130, -3.0),
    _frozen("Milk", "Dairy Products", 3.9, 2.0, 270, -0.5),
    _frozen("Ice Cream", "Dairy Products", 3.14, 1.72, 196, -2.8),
    # Vegetables
    _frozen("Vegetables", "Vegetables", 3.89, 2.05, 280, -0.5),
    _frozen("Beans (Frozen)", "Vegetables", 3.2, 1.7, 250, -0.6),
    _frozen("Carrots (Frozen)", "Vegetables", 3.6, 1.9, 270, -0.5),
    _frozen("Peas (Frozen)", "Vegetables", 3.4, 1.8, 260, -0.6),
    _frozen("Potato (Frozen)", "Vegetables", 3.5, 1.8, 270, -0.4),
    _frozen("Corn (Frozen)", "Vegetables", 3.3, 1.7, 255, -0.5),
    # Fruits
    _frozen("Apple (Frozen)", "Fruits", 3.6, 1.9, 275, -0.8),
    _frozen("Banana (Frozen)", "Fruits", 3.6, 1.9, 270, -0.7),
    _frozen("Strawberries (Frozen)", "Fruits", 3.8, 2.0, 285, -0.6),
    _frozen("Pineapple (Frozen)", "Fruits", 3.8, 2.1, 280, -1.2),
    _frozen("Grapes (Frozen)", "Fruits", 3.4, 1.8, 265, -2.1),
    # Other
    _frozen("Bread (Frozen)", "Other Products", 2.8, 1.5, 210, -2.0),
    _frozen("Dough (Frozen)", "Other Products", 3.2, 1.7, 240, -1.5),
    _frozen("Eggs (Frozen)", "Other Products", 3.1, 1.6, 200, -1.8),
]

PRODUCT_CATALOGUES: Dict[str, Dict[str, ProductPreset]] = {
    COLD_ROOM_CATALOGUE: {p.name.lower(): p for p in _COLD_ROOM_PRESETS},
    FROZEN_CATALOGUE: {p.name.lower(): p for p in _FROZEN_PRESETS},
}


def _catalogue(catalogue: str) -> Dict[str, ProductPreset]:
    if catalogue not in PRODUCT_CATALOGUES:
        raise ValueError(
            f"Unknown product catalogue {catalogue!r}; expected one of {tuple(PRODUCT_CATALOGUES)}"
        )
    return PRODUCT_CATALOGUES[catalogue]


def get_preset(name: str, catalogue: str = COLD_ROOM_CATALOGUE) -> ProductPreset:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        ValueError: If the catalogue or preset is unknown
    """
    presets = _catalogue(catalogue)
    key = name.strip().lower()
    if key not in presets:
        raise ValueError(f"Unknown product preset {name!r} in catalogue {catalogue!r}")
    return presets[key]


def list_presets(catalogue: str = COLD_ROOM_CATALOGUE, category: Optional[str] = None) -> List[ProductPreset]:
    """
    List the presets of a catalogue in table order.

    Args:
        catalogue: Catalogue name
        category: Only presets of this category (case-insensitive)
    """
    presets = list(_catalogue(catalogue).values())
    if category is None:
        return presets
    return [p for p in presets if p.category.lower() == category.lower()]


def apply_preset(product: ProductData, name: str, catalogue: str = COLD_ROOM_CATALOGUE) -> ProductData:
    """
    Return ``product`` with the thermal properties of a preset.

    Mass, temperatures and pull-down time are kept. A preset without a
    tabulated latent heat keeps the product's own value.
    """
    preset = get_preset(name, catalogue)
    values = {
        "name": preset.name,
        "cp_above_freezing": preset.cp_above_freezing,
        "cp_below_freezing": preset.cp_below_freezing,
        "freezing_point": preset.freezing_point,
        "respiration_watts_per_tonne": preset.respiration_watts_per_tonne,
    }
    if preset.latent_heat is not None:
        values["latent_heat"] = preset.latent_heat
    if product.temp_unit != "C":
        # Preset freezing points are tabulated in °C
        values["freezing_point"] = convert_temperature(preset.freezing_point, "C", product.temp_unit)
    logger.debug("Applied product preset %s from %s", preset.name, catalogue)
    return replace(product, **values)
