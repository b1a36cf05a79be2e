"""Physics calculations for refrigeration heat loads."""

from heatload.physics.units import (
    convert_length,
    convert_mass,
    convert_temperature,
    convert_temperature_difference,
    convert_area,
    convert_volume,
)
from heatload.physics.insulation import (
    resistance_u_factor,
    lookup_u_factor,
    surface_u_factor,
)
from heatload.physics.thermal import (
    FreezingRegime,
    ProductLoad,
    classify_freezing_regime,
    product_energy,
    segment_product_energy,
    transmission_load_kw,
    transmission_load_kj,
    required_air_flow_cfm,
)

__all__ = [
    "convert_length",
    "convert_mass",
    "convert_temperature",
    "convert_temperature_difference",
    "convert_area",
    "convert_volume",
    "resistance_u_factor",
    "lookup_u_factor",
    "surface_u_factor",
    "FreezingRegime",
    "ProductLoad",
    "classify_freezing_regime",
    "product_energy",
    "segment_product_energy",
    "transmission_load_kw",
    "transmission_load_kj",
    "required_air_flow_cfm",
]
