"""
Freezer room heat-load engine.

Frozen storage where the product is usually taken through its freezing
point. Components are rates in kW like the cold room, but every surface sees
the full ΔT and the air change load does not scale with room volume.
"""

from typing import Dict, Tuple
import logging

from heatload.core.config import FreezerConfig
from heatload.core.constants import SECONDS_PER_HOUR
from heatload.engines.base import EngineInputs, EngineType, HeatLoadEngine
from heatload.models import HEATER_CATEGORIES, CalculationResults
from heatload.physics.thermal import (
    FreezingRegime,
    ProductLoad,
    air_change_load_kw,
    continuous_heater_load_kw,
    daily_average_load_kw,
    product_energy,
    product_load_kw,
    respiration_load_kw,
    transmission_load_kw,
)

logger = logging.getLogger(__name__)


class FreezerEngine(HeatLoadEngine):
    """Heat-load engine for freezer rooms."""

    engine_type = EngineType.FREEZER
    component_unit = "kW"

    def __init__(self, config: FreezerConfig = None) -> None:
        super().__init__(config)

    def transmission_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        dt = inputs.temp_diff
        return {
            "wall": transmission_load_kw(inputs.wall_u_factor, inputs.wall_area, dt),
            "ceiling": transmission_load_kw(inputs.ceiling_u_factor, inputs.ceiling_area, dt),
            "floor": transmission_load_kw(inputs.floor_u_factor, inputs.floor_area, dt),
            "wall_temp_diff": dt,
            "ceiling_temp_diff": dt,
            "floor_temp_diff": dt,
        }

    def product_load(self, inputs: EngineInputs) -> ProductLoad:
        product = inputs.product
        energy = product_energy(
            inputs.mass,
            product.cp_above_freezing,
            product.cp_below_freezing,
            product.latent_heat,
            inputs.product_incoming,
            inputs.product_outgoing,
            inputs.freezing_point,
        )
        if energy.regime is FreezingRegime.CROSSING_FREEZING and not product.latent_heat:
            logger.warning(
                "%s: product %s crosses its freezing point with zero latent heat",
                self.name,
                product.name,
            )
        logger.debug("%s: product regime %s, %.1f kJ", self.name, energy.regime.value, energy.total)
        return product_load_kw(energy, product.pull_down_hours)

    def respiration_load(self, inputs: EngineInputs) -> float:
        return respiration_load_kw(inputs.respiration_mass, inputs.product.respiration_watts_per_tonne)

    def air_change_load(self, inputs: EngineInputs) -> float:
        misc = inputs.misc
        return air_change_load_kw(misc.air_change_rate, misc.enthalpy_diff, misc.air_change_hours)

    def miscellaneous_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        misc = inputs.misc
        loads = {
            "equipment": daily_average_load_kw(misc.equipment_power_kw, misc.equipment_count, misc.equipment_hours),
            "occupancy": daily_average_load_kw(misc.occupancy_heat_kw, misc.occupancy_count, misc.occupancy_hours),
            "light": daily_average_load_kw(misc.light_power_kw, 1, misc.light_hours),
        }
        for category in HEATER_CATEGORIES:
            loads[f"{category}_heater"] = continuous_heater_load_kw(
                getattr(misc, f"{category}_heater_kw"),
                getattr(misc, f"{category}_heater_count"),
            )
        return loads

    def convert_totals(self, total: float, inputs: EngineInputs) -> Tuple[float, float]:
        return total, total * SECONDS_PER_HOUR


def calculate_freezer_heat_load(room=None, product=None, misc=None) -> CalculationResults:
    """
    Calculate the heat load of a freezer room with the default engine config.

    Returns:
        CalculationResults with components in kW
    """
    return FreezerEngine().calculate(room, product, misc)
