"""
Cold room heat-load engine.

Chilled storage above the product freezing point. All components are rates
in kW: transmission uses U*A*ΔT without duty hours, the product load is
spread over the pull-down time, and equipment, occupancy and lighting are
averaged over the day. Heaters run continuously.
"""

from typing import Dict, Tuple
import logging

from heatload.core.config import CEILING_FLOOR_REDUCED, ColdRoomConfig
from heatload.core.constants import REDUCED_CEILING_FLOOR_FACTOR, SECONDS_PER_HOUR
from heatload.engines.base import EngineInputs, EngineType, HeatLoadEngine
from heatload.models import HEATER_CATEGORIES, CalculationResults
from heatload.physics.thermal import (
    FreezingRegime,
    ProductLoad,
    air_change_volume_load_kw,
    continuous_heater_load_kw,
    daily_average_load_kw,
    product_energy,
    product_load_kw,
    respiration_load_kw,
    transmission_load_kw,
)

logger = logging.getLogger(__name__)


class ColdRoomEngine(HeatLoadEngine):
    """
    Heat-load engine for cold rooms.

    The ceiling and floor see the full wall ΔT unless the config selects the
    ``reduced`` policy of the legacy sheet (30% of the wall ΔT). The air
    change load scales with room volume.

    Example:
        >>> engine = ColdRoomEngine()
        >>> results = engine.calculate()
        >>> round(results.total_load_tr, 2)
        2.02
    """

    engine_type = EngineType.COLD_ROOM
    component_unit = "kW"

    def __init__(self, config: ColdRoomConfig = None) -> None:
        super().__init__(config)

    def transmission_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        wall_dt = inputs.temp_diff
        if self.config.ceiling_floor_policy == CEILING_FLOOR_REDUCED:
            ceiling_dt = wall_dt * REDUCED_CEILING_FLOOR_FACTOR
        else:
            ceiling_dt = wall_dt

        return {
            "wall": transmission_load_kw(inputs.wall_u_factor, inputs.wall_area, wall_dt),
            "ceiling": transmission_load_kw(inputs.ceiling_u_factor, inputs.ceiling_area, ceiling_dt),
            "floor": transmission_load_kw(inputs.floor_u_factor, inputs.floor_area, ceiling_dt),
            "wall_temp_diff": wall_dt,
            "ceiling_temp_diff": ceiling_dt,
            "floor_temp_diff": ceiling_dt,
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
        return product_load_kw(energy, product.pull_down_hours)

    def respiration_load(self, inputs: EngineInputs) -> float:
        return respiration_load_kw(inputs.respiration_mass, inputs.product.respiration_watts_per_tonne)

    def air_change_load(self, inputs: EngineInputs) -> float:
        misc = inputs.misc
        return air_change_volume_load_kw(
            misc.air_change_rate,
            inputs.volume,
            misc.enthalpy_diff,
            misc.air_change_hours,
            self.config.air_change_constant,
        )

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


def calculate_cold_room_heat_load(room=None, product=None, misc=None) -> CalculationResults:
    """
    Calculate the heat load of a cold room with the default engine config.

    Args:
        room: RoomData, engine defaults for omitted fields
        product: ProductData, engine defaults for omitted fields
        misc: MiscellaneousData, engine defaults for omitted fields

    Returns:
        CalculationResults with components in kW
    """
    return ColdRoomEngine().calculate(room, product, misc)
