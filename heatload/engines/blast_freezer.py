"""
Blast freezer heat-load engine.

Batch freezing. Every component is an energy in kJ accumulated over its own
duty hours, following the workbook rows:

    transmission  ((ΔT * A * U) / 1000) * 3600 * hours
    product       phase energy * batch_hours / pull_down_hours
    air change    rate * Δh * 3600 * hours
    equipment     kW * count * 3600 * hours
    lighting      kW * 3.6 * hours
    heaters       kW * count * 3600 * hours

The batch total is converted to a rate with kW = kJ / (3600 * batch_hours).
"""

from typing import Dict, Tuple
import logging

from heatload.core.config import PHASE_POLICY_REGIME, BlastFreezerConfig
from heatload.core.constants import SECONDS_PER_HOUR
from heatload.engines.base import EngineInputs, EngineType, HeatLoadEngine
from heatload.models import HEATER_CATEGORIES, CalculationResults
from heatload.physics.thermal import (
    FreezingRegime,
    ProductLoad,
    air_change_load_kj,
    classify_freezing_regime,
    duty_energy_kj,
    lighting_energy_kj,
    product_energy,
    product_load_batch_kj,
    respiration_load_kw,
    safe_divide,
    segment_product_energy,
    transmission_load_kj,
)

logger = logging.getLogger(__name__)


class BlastFreezerEngine(HeatLoadEngine):
    """
    Heat-load engine for blast freezers.

    With the default ``spreadsheet`` product policy a product that reaches
    or starts below its freezing point has all three freezing segments
    evaluated from their own spans. A product that stays above freezing, or
    has no freezing point, only carries sensible heat above freezing. The
    ``regime`` policy applies the same freezing-regime selection as the
    rate engines.

    Example:
        >>> engine = BlastFreezerEngine()
        >>> results = engine.calculate()
        >>> round(results.total_load_tr, 1)
        6.9
    """

    engine_type = EngineType.BLAST_FREEZER
    component_unit = "kJ"

    def __init__(self, config: BlastFreezerConfig = None) -> None:
        super().__init__(config)

    def transmission_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        room = inputs.room
        dt = inputs.temp_diff
        return {
            "wall": transmission_load_kj(inputs.wall_u_factor, inputs.wall_area, dt, room.wall_hours),
            "ceiling": transmission_load_kj(inputs.ceiling_u_factor, inputs.ceiling_area, dt, room.ceiling_hours),
            "floor": transmission_load_kj(inputs.floor_u_factor, inputs.floor_area, dt, room.floor_hours),
            "wall_temp_diff": dt,
            "ceiling_temp_diff": dt,
            "floor_temp_diff": dt,
        }

    def product_load(self, inputs: EngineInputs) -> ProductLoad:
        product = inputs.product
        args = (
            inputs.mass,
            product.cp_above_freezing,
            product.cp_below_freezing,
            product.latent_heat,
            inputs.product_incoming,
            inputs.product_outgoing,
        )
        regime = classify_freezing_regime(
            inputs.product_incoming, inputs.product_outgoing, inputs.freezing_point
        )
        if self.config.product_phase_policy == PHASE_POLICY_REGIME or regime is FreezingRegime.ABOVE_FREEZING:
            energy = product_energy(*args, inputs.freezing_point)
        else:
            energy = segment_product_energy(*args, inputs.freezing_point)

        if energy.regime is FreezingRegime.CROSSING_FREEZING and not product.latent_heat:
            logger.warning(
                "%s: product %s crosses its freezing point with zero latent heat",
                self.name,
                product.name,
            )
        return product_load_batch_kj(energy, inputs.misc.batch_hours, product.pull_down_hours)

    def respiration_load(self, inputs: EngineInputs) -> float:
        rate_kw = respiration_load_kw(inputs.respiration_mass, inputs.product.respiration_watts_per_tonne)
        return rate_kw * SECONDS_PER_HOUR * inputs.misc.batch_hours

    def air_change_load(self, inputs: EngineInputs) -> float:
        misc = inputs.misc
        return air_change_load_kj(misc.air_change_rate, misc.enthalpy_diff, misc.air_change_hours)

    def miscellaneous_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        misc = inputs.misc
        loads = {
            "equipment": duty_energy_kj(misc.equipment_power_kw, misc.equipment_count, misc.equipment_hours),
            "occupancy": duty_energy_kj(misc.occupancy_heat_kw, misc.occupancy_count, misc.occupancy_hours),
            "light": lighting_energy_kj(misc.light_power_kw, misc.light_hours),
        }
        for category in HEATER_CATEGORIES:
            loads[f"{category}_heater"] = duty_energy_kj(
                getattr(misc, f"{category}_heater_kw"),
                getattr(misc, f"{category}_heater_count"),
                getattr(misc, f"{category}_heater_hours"),
            )
        return loads

    def convert_totals(self, total: float, inputs: EngineInputs) -> Tuple[float, float]:
        return safe_divide(total, SECONDS_PER_HOUR * inputs.misc.batch_hours), total


def calculate_blast_freezer_heat_load(room=None, product=None, misc=None) -> CalculationResults:
    """
    Calculate the heat load of a blast freezer batch with the default engine config.

    Returns:
        CalculationResults with components in kJ per batch
    """
    return BlastFreezerEngine().calculate(room, product, misc)
