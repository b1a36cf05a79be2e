"""
Abstract base class for the heat-load engines.

Each product line (cold room, freezer room, blast freezer) has its own engine
subclass holding its own formulas and its own config dataclass. The base class
defines the common interface and the steps every engine shares:

- Filling ``None`` input fields from the engine's default records
- Converting inputs to metres, kilograms and degrees Celsius
- Resolving per-surface U-factors through the configured insulation model
- Aggregating components into kW, kJ, TR, BTU/hr, the sensible/latent split
  and the coil air quantity
- The storage capacity check

Subclasses compute the individual load components in their own unit.

Usage:
    from heatload.engines.base import HeatLoadEngine

    class MyEngine(HeatLoadEngine):
        engine_type = EngineType.COLD_ROOM
        component_unit = "kW"
        ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import logging

from heatload.core.config import create_engine_config, default_inputs
from heatload.models import (
    HEATER_CATEGORIES,
    CalculationResults,
    MiscellaneousData,
    ProductData,
    RoomData,
    fill_defaults,
)
from heatload.physics.insulation import surface_u_factor
from heatload.physics.thermal import (
    ProductLoad,
    capacity_with_margin,
    ceiling_area,
    check_storage_capacity,
    kw_to_tr,
    required_air_flow_cfm,
    room_volume,
    split_sensible_latent,
    tr_to_btu_hr,
    wall_area,
)
from heatload.physics.units import convert_length, convert_mass, convert_temperature

logger = logging.getLogger(__name__)


class EngineType(Enum):
    """Product lines with their own heat-load engine."""

    COLD_ROOM = "cold_room"
    FREEZER = "freezer"
    BLAST_FREEZER = "blast_freezer"


@dataclass(frozen=True)
class EngineInputs:
    """Inputs after default filling and conversion to m, kg and °C."""

    room: RoomData
    product: ProductData
    misc: MiscellaneousData

    length: float
    width: float
    height: float
    wall_area: float
    ceiling_area: float
    floor_area: float
    volume: float

    wall_u_factor: float
    ceiling_u_factor: float
    floor_u_factor: float

    ambient_temp: float
    room_temp: float
    product_incoming: float
    product_outgoing: float
    freezing_point: Optional[float]

    mass: float
    respiration_mass: float

    @property
    def temp_diff(self) -> float:
        """Ambient minus room temperature in K."""
        return self.ambient_temp - self.room_temp


class HeatLoadEngine(ABC):
    """
    Abstract base class for the refrigeration heat-load engines.

    Engines hold no state besides their frozen config, so one instance can
    be reused for any number of calculations.

    Attributes:
        name: Display name taken from the config
        config: Engine config dataclass

    Abstract Methods:
        transmission_loads: Wall, ceiling and floor loads plus their ΔT
        product_load: Product load split by freezing phase
        respiration_load: Heat of respiration
        air_change_load: Infiltration load
        miscellaneous_loads: Equipment, occupancy, lighting and heater loads
        convert_totals: Total component load to (kW, kJ)
    """

    engine_type: EngineType
    component_unit: str = "kW"

    def __init__(self, config=None) -> None:
        """
        Initialize an engine.

        Args:
            config: Engine config dataclass; the engine's defaults if omitted
        """
        self.config = config if config is not None else create_engine_config(self.engine_type.value)
        self.name = self.config.name

    # -------------------------------------------------------------------------
    # Engine-specific formulas
    # -------------------------------------------------------------------------

    @abstractmethod
    def transmission_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        """
        Return wall/ceiling/floor loads and temperature differences.

        Returns:
            Dictionary with keys ``wall``, ``ceiling``, ``floor``,
            ``wall_temp_diff``, ``ceiling_temp_diff``, ``floor_temp_diff``
        """

    @abstractmethod
    def product_load(self, inputs: EngineInputs) -> ProductLoad:
        """Return the product load in the engine's component unit."""

    @abstractmethod
    def respiration_load(self, inputs: EngineInputs) -> float:
        """Return the heat of respiration in the engine's component unit."""

    @abstractmethod
    def air_change_load(self, inputs: EngineInputs) -> float:
        """Return the air change load in the engine's component unit."""

    @abstractmethod
    def miscellaneous_loads(self, inputs: EngineInputs) -> Dict[str, float]:
        """
        Return the miscellaneous loads.

        Returns:
            Dictionary with keys ``equipment``, ``occupancy``, ``light`` and
            one ``<category>_heater`` key per heater category
        """

    @abstractmethod
    def convert_totals(self, total: float, inputs: EngineInputs) -> Tuple[float, float]:
        """Convert the summed components to (total_kw, total_kj)."""

    # -------------------------------------------------------------------------
    # Shared steps
    # -------------------------------------------------------------------------

    def prepare_inputs(
        self,
        room: Optional[RoomData] = None,
        product: Optional[ProductData] = None,
        misc: Optional[MiscellaneousData] = None,
    ) -> EngineInputs:
        """
        Fill defaults and normalize units.

        Args:
            room: Room record, engine default if omitted
            product: Product record, engine default if omitted
            misc: Miscellaneous record, engine default if omitted

        Returns:
            EngineInputs in m, kg and °C
        """
        default_room, default_product, default_misc = default_inputs(self.engine_type.value)
        room = fill_defaults(room, default_room) if room is not None else default_room
        product = fill_defaults(product, default_product) if product is not None else default_product
        misc = fill_defaults(misc, default_misc) if misc is not None else default_misc

        length = convert_length(room.length, room.length_unit, "m")
        width = convert_length(room.width, room.length_unit, "m")
        height = convert_length(room.height, room.length_unit, "m")

        model = self.config.u_factor_model
        insulation = room.insulation_type

        ambient = convert_temperature(misc.ambient_temp, misc.temp_unit, "C")
        room_temp = convert_temperature(misc.room_temp, misc.temp_unit, "C")

        if misc.product_incoming is not None:
            incoming = convert_temperature(misc.product_incoming, misc.temp_unit, "C")
        else:
            incoming = convert_temperature(product.entering_temp, product.temp_unit, "C")
        if misc.product_outgoing is not None:
            outgoing = convert_temperature(misc.product_outgoing, misc.temp_unit, "C")
        else:
            outgoing = convert_temperature(product.final_temp, product.temp_unit, "C")

        freezing_point = None
        if product.freezing_point is not None:
            freezing_point = convert_temperature(product.freezing_point, product.temp_unit, "C")

        mass = convert_mass(product.mass, product.mass_unit, "kg")
        if misc.maximum_storage is not None:
            respiration_mass = misc.maximum_storage
        elif product.respiration_mass is not None:
            respiration_mass = convert_mass(product.respiration_mass, product.mass_unit, "kg")
        else:
            respiration_mass = mass

        return EngineInputs(
            room=room,
            product=product,
            misc=misc,
            length=length,
            width=width,
            height=height,
            wall_area=wall_area(length, width, height),
            ceiling_area=ceiling_area(length, width),
            floor_area=ceiling_area(length, width),
            volume=room_volume(length, width, height),
            wall_u_factor=surface_u_factor(
                model, insulation, room.wall_insulation_thickness, room.wall_u_factor
            ),
            ceiling_u_factor=surface_u_factor(
                model, insulation, room.ceiling_insulation_thickness, room.ceiling_u_factor
            ),
            floor_u_factor=surface_u_factor(
                model, insulation, room.floor_insulation_thickness, room.floor_u_factor
            ),
            ambient_temp=ambient,
            room_temp=room_temp,
            product_incoming=incoming,
            product_outgoing=outgoing,
            freezing_point=freezing_point,
            mass=mass,
            respiration_mass=respiration_mass,
        )

    def calculate(
        self,
        room: Optional[RoomData] = None,
        product: Optional[ProductData] = None,
        misc: Optional[MiscellaneousData] = None,
    ) -> CalculationResults:
        """
        Run the full heat-load calculation.

        Args:
            room: Room geometry and envelope
            product: Product properties and cooling targets
            misc: Temperatures and secondary loads

        Returns:
            CalculationResults with every component and the aggregated totals
        """
        inputs = self.prepare_inputs(room, product, misc)

        transmission = self.transmission_loads(inputs)
        product_load = self.product_load(inputs)
        respiration = self.respiration_load(inputs)
        air_change = self.air_change_load(inputs)
        misc_loads = self.miscellaneous_loads(inputs)

        heaters = {c: misc_loads[f"{c}_heater"] for c in HEATER_CATEGORIES}
        heater_total = sum(heaters.values())
        misc_total = misc_loads["equipment"] + misc_loads["occupancy"] + misc_loads["light"] + heater_total
        transmission_total = transmission["wall"] + transmission["ceiling"] + transmission["floor"]

        total = transmission_total + product_load.total + respiration + air_change + misc_total
        total_kw, total_kj = self.convert_totals(total, inputs)

        total_tr = kw_to_tr(total_kw, self.config.kw_per_tr)
        capacity_tr = capacity_with_margin(total_tr, self.config.safety_margin)
        btu_hr = tr_to_btu_hr(total_tr)
        sensible_kw, latent_kw = split_sensible_latent(total_kw, self.config.sensible_fraction)
        sensible_btu_hr, _ = split_sensible_latent(btu_hr, self.config.sensible_fraction)
        air_flow = required_air_flow_cfm(
            sensible_btu_hr, self.config.coil_delta_t_k, inputs.misc.air_flow_density_factor
        )

        capacity_kg, utilization, valid = check_storage_capacity(
            inputs.misc.daily_loading,
            inputs.misc.storage_density,
            inputs.volume,
            inputs.misc.maximum_storage,
        )
        if not valid:
            logger.warning(
                "%s: daily loading %.0f kg exceeds storage capacity %.0f kg",
                self.name,
                inputs.misc.daily_loading,
                capacity_kg,
            )

        logger.debug(
            "%s: total %.3f kW (%.3f TR, capacity %.3f TR)", self.name, total_kw, total_tr, capacity_tr
        )

        return CalculationResults(
            engine=self.engine_type.value,
            component_unit=self.component_unit,
            wall_load=transmission["wall"],
            ceiling_load=transmission["ceiling"],
            floor_load=transmission["floor"],
            total_transmission_load=transmission_total,
            before_freezing_load=product_load.before_freezing,
            latent_heat_load=product_load.latent_heat,
            after_freezing_load=product_load.after_freezing,
            total_product_load=product_load.total,
            product_regime=product_load.regime,
            respiration_load=respiration,
            air_change_load=air_change,
            equipment_load=misc_loads["equipment"],
            occupancy_load=misc_loads["occupancy"],
            light_load=misc_loads["light"],
            peripheral_heater_load=heaters["peripheral"],
            door_heater_load=heaters["door"],
            tray_heater_load=heaters["tray"],
            drain_heater_load=heaters["drain"],
            heater_load=heater_total,
            total_misc_load=misc_total,
            total_load_kw=total_kw,
            total_load_kj=total_kj,
            total_load_tr=total_tr,
            capacity_tr=capacity_tr,
            safety_margin=self.config.safety_margin,
            refrigeration_capacity_btu_hr=btu_hr,
            sensible_heat_kw=sensible_kw,
            latent_heat_kw=latent_kw,
            sensible_heat_ratio=self.config.sensible_fraction,
            air_flow_cfm=air_flow,
            wall_temp_diff=transmission["wall_temp_diff"],
            ceiling_temp_diff=transmission["ceiling_temp_diff"],
            floor_temp_diff=transmission["floor_temp_diff"],
            product_temp_diff=inputs.product_incoming - inputs.product_outgoing,
            max_storage_capacity=capacity_kg,
            storage_utilization=utilization,
            storage_capacity_valid=valid,
        )

    @classmethod
    def get_results_metadata(cls) -> Dict[str, Dict[str, Any]]:
        """
        Return labels and units for the result fields.

        Component loads carry the engine's component unit. Used by report
        collaborators and the command-line table output.
        """
        unit = cls.component_unit
        def component(label):
            return {"type": float, "label": label, "unit": unit}

        return {
            "wall_load": component("Wall Load"),
            "ceiling_load": component("Ceiling Load"),
            "floor_load": component("Floor Load"),
            "total_transmission_load": component("Total Transmission Load"),
            "before_freezing_load": component("Product Load Before Freezing"),
            "latent_heat_load": component("Product Latent Heat Load"),
            "after_freezing_load": component("Product Load After Freezing"),
            "total_product_load": component("Total Product Load"),
            "product_regime": {"type": str, "label": "Freezing Regime"},
            "respiration_load": component("Respiration Load"),
            "air_change_load": component("Air Change Load"),
            "equipment_load": component("Equipment Load"),
            "occupancy_load": component("Occupancy Load"),
            "light_load": component("Lighting Load"),
            "heater_load": component("Heater Load"),
            "total_misc_load": component("Total Miscellaneous Load"),
            "total_load_kw": {"type": float, "label": "Total Load", "unit": "kW"},
            "total_load_kj": {"type": float, "label": "Total Load", "unit": "kJ"},
            "total_load_tr": {"type": float, "label": "Total Load", "unit": "TR"},
            "capacity_tr": {"type": float, "label": "Capacity With Safety Margin", "unit": "TR"},
            "refrigeration_capacity_btu_hr": {"type": float, "label": "Refrigeration Capacity", "unit": "BTU/hr"},
            "sensible_heat_kw": {"type": float, "label": "Sensible Heat", "unit": "kW"},
            "latent_heat_kw": {"type": float, "label": "Latent Heat", "unit": "kW"},
            "air_flow_cfm": {"type": float, "label": "Air Quantity Required", "unit": "CFM"},
            "max_storage_capacity": {"type": float, "label": "Maximum Storage", "unit": "kg"},
            "storage_utilization": {"type": float, "label": "Storage Utilization", "unit": "ratio"},
        }

    def __str__(self) -> str:
        """Return string representation of the engine."""
        return f"{self.__class__.__name__}({self.name})"

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}(name={self.name!r}, config={self.config!r})"
