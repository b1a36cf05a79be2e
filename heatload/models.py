"""
Input and result records for the heat-load engines.

All records are frozen dataclasses. Input fields left as ``None`` are filled
from the selected engine's default record (see
:func:`heatload.core.config.default_inputs`), except the fields named in a
record's ``OPTIONAL_FIELDS``, where ``None`` carries meaning of its own:

- ``RoomData`` U-factors: ``None`` derives U from the insulation model.
- ``ProductData.freezing_point``: ``None`` means the product never freezes.
- ``ProductData.respiration_mass``: ``None`` uses the product mass.
- ``MiscellaneousData.product_incoming`` / ``product_outgoing``: ``None``
  uses the product's entering / final temperature.
- ``MiscellaneousData.maximum_storage``: ``None`` derives storage capacity
  from density and volume.

Units are validated at construction; a bad tag raises ``ValueError``.
Defaults filled into a record are converted to the record's own unit tags.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

from heatload.physics.thermal import FreezingRegime
from heatload.physics.units import (
    LENGTH_UNITS,
    MASS_UNITS,
    TEMPERATURE_UNITS,
    convert_length,
    convert_mass,
    convert_temperature,
)

# Converter for the fields governed by each unit tag
_UNIT_CONVERTERS = {
    "length_unit": convert_length,
    "mass_unit": convert_mass,
    "temp_unit": convert_temperature,
}


def _check_unit(value: str, allowed, quantity: str) -> None:
    if value not in allowed:
        raise ValueError(f"Unsupported {quantity} unit {value!r}; expected one of {allowed}")


def convert_units(record, **units):
    """
    Return ``record`` re-expressed in new unit tags.

    Each keyword names a unit tag of the record (``length_unit``,
    ``mass_unit``, ``temp_unit``); the fields listed for it in the record's
    ``UNIT_FIELDS`` are converted to the new unit.

    Example:
        >>> round(convert_units(RoomData(length=3.048), length_unit="ft").length, 3)
        10.0
    """
    changes = {}
    for unit_attr, unit in units.items():
        if unit_attr not in record.UNIT_FIELDS:
            raise ValueError(f"{type(record).__name__} has no unit tag {unit_attr!r}")
        current = getattr(record, unit_attr)
        if unit == current:
            continue
        convert = _UNIT_CONVERTERS[unit_attr]
        for name in record.UNIT_FIELDS[unit_attr]:
            value = getattr(record, name)
            if value is not None:
                changes[name] = convert(value, current, unit)
        changes[unit_attr] = unit
    if not changes:
        return record
    return replace(record, **changes)


def fill_defaults(record, defaults):
    """
    Return ``record`` with its ``None`` fields taken from ``defaults``.

    Fields listed in the record's ``OPTIONAL_FIELDS`` are left as given.
    Defaults are first converted to the record's unit tags, so a record in
    °F, ft or lb receives its defaults in °F, ft or lb.

    Raises:
        TypeError: If the two records are of different types
    """
    if type(record) is not type(defaults):
        raise TypeError(
            f"Cannot fill {type(record).__name__} from {type(defaults).__name__}"
        )
    defaults = convert_units(
        defaults, **{unit_attr: getattr(record, unit_attr) for unit_attr in record.UNIT_FIELDS}
    )
    missing = {
        f.name: getattr(defaults, f.name)
        for f in fields(record)
        if getattr(record, f.name) is None and f.name not in record.OPTIONAL_FIELDS
    }
    if not missing:
        return record
    return replace(record, **missing)


@dataclass(frozen=True)
class RoomData:
    """Room geometry and envelope."""

    OPTIONAL_FIELDS = ("wall_u_factor", "ceiling_u_factor", "floor_u_factor")
    UNIT_FIELDS = {"length_unit": ("length", "width", "height")}

    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    length_unit: str = "m"

    insulation_type: Optional[str] = None
    wall_insulation_thickness: Optional[float] = None  # mm
    ceiling_insulation_thickness: Optional[float] = None  # mm
    floor_insulation_thickness: Optional[float] = None  # mm

    wall_u_factor: Optional[float] = None  # W/(m²·K)
    ceiling_u_factor: Optional[float] = None  # W/(m²·K)
    floor_u_factor: Optional[float] = None  # W/(m²·K)

    wall_hours: Optional[float] = None
    ceiling_hours: Optional[float] = None
    floor_hours: Optional[float] = None

    def __post_init__(self):
        _check_unit(self.length_unit, LENGTH_UNITS, "length")
        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"Room {name} must be positive, got {value}")
        for name in (
            "wall_insulation_thickness",
            "ceiling_insulation_thickness",
            "floor_insulation_thickness",
        ):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class ProductData:
    """Product thermal properties and cooling targets."""

    OPTIONAL_FIELDS = ("freezing_point", "respiration_mass")
    UNIT_FIELDS = {
        "mass_unit": ("mass", "respiration_mass"),
        "temp_unit": ("entering_temp", "final_temp", "freezing_point"),
    }

    mass: Optional[float] = None
    mass_unit: str = "kg"
    entering_temp: Optional[float] = None
    final_temp: Optional[float] = None
    temp_unit: str = "C"

    cp_above_freezing: Optional[float] = None  # kJ/(kg·K)
    cp_below_freezing: Optional[float] = None  # kJ/(kg·K)
    latent_heat: Optional[float] = None  # kJ/kg
    freezing_point: Optional[float] = None  # in temp_unit
    pull_down_hours: Optional[float] = None

    respiration_watts_per_tonne: Optional[float] = None
    respiration_mass: Optional[float] = None  # in mass_unit
    name: Optional[str] = None

    def __post_init__(self):
        _check_unit(self.mass_unit, MASS_UNITS, "mass")
        _check_unit(self.temp_unit, TEMPERATURE_UNITS, "temperature")
        if self.mass is not None and self.mass < 0:
            raise ValueError(f"Product mass must not be negative, got {self.mass}")
        if self.pull_down_hours is not None and self.pull_down_hours < 0:
            raise ValueError(f"Pull-down hours must not be negative, got {self.pull_down_hours}")


@dataclass(frozen=True)
class MiscellaneousData:
    """Temperatures and the secondary loads of a room."""

    OPTIONAL_FIELDS = ("product_incoming", "product_outgoing", "maximum_storage")
    UNIT_FIELDS = {
        "temp_unit": ("ambient_temp", "room_temp", "product_incoming", "product_outgoing"),
    }

    ambient_temp: Optional[float] = None
    room_temp: Optional[float] = None
    product_incoming: Optional[float] = None
    product_outgoing: Optional[float] = None
    temp_unit: str = "C"

    # Air change
    air_change_rate: Optional[float] = None
    enthalpy_diff: Optional[float] = None
    air_change_hours: Optional[float] = None

    # Equipment (fan motors etc.)
    equipment_power_kw: Optional[float] = None
    equipment_count: Optional[float] = None
    equipment_hours: Optional[float] = None

    # Occupancy
    occupancy_count: Optional[float] = None
    occupancy_heat_kw: Optional[float] = None
    occupancy_hours: Optional[float] = None

    # Lighting
    light_power_kw: Optional[float] = None
    light_hours: Optional[float] = None

    # Heaters
    peripheral_heater_kw: Optional[float] = None
    peripheral_heater_count: Optional[float] = None
    peripheral_heater_hours: Optional[float] = None
    door_heater_kw: Optional[float] = None
    door_heater_count: Optional[float] = None
    door_heater_hours: Optional[float] = None
    tray_heater_kw: Optional[float] = None
    tray_heater_count: Optional[float] = None
    tray_heater_hours: Optional[float] = None
    drain_heater_kw: Optional[float] = None
    drain_heater_count: Optional[float] = None
    drain_heater_hours: Optional[float] = None

    # Storage (kg, kg/m³)
    daily_loading: Optional[float] = None
    storage_density: Optional[float] = None
    maximum_storage: Optional[float] = None

    batch_hours: Optional[float] = None
    air_flow_density_factor: Optional[float] = None

    def __post_init__(self):
        _check_unit(self.temp_unit, TEMPERATURE_UNITS, "temperature")


HEATER_CATEGORIES = ("peripheral", "door", "tray", "drain")


@dataclass(frozen=True)
class CalculationResults:
    """
    Result of one heat-load calculation.

    Component loads are in ``component_unit``: ``kW`` for the cold room and
    freezer room, ``kJ`` (per batch) for the blast freezer. Totals are given
    in every unit.
    """

    engine: str
    component_unit: str

    # Transmission
    wall_load: float
    ceiling_load: float
    floor_load: float
    total_transmission_load: float

    # Product
    before_freezing_load: float
    latent_heat_load: float
    after_freezing_load: float
    total_product_load: float
    product_regime: FreezingRegime

    respiration_load: float
    air_change_load: float

    # Miscellaneous
    equipment_load: float
    occupancy_load: float
    light_load: float
    peripheral_heater_load: float
    door_heater_load: float
    tray_heater_load: float
    drain_heater_load: float
    heater_load: float
    total_misc_load: float

    # Totals
    total_load_kw: float
    total_load_kj: float
    total_load_tr: float
    capacity_tr: float
    safety_margin: float
    refrigeration_capacity_btu_hr: float

    # Heat distribution
    sensible_heat_kw: float
    latent_heat_kw: float
    sensible_heat_ratio: float
    air_flow_cfm: float

    # Echoed temperature differences (K)
    wall_temp_diff: float
    ceiling_temp_diff: float
    floor_temp_diff: float
    product_temp_diff: float

    # Storage capacity check
    max_storage_capacity: float = 0.0
    storage_utilization: float = 0.0
    storage_capacity_valid: bool = True

    @property
    def total_load(self) -> float:
        """Sum of all components in ``component_unit``."""
        return (
            self.total_transmission_load
            + self.total_product_load
            + self.respiration_load
            + self.air_change_load
            + self.total_misc_load
        )

    def component_shares(self) -> Dict[str, float]:
        """Fraction of the total contributed by each load group."""
        total = self.total_load or 1.0
        return {
            "transmission": self.total_transmission_load / total,
            "product": self.total_product_load / total,
            "respiration": self.respiration_load / total,
            "air_change": self.air_change_load / total,
            "miscellaneous": self.total_misc_load / total,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view for report and export collaborators."""
        data = asdict(self)
        data["product_regime"] = self.product_regime.value
        return data
