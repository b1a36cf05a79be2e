"""
Configuration management for the heat-load engines.

This module provides one typed configuration dataclass per product line
(cold room, freezer room, blast freezer) holding the constants that differ
between them, the complete default input records of each line, and YAML or
JSON file loading.

Usage:
    from heatload.core.config import (
        ColdRoomConfig,
        build_inputs,
        default_inputs,
        load_config,
    )

    # Engine constants
    config = ColdRoomConfig(safety_margin=0.15)

    # Workbook default inputs, with a few fields overridden
    room, product, misc = build_inputs("cold_room", {"misc": {"ambient_temp": 40}})

    # Scenario file
    scenario = load_config("scenario.yaml")
"""

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import json
import logging

import yaml

from heatload.core.constants import (
    BLAST_FREEZER_COIL_DELTA_T,
    BLAST_FREEZER_KW_PER_TR,
    BLAST_FREEZER_SAFETY_MARGIN,
    BLAST_FREEZER_SENSIBLE_FRACTION,
    COLD_ROOM_COIL_DELTA_T,
    COLD_ROOM_KW_PER_TR,
    COLD_ROOM_SAFETY_MARGIN,
    COLD_ROOM_SENSIBLE_FRACTION,
    FREEZER_COIL_DELTA_T,
    FREEZER_KW_PER_TR,
    FREEZER_SAFETY_MARGIN,
    FREEZER_SENSIBLE_FRACTION,
)
from heatload.models import MiscellaneousData, ProductData, RoomData, convert_units
from heatload.physics.insulation import LOOKUP_MODEL, RESISTANCE_MODEL, U_FACTOR_MODELS

logger = logging.getLogger(__name__)

COLD_ROOM = "cold_room"
FREEZER = "freezer"
BLAST_FREEZER = "blast_freezer"
ENGINE_NAMES = (COLD_ROOM, FREEZER, BLAST_FREEZER)

# Ceiling/floor temperature difference policies
CEILING_FLOOR_FULL = "full"  # same ΔT as the walls
CEILING_FLOOR_REDUCED = "reduced"  # 30% of the wall ΔT (legacy sheet)
CEILING_FLOOR_POLICIES = (CEILING_FLOOR_FULL, CEILING_FLOOR_REDUCED)

# Blast freezer product segment policies
PHASE_POLICY_SPREADSHEET = "spreadsheet"  # all three segments unless above freezing
PHASE_POLICY_REGIME = "regime"  # freezing-regime state machine
PHASE_POLICIES = (PHASE_POLICY_SPREADSHEET, PHASE_POLICY_REGIME)


def _check_choice(value: str, choices, label: str) -> None:
    if value not in choices:
        raise ValueError(f"{label} must be one of {choices}, got {value!r}")


def _check_common(config) -> None:
    _check_choice(config.u_factor_model, U_FACTOR_MODELS, "u_factor_model")
    if config.kw_per_tr <= 0:
        raise ValueError(f"kw_per_tr must be positive, got {config.kw_per_tr}")
    if not 0.0 <= config.sensible_fraction <= 1.0:
        raise ValueError(f"sensible_fraction must be within [0, 1], got {config.sensible_fraction}")


@dataclass(frozen=True)
class ColdRoomConfig:
    """Constants of the cold room engine."""

    name: str = "Cold Room"
    kw_per_tr: float = COLD_ROOM_KW_PER_TR
    safety_margin: float = COLD_ROOM_SAFETY_MARGIN
    sensible_fraction: float = COLD_ROOM_SENSIBLE_FRACTION
    coil_delta_t_k: float = COLD_ROOM_COIL_DELTA_T
    u_factor_model: str = RESISTANCE_MODEL
    ceiling_floor_policy: str = CEILING_FLOOR_FULL
    air_change_constant: float = 1.0

    def __post_init__(self):
        _check_common(self)
        _check_choice(self.ceiling_floor_policy, CEILING_FLOOR_POLICIES, "ceiling_floor_policy")


@dataclass(frozen=True)
class FreezerConfig:
    """Constants of the freezer room engine."""

    name: str = "Freezer Room"
    kw_per_tr: float = FREEZER_KW_PER_TR
    safety_margin: float = FREEZER_SAFETY_MARGIN
    sensible_fraction: float = FREEZER_SENSIBLE_FRACTION
    coil_delta_t_k: float = FREEZER_COIL_DELTA_T
    u_factor_model: str = RESISTANCE_MODEL

    def __post_init__(self):
        _check_common(self)


@dataclass(frozen=True)
class BlastFreezerConfig:
    """Constants of the blast freezer engine."""

    name: str = "Blast Freezer"
    kw_per_tr: float = BLAST_FREEZER_KW_PER_TR
    safety_margin: float = BLAST_FREEZER_SAFETY_MARGIN
    sensible_fraction: float = BLAST_FREEZER_SENSIBLE_FRACTION
    coil_delta_t_k: float = BLAST_FREEZER_COIL_DELTA_T
    u_factor_model: str = LOOKUP_MODEL
    product_phase_policy: str = PHASE_POLICY_SPREADSHEET

    def __post_init__(self):
        _check_common(self)
        _check_choice(self.product_phase_policy, PHASE_POLICIES, "product_phase_policy")


_CONFIG_CLASSES = {
    COLD_ROOM: ColdRoomConfig,
    FREEZER: FreezerConfig,
    BLAST_FREEZER: BlastFreezerConfig,
}


# =============================================================================
# Default input records (reference workbook values)
# =============================================================================


def _heaters(hours: float, **ratings) -> Dict[str, float]:
    """Expand {category: (kw, count)} into MiscellaneousData heater fields."""
    values = {}
    for category in ("peripheral", "door", "tray", "drain"):
        kw, count, *rest = ratings.get(category, (0.0, 0))
        values[f"{category}_heater_kw"] = kw
        values[f"{category}_heater_count"] = count
        values[f"{category}_heater_hours"] = rest[0] if rest else hours
    return values


_DEFAULT_INPUTS = {
    COLD_ROOM: (
        RoomData(
            length=3.048,
            width=4.5,
            height=3.0,
            insulation_type="PUF",
            wall_insulation_thickness=100,
            ceiling_insulation_thickness=100,
            floor_insulation_thickness=100,
            wall_u_factor=0.295,
            ceiling_u_factor=0.295,
            floor_u_factor=0.295,
            wall_hours=24,
            ceiling_hours=24,
            floor_hours=24,
        ),
        ProductData(
            mass=4000,
            entering_temp=30,
            final_temp=4,
            cp_above_freezing=4.1,
            cp_below_freezing=2.1,
            latent_heat=0.0,
            freezing_point=-2.0,
            pull_down_hours=24,
            respiration_watts_per_tonne=50,
            name="Custom",
        ),
        MiscellaneousData(
            ambient_temp=45,
            room_temp=2,
            air_change_rate=3.4,
            enthalpy_diff=0.10,
            air_change_hours=20,
            equipment_power_kw=0.25,
            equipment_count=1,
            equipment_hours=20,
            occupancy_count=1.0,
            occupancy_heat_kw=0.275,
            occupancy_hours=20,
            light_power_kw=0.07,
            light_hours=20,
            **_heaters(24, door=(0.145, 1)),
            daily_loading=4000,
            storage_density=8,
            maximum_storage=6338,
            batch_hours=24,
            air_flow_density_factor=1.0,
        ),
    ),
    FREEZER: (
        RoomData(
            length=10.7,
            width=6.1,
            height=2.44,
            insulation_type="PUF",
            wall_insulation_thickness=150,
            ceiling_insulation_thickness=150,
            floor_insulation_thickness=150,
            wall_u_factor=0.153,
            ceiling_u_factor=0.153,
            floor_u_factor=0.153,
            wall_hours=8,
            ceiling_hours=8,
            floor_hours=8,
        ),
        ProductData(
            mass=3000,
            entering_temp=25,
            final_temp=-15,
            cp_above_freezing=3.74,
            cp_below_freezing=1.96,
            latent_heat=233,
            freezing_point=-0.8,
            pull_down_hours=10,
            respiration_watts_per_tonne=0,
            name="Chicken",
        ),
        MiscellaneousData(
            ambient_temp=45,
            room_temp=-25,
            air_change_rate=4.2,
            enthalpy_diff=0.14,
            air_change_hours=16,
            equipment_power_kw=0.37,
            equipment_count=3,
            equipment_hours=16,
            occupancy_count=4.6,
            occupancy_heat_kw=0.5,
            occupancy_hours=16,
            light_power_kw=1.0,
            light_hours=1.2,
            **_heaters(24, peripheral=(1.5, 8), door=(0.27, 8), tray=(2.2, 1), drain=(0.04, 1)),
            daily_loading=3000,
            storage_density=4,
            maximum_storage=5278,
            batch_hours=10,
            air_flow_density_factor=1.0,
        ),
    ),
    BLAST_FREEZER: (
        RoomData(
            length=5,
            width=5,
            height=3.5,
            insulation_type="PUF",
            wall_insulation_thickness=150,
            ceiling_insulation_thickness=150,
            floor_insulation_thickness=150,
            wall_hours=8,
            ceiling_hours=8,
            floor_hours=8,
        ),
        ProductData(
            mass=2000,
            entering_temp=-5,
            final_temp=-30,
            cp_above_freezing=3.49,
            cp_below_freezing=2.14,
            latent_heat=233,
            freezing_point=-1.7,
            pull_down_hours=8,
            respiration_watts_per_tonne=0,
            name="Chicken",
        ),
        MiscellaneousData(
            ambient_temp=43,
            room_temp=-35,
            air_change_rate=4.2,
            enthalpy_diff=0.14,
            air_change_hours=2,
            equipment_power_kw=0.37,
            equipment_count=3,
            equipment_hours=8,
            occupancy_count=1.0,
            occupancy_heat_kw=0.5,
            occupancy_hours=1,
            light_power_kw=0.1,
            light_hours=1.2,
            **_heaters(
                8,
                peripheral=(1.5, 1),
                door=(0.27, 1),
                tray=(2.2, 1, 0.4),
                drain=(0.04, 1),
            ),
            daily_loading=2000,
            storage_density=0.0,
            batch_hours=8,
            air_flow_density_factor=1.0,
        ),
    ),
}

_SECTIONS = {"room": (0, RoomData), "product": (1, ProductData), "misc": (2, MiscellaneousData)}


def _check_engine(engine: str) -> None:
    if engine not in ENGINE_NAMES:
        raise ValueError(f"Unknown engine {engine!r}; expected one of {ENGINE_NAMES}")


def default_inputs(engine: str) -> Tuple[RoomData, ProductData, MiscellaneousData]:
    """
    Return the complete default (room, product, misc) records of an engine.

    Raises:
        ValueError: If the engine name is unknown
    """
    _check_engine(engine)
    return _DEFAULT_INPUTS[engine]


def build_inputs(
    engine: str, overrides: Optional[Dict[str, Dict[str, Any]]] = None
) -> Tuple[RoomData, ProductData, MiscellaneousData]:
    """
    Merge user overrides onto an engine's default input records.

    Args:
        engine: Engine name (cold_room, freezer, blast_freezer)
        overrides: Mapping with optional ``room``, ``product`` and ``misc``
            sections, each mapping field names to values

    Returns:
        Tuple of (RoomData, ProductData, MiscellaneousData)

    Raises:
        ValueError: If the engine, a section or a field name is unknown, or
            an overridden value breaks a record invariant
    """
    records = list(default_inputs(engine))
    for section, values in (overrides or {}).items():
        if section not in _SECTIONS:
            raise ValueError(f"Unknown input section {section!r}; expected one of {tuple(_SECTIONS)}")
        index, record_cls = _SECTIONS[section]
        known = {f.name for f in fields(record_cls)}
        unknown = sorted(set(values or {}) - known)
        if unknown:
            raise ValueError(f"Unknown {section} field(s): {', '.join(unknown)}")
        values = values or {}
        # Defaults follow an overridden unit tag before the values are applied
        units = {k: v for k, v in values.items() if k in record_cls.UNIT_FIELDS}
        record = convert_units(records[index], **units)
        records[index] = replace(record, **values)
    return records[0], records[1], records[2]


# =============================================================================
# Files
# =============================================================================


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    logger.debug("Loaded configuration from %s", path)
    return data or {}


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save configuration to a YAML or JSON file.

    Args:
        config: Configuration dictionary
        path: Path to save the file
    """
    path = Path(path)

    with open(path, "w") as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
        elif path.suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def config_to_dict(config: Any) -> Dict[str, Any]:
    """
    Convert a dataclass config or input record to a dictionary.

    Args:
        config: A dataclass instance

    Returns:
        Dictionary representation
    """
    return asdict(config)


def create_engine_config(engine: str, data: Optional[Dict[str, Any]] = None):
    """Create an engine config dataclass from a dictionary."""
    _check_engine(engine)
    return _CONFIG_CLASSES[engine](**(data or {}))


def get_default_config(engine: str):
    """Get the default config dataclass of an engine."""
    return create_engine_config(engine)
