"""Core configuration and constants for heat-load estimation."""

from heatload.core.config import (
    # Engine names
    COLD_ROOM,
    FREEZER,
    BLAST_FREEZER,
    ENGINE_NAMES,
    # Config dataclasses
    ColdRoomConfig,
    FreezerConfig,
    BlastFreezerConfig,
    # Config utilities
    load_config,
    save_config,
    config_to_dict,
    create_engine_config,
    get_default_config,
    default_inputs,
    build_inputs,
)
from heatload.core.constants import (
    # Unit conversions
    METERS_PER_FOOT,
    KG_PER_LB,
    # Energy conversions
    BTU_PER_TON_HR,
    AIR_SENSIBLE_HEAT_FACTOR,
    # Engine constants
    COLD_ROOM_KW_PER_TR,
    FREEZER_KW_PER_TR,
    BLAST_FREEZER_KW_PER_TR,
)

__all__ = [
    # Engine names
    "COLD_ROOM",
    "FREEZER",
    "BLAST_FREEZER",
    "ENGINE_NAMES",
    # Config dataclasses
    "ColdRoomConfig",
    "FreezerConfig",
    "BlastFreezerConfig",
    # Config utilities
    "load_config",
    "save_config",
    "config_to_dict",
    "create_engine_config",
    "get_default_config",
    "default_inputs",
    "build_inputs",
    # Unit conversions
    "METERS_PER_FOOT",
    "KG_PER_LB",
    # Energy conversions
    "BTU_PER_TON_HR",
    "AIR_SENSIBLE_HEAT_FACTOR",
    # Engine constants
    "COLD_ROOM_KW_PER_TR",
    "FREEZER_KW_PER_TR",
    "BLAST_FREEZER_KW_PER_TR",
]
