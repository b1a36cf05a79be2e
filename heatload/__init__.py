"""Refrigeration heat-load estimation for cold rooms, freezer rooms and blast freezers."""

from heatload.core.config import default_inputs, build_inputs
from heatload.models import (
    RoomData,
    ProductData,
    MiscellaneousData,
    CalculationResults,
)
from heatload.engines import (
    ColdRoomEngine,
    FreezerEngine,
    BlastFreezerEngine,
    create_engine,
    calculate_cold_room_heat_load,
    calculate_freezer_heat_load,
    calculate_blast_freezer_heat_load,
)

__version__ = "1.0.0"

__all__ = [
    "RoomData",
    "ProductData",
    "MiscellaneousData",
    "CalculationResults",
    "ColdRoomEngine",
    "FreezerEngine",
    "BlastFreezerEngine",
    "create_engine",
    "calculate_cold_room_heat_load",
    "calculate_freezer_heat_load",
    "calculate_blast_freezer_heat_load",
    "default_inputs",
    "build_inputs",
]
