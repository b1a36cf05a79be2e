"""Heat-load engines, one per product line."""

from heatload.engines.base import EngineInputs, EngineType, HeatLoadEngine
from heatload.engines.blast_freezer import BlastFreezerEngine, calculate_blast_freezer_heat_load
from heatload.engines.cold_room import ColdRoomEngine, calculate_cold_room_heat_load
from heatload.engines.freezer import FreezerEngine, calculate_freezer_heat_load

ENGINES = {
    EngineType.COLD_ROOM.value: ColdRoomEngine,
    EngineType.FREEZER.value: FreezerEngine,
    EngineType.BLAST_FREEZER.value: BlastFreezerEngine,
}


def create_engine(engine: str, config=None) -> HeatLoadEngine:
    """
    Create an engine by name.

    Args:
        engine: cold_room, freezer or blast_freezer
        config: Optional engine config dataclass

    Raises:
        ValueError: If the engine name is unknown
    """
    try:
        engine_cls = ENGINES[engine]
    except KeyError:
        raise ValueError(f"Unknown engine {engine!r}; expected one of {tuple(ENGINES)}") from None
    return engine_cls(config)


__all__ = [
    "EngineInputs",
    "EngineType",
    "HeatLoadEngine",
    "ColdRoomEngine",
    "FreezerEngine",
    "BlastFreezerEngine",
    "ENGINES",
    "create_engine",
    "calculate_cold_room_heat_load",
    "calculate_freezer_heat_load",
    "calculate_blast_freezer_heat_load",
]
