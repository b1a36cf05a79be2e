"""
Insulation models that turn panel type and thickness into a U-factor.

Two strategies exist side by side:

- ``resistance``: series resistance network of inside film, insulation,
  structure and outside film. Used by the cold room and freezer room.
- ``lookup``: the blast freezer panel table. Tabulated thicknesses map
  directly, values outside 25-200 mm clamp to the table ends, and any other
  value uses the 150 mm row. There is no interpolation.

All U-factors are in W/(m²·K).
"""

import logging

from heatload.core.constants import (
    DEFAULT_INSULATION_TYPE,
    INSULATION_CONDUCTIVITY,
    R_INSIDE_AIR,
    R_OUTSIDE_AIR,
    R_STRUCTURE,
    U_FACTOR_BY_THICKNESS,
    U_FACTOR_FALLBACK_THICKNESS,
    U_FACTOR_MAX_THICKNESS,
    U_FACTOR_MIN_THICKNESS,
)

logger = logging.getLogger(__name__)

RESISTANCE_MODEL = "resistance"
LOOKUP_MODEL = "lookup"
U_FACTOR_MODELS = (RESISTANCE_MODEL, LOOKUP_MODEL)


def thermal_conductivity(insulation_type: str) -> float:
    """
    Return k in W/(m·K) for an insulation type.

    Matching is case-insensitive; unknown types use PUF.
    """
    key = (insulation_type or "").strip().upper()
    return INSULATION_CONDUCTIVITY.get(key, INSULATION_CONDUCTIVITY[DEFAULT_INSULATION_TYPE])


def resistance_u_factor(insulation_type: str, thickness_mm: float) -> float:
    """
    Calculate U from the resistance network.

    U = 1 / (R_inside + thickness/k + R_structure + R_outside)

    Args:
        insulation_type: Insulation tag (PUF, EPS, XPS, PIR, Fiberglass)
        thickness_mm: Insulation thickness in millimetres

    Returns:
        U-factor in W/(m²·K)

    Example:
        >>> round(resistance_u_factor("PUF", 100), 4)
        0.2055
    """
    r_insulation = (thickness_mm / 1000) / thermal_conductivity(insulation_type)
    return 1 / (R_INSIDE_AIR + r_insulation + R_STRUCTURE + R_OUTSIDE_AIR)


def lookup_u_factor(thickness_mm: float) -> float:
    """
    Look up U from the blast freezer panel table.

    Args:
        thickness_mm: Insulation thickness in millimetres

    Returns:
        U-factor in W/(m²·K)
    """
    if thickness_mm < U_FACTOR_MIN_THICKNESS:
        return U_FACTOR_BY_THICKNESS[int(U_FACTOR_MIN_THICKNESS)]
    if thickness_mm > U_FACTOR_MAX_THICKNESS:
        return U_FACTOR_BY_THICKNESS[int(U_FACTOR_MAX_THICKNESS)]
    for thickness, u_factor in U_FACTOR_BY_THICKNESS.items():
        if thickness_mm == thickness:
            return u_factor
    logger.debug("No panel row for %s mm, using %d mm row", thickness_mm, U_FACTOR_FALLBACK_THICKNESS)
    return U_FACTOR_BY_THICKNESS[U_FACTOR_FALLBACK_THICKNESS]


def surface_u_factor(model: str, insulation_type: str, thickness_mm: float, override=None) -> float:
    """
    Resolve the U-factor of one surface.

    An explicit ``override`` wins over the model.

    Raises:
        ValueError: If ``model`` is not a known strategy
    """
    if override is not None:
        return override
    if model == RESISTANCE_MODEL:
        return resistance_u_factor(insulation_type, thickness_mm)
    if model == LOOKUP_MODEL:
        return lookup_u_factor(thickness_mm)
    raise ValueError(f"Unknown U-factor model: {model!r}")
