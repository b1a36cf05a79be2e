"""
Physical and engineering constants for refrigeration heat-load estimation.

This module centralizes all magic numbers used by the cold room, freezer room
and blast freezer engines. Values reproduce the reference load-estimation
workbook unless otherwise noted.

Usage:
    from heatload.core.constants import SECONDS_PER_HOUR, BTU_PER_TON_HR

    load_kj = load_kw * SECONDS_PER_HOUR * hours
    btu_hr = tons * BTU_PER_TON_HR
"""

# =============================================================================
# Unit Conversions
# =============================================================================

METERS_PER_FOOT: float = 0.3048  # m/ft
KG_PER_LB: float = 0.453592  # kg/lb - the only mass factor used by any engine
SQFT_PER_SQM: float = 10.7639  # ft²/m²
CUFT_PER_CUM: float = 35.3147  # ft³/m³
FAHRENHEIT_PER_KELVIN: float = 9.0 / 5.0  # °F span per K span

SECONDS_PER_HOUR: float = 3600.0
HOURS_PER_DAY: float = 24.0
WATTS_PER_KW: float = 1000.0
KG_PER_TONNE: float = 1000.0

# =============================================================================
# Energy Conversions
# =============================================================================

BTU_PER_TON_HR: float = 12000.0  # BTU/hr per ton of refrigeration

# Sensible heat factor for standard air: 60 min/hr * 0.075 lb/ft³ * 0.24 BTU/(lb·°F)
AIR_SENSIBLE_HEAT_FACTOR: float = 1.08  # BTU/(hr·CFM·°F)

# Workbook lighting row: kW * 3.6 * hours
LIGHTING_KJ_FACTOR: float = 3.6

# =============================================================================
# Insulation Model
# =============================================================================

# Thermal conductivity k in W/(m·K) by insulation type
INSULATION_CONDUCTIVITY = {
    "PUF": 0.022,  # Polyurethane foam
    "EPS": 0.036,  # Expanded polystyrene
    "XPS": 0.029,  # Extruded polystyrene
    "PIR": 0.022,  # Polyisocyanurate
    "FIBERGLASS": 0.040,
}
DEFAULT_INSULATION_TYPE: str = "PUF"

# Surface film and structure resistances in m²·K/W
R_INSIDE_AIR: float = 0.13
R_OUTSIDE_AIR: float = 0.04
R_STRUCTURE: float = 0.15

# Blast freezer panel table: thickness (mm) -> U-factor W/(m²·K)
U_FACTOR_BY_THICKNESS = {
    25: 0.732,
    50: 0.42,
    60: 0.37,
    80: 0.295,
    100: 0.227,
    125: 0.182,
    150: 0.153,
    200: 0.119,
}
U_FACTOR_MIN_THICKNESS: float = 25.0  # mm - thinner panels clamp to 0.732
U_FACTOR_MAX_THICKNESS: float = 200.0  # mm - thicker panels clamp to 0.119
U_FACTOR_FALLBACK_THICKNESS: int = 150  # mm - untabulated thickness uses this row

# =============================================================================
# Transmission
# =============================================================================

# Legacy cold room sheet: ceiling and floor see 30% of the wall ΔT
REDUCED_CEILING_FLOOR_FACTOR: float = 0.3

# =============================================================================
# Engine Constants
# =============================================================================

COLD_ROOM_KW_PER_TR: float = 3.517
FREEZER_KW_PER_TR: float = 3.516
BLAST_FREEZER_KW_PER_TR: float = 3.517

COLD_ROOM_SAFETY_MARGIN: float = 0.10
FREEZER_SAFETY_MARGIN: float = 0.20
BLAST_FREEZER_SAFETY_MARGIN: float = 0.05

COLD_ROOM_SENSIBLE_FRACTION: float = 0.85
FREEZER_SENSIBLE_FRACTION: float = 0.95
BLAST_FREEZER_SENSIBLE_FRACTION: float = 0.75

# Coil air temperature rise used for air quantity, in K
COLD_ROOM_COIL_DELTA_T: float = 20.0 / FAHRENHEIT_PER_KELVIN  # 20 °F
FREEZER_COIL_DELTA_T: float = 20.0 / FAHRENHEIT_PER_KELVIN  # 20 °F
BLAST_FREEZER_COIL_DELTA_T: float = 5.0

# Legacy cold room air-change revision multiplied by 1.36
LEGACY_AIR_CHANGE_CONSTANT: float = 1.36
