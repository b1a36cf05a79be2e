"""
Unit conversions for heat-load inputs.

Every function has the signature ``(value, from_unit, to_unit) -> value`` and
returns ``value`` unchanged when both units are equal. Supported tags:

- length: ``m``, ``ft``
- mass: ``kg``, ``lb`` (``lbs`` is accepted as an alias)
- temperature: ``C``, ``F``
- area: ``m2``, ``ft2`` (``m²``, ``ft²`` accepted)
- volume: ``m3``, ``ft3`` (``m³``, ``ft³`` accepted)

An unknown tag raises ``ValueError``. The input records reject bad tags at
construction, so the engines never reach that branch.

Usage:
    from heatload.physics.units import convert_length, convert_temperature

    meters = convert_length(10, "ft", "m")  # 3.048
    celsius = convert_temperature(212, "F", "C")  # 100.0
"""

from heatload.core.constants import (
    CUFT_PER_CUM,
    FAHRENHEIT_PER_KELVIN,
    KG_PER_LB,
    METERS_PER_FOOT,
    SQFT_PER_SQM,
)

LENGTH_UNITS = ("m", "ft")
MASS_UNITS = ("kg", "lb", "lbs")
TEMPERATURE_UNITS = ("C", "F")
AREA_UNITS = ("m2", "ft2", "m²", "ft²")
VOLUME_UNITS = ("m3", "ft3", "m³", "ft³")

# Factor to the SI base unit of each quantity
_LENGTH_TO_M = {"m": 1.0, "ft": METERS_PER_FOOT}
_MASS_TO_KG = {"kg": 1.0, "lb": KG_PER_LB, "lbs": KG_PER_LB}
_AREA_TO_M2 = {"m2": 1.0, "m²": 1.0, "ft2": 1.0 / SQFT_PER_SQM, "ft²": 1.0 / SQFT_PER_SQM}
_VOLUME_TO_M3 = {"m3": 1.0, "m³": 1.0, "ft3": 1.0 / CUFT_PER_CUM, "ft³": 1.0 / CUFT_PER_CUM}


def _factor(table, unit: str, quantity: str) -> float:
    try:
        return table[unit]
    except KeyError:
        raise ValueError(f"Unsupported {quantity} unit: {unit!r}") from None


def _convert_linear(value: float, from_unit: str, to_unit: str, table, quantity: str) -> float:
    if from_unit == to_unit:
        return value
    return value * _factor(table, from_unit, quantity) / _factor(table, to_unit, quantity)


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a length between meters and feet.

    Example:
        >>> convert_length(10, "ft", "m")
        3.048
    """
    return _convert_linear(value, from_unit, to_unit, _LENGTH_TO_M, "length")


def convert_mass(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a mass between kilograms and pounds.

    Both directions use 1 lb = 0.453592 kg.
    """
    return _convert_linear(value, from_unit, to_unit, _MASS_TO_KG, "mass")


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert an absolute temperature between °C and °F.

    Uses C = (F - 32) * 5/9 and F = C * 9/5 + 32.
    """
    if from_unit == to_unit:
        return value
    if from_unit == "F" and to_unit == "C":
        return (value - 32) * 5 / 9
    if from_unit == "C" and to_unit == "F":
        return value * 9 / 5 + 32
    raise ValueError(f"Unsupported temperature conversion: {from_unit!r} -> {to_unit!r}")


def convert_temperature_difference(delta: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature span (no offset) between K/°C and °F.

    ``C`` and ``K`` are interchangeable for spans.
    """
    scale = {"C": 1.0, "K": 1.0, "F": 1.0 / FAHRENHEIT_PER_KELVIN}
    return _convert_linear(delta, from_unit, to_unit, scale, "temperature difference")


def convert_area(value: float, from_unit: str, to_unit: str) -> float:
    """Convert an area between m² and ft² (1 m² = 10.7639 ft²)."""
    return _convert_linear(value, from_unit, to_unit, _AREA_TO_M2, "area")


def convert_volume(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a volume between m³ and ft³ (1 m³ = 35.3147 ft³)."""
    return _convert_linear(value, from_unit, to_unit, _VOLUME_TO_M3, "volume")
