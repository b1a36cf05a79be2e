"""
Heat-load formulas shared by the refrigeration engines.

This module holds the pure formula pieces. Each engine decides which of them
it uses and in which unit its components are expressed:

- Rate formulas return kW (cold room, freezer room).
- Energy formulas return kJ over a duty period (blast freezer).

Inputs are SI: metres, m², m³, kg, °C (or K for spans), kW, hours.
A zero denominator (pull-down hours, batch hours, ΔT) yields a zero result
rather than an exception or NaN.

Usage:
    from heatload.physics.thermal import transmission_load_kw, classify_freezing_regime

    wall_kw = transmission_load_kw(u_factor=0.295, area=45.3, delta_t=43)
    regime = classify_freezing_regime(incoming=25, outgoing=-15, freezing_point=-0.8)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from heatload.core.constants import (
    AIR_SENSIBLE_HEAT_FACTOR,
    BTU_PER_TON_HR,
    HOURS_PER_DAY,
    KG_PER_TONNE,
    LIGHTING_KJ_FACTOR,
    SECONDS_PER_HOUR,
    WATTS_PER_KW,
)
from heatload.physics.units import convert_temperature_difference


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


# =============================================================================
# Geometry
# =============================================================================


def wall_area(length: float, width: float, height: float) -> float:
    """Total area of the four walls: 2*(L*H) + 2*(W*H)."""
    return 2 * (length * height) + 2 * (width * height)


def ceiling_area(length: float, width: float) -> float:
    """Ceiling area, L*W. The floor has the same area."""
    return length * width


def room_volume(length: float, width: float, height: float) -> float:
    """Internal room volume, L*W*H."""
    return length * width * height


# =============================================================================
# Transmission
# =============================================================================


def transmission_load_kw(u_factor: float, area: float, delta_t: float) -> float:
    """
    Conduction load through a surface as a rate.

    load = U * A * ΔT / 1000

    Args:
        u_factor: Surface U-factor in W/(m²·K)
        area: Surface area in m²
        delta_t: Temperature difference across the surface in K

    Returns:
        Load in kW
    """
    return u_factor * area * delta_t / WATTS_PER_KW


def transmission_load_kj(u_factor: float, area: float, delta_t: float, hours: float) -> float:
    """
    Conduction energy through a surface over a duty period.

    load = ((ΔT * A * U) / 1000) * 3600 * hours

    Returns:
        Energy in kJ
    """
    return ((delta_t * area * u_factor) / WATTS_PER_KW) * SECONDS_PER_HOUR * hours


# =============================================================================
# Product
# =============================================================================


class FreezingRegime(Enum):
    """Which side of the freezing point a product cooling process covers."""

    ABOVE_FREEZING = "above_freezing"
    CROSSING_FREEZING = "crossing_freezing"
    BELOW_FREEZING = "below_freezing"


@dataclass(frozen=True)
class ProductLoad:
    """Product load split into its three freezing phases."""

    before_freezing: float = 0.0
    latent_heat: float = 0.0
    after_freezing: float = 0.0
    regime: FreezingRegime = FreezingRegime.ABOVE_FREEZING

    @property
    def total(self) -> float:
        return self.before_freezing + self.latent_heat + self.after_freezing

    def scaled(self, factor: float) -> "ProductLoad":
        """Return the same split with every phase multiplied by ``factor``."""
        return ProductLoad(
            before_freezing=self.before_freezing * factor,
            latent_heat=self.latent_heat * factor,
            after_freezing=self.after_freezing * factor,
            regime=self.regime,
        )


def classify_freezing_regime(
    incoming: float, outgoing: float, freezing_point: Optional[float]
) -> FreezingRegime:
    """
    Select the freezing regime from product temperatures.

    - outgoing above the freezing point: ABOVE_FREEZING
    - incoming above and outgoing at or below it: CROSSING_FREEZING
    - incoming at or below it: BELOW_FREEZING

    A product with no freezing point is always ABOVE_FREEZING. An incoming
    temperature exactly at the freezing point belongs to BELOW_FREEZING.
    """
    if freezing_point is None or outgoing > freezing_point:
        return FreezingRegime.ABOVE_FREEZING
    if incoming > freezing_point:
        return FreezingRegime.CROSSING_FREEZING
    return FreezingRegime.BELOW_FREEZING


def product_energy(
    mass: float,
    cp_above: float,
    cp_below: float,
    latent_heat: float,
    incoming: float,
    outgoing: float,
    freezing_point: Optional[float],
) -> ProductLoad:
    """
    Heat to remove from a product, split by freezing phase.

    Args:
        mass: Product mass in kg
        cp_above: Specific heat above freezing in kJ/(kg·K)
        cp_below: Specific heat below freezing in kJ/(kg·K)
        latent_heat: Latent heat of fusion in kJ/kg
        incoming: Product entering temperature in °C
        outgoing: Product final temperature in °C
        freezing_point: Freezing point in °C, or None

    Returns:
        ProductLoad with each phase in kJ
    """
    regime = classify_freezing_regime(incoming, outgoing, freezing_point)

    if regime is FreezingRegime.ABOVE_FREEZING:
        return ProductLoad(before_freezing=mass * cp_above * (incoming - outgoing), regime=regime)

    if regime is FreezingRegime.BELOW_FREEZING:
        return ProductLoad(after_freezing=mass * cp_below * (incoming - outgoing), regime=regime)

    return ProductLoad(
        before_freezing=mass * cp_above * (incoming - freezing_point),
        latent_heat=mass * latent_heat,
        after_freezing=mass * cp_below * (freezing_point - outgoing),
        regime=regime,
    )


def segment_product_energy(
    mass: float,
    cp_above: float,
    cp_below: float,
    latent_heat: float,
    incoming: float,
    outgoing: float,
    freezing_point: float,
) -> ProductLoad:
    """
    Heat per freezing segment, each computed from its own temperature span.

    Unlike :func:`product_energy` the three rows are always evaluated, the
    way the blast freezer workbook lays them out. A span that runs the wrong
    way (e.g. incoming already below the freezing point) gives a negative row.
    The reported regime is still the classified one.

    Returns:
        ProductLoad with each phase in kJ
    """
    return ProductLoad(
        before_freezing=mass * cp_above * (incoming - freezing_point),
        latent_heat=mass * latent_heat,
        after_freezing=mass * cp_below * (freezing_point - outgoing),
        regime=classify_freezing_regime(incoming, outgoing, freezing_point),
    )


def product_load_kw(energy: ProductLoad, pull_down_hours: float) -> ProductLoad:
    """Spread phase energies (kJ) over the pull-down time, giving kW."""
    return energy.scaled(safe_divide(1.0, pull_down_hours * SECONDS_PER_HOUR))


def product_load_batch_kj(energy: ProductLoad, batch_hours: float, pull_down_hours: float) -> ProductLoad:
    """Scale phase energies (kJ) by batch hours / pull-down hours."""
    return energy.scaled(safe_divide(batch_hours, pull_down_hours))


# =============================================================================
# Respiration, air change and internal loads
# =============================================================================


def respiration_load_kw(mass_kg: float, watts_per_tonne: float) -> float:
    """
    Heat of respiration of stored produce.

    load = tonnes * W/tonne / 1000
    """
    return (mass_kg / KG_PER_TONNE) * watts_per_tonne / WATTS_PER_KW


def air_change_load_kw(rate: float, enthalpy_diff: float, hours: float) -> float:
    """Air change load: rate * Δh * hours / 1000."""
    return rate * enthalpy_diff * hours / WATTS_PER_KW


def air_change_volume_load_kw(
    rate: float, volume: float, enthalpy_diff: float, hours: float, constant: float = 1.0
) -> float:
    """Air change load scaled by room volume: rate * V * Δh * hours * constant / 1000."""
    return rate * volume * enthalpy_diff * hours * constant / WATTS_PER_KW


def air_change_load_kj(rate: float, enthalpy_diff: float, hours: float) -> float:
    """Air change energy: rate * Δh * 3600 * hours."""
    return rate * enthalpy_diff * SECONDS_PER_HOUR * hours


def daily_average_load_kw(power_kw: float, count: float, hours: float) -> float:
    """Average a duty-cycled load over the day: power * count * hours / 24."""
    return power_kw * count * hours / HOURS_PER_DAY


def duty_energy_kj(power_kw: float, count: float, hours: float) -> float:
    """Energy of a duty-cycled load: power * count * 3600 * hours."""
    return power_kw * count * SECONDS_PER_HOUR * hours


def lighting_energy_kj(power_kw: float, hours: float) -> float:
    """Lighting energy as the workbook states it: power * 3.6 * hours."""
    return power_kw * LIGHTING_KJ_FACTOR * hours


def continuous_heater_load_kw(power_kw: float, count: float) -> float:
    """Heater running continuously: power * count."""
    return power_kw * count


# =============================================================================
# Aggregation
# =============================================================================


def kw_to_tr(load_kw: float, kw_per_tr: float) -> float:
    """Convert kW to tons of refrigeration with an engine's TR constant."""
    return safe_divide(load_kw, kw_per_tr)


def tr_to_btu_hr(tons: float) -> float:
    """Convert tons of refrigeration to BTU/hr (1 TR = 12000 BTU/hr)."""
    return tons * BTU_PER_TON_HR


def capacity_with_margin(tons: float, margin: float) -> float:
    """Apply a safety margin fraction: tons * (1 + margin)."""
    return tons * (1 + margin)


def split_sensible_latent(load: float, sensible_fraction: float) -> Tuple[float, float]:
    """Split a load into (sensible, latent) by a fixed sensible fraction."""
    sensible = load * sensible_fraction
    return sensible, load - sensible


def required_air_flow_cfm(sensible_btu_hr: float, delta_t_k: float, density_factor: float = 1.0) -> float:
    """
    Air quantity needed to carry a sensible load across a coil.

    CFM = Q_sensible / (1.08 * ΔT_F) * density_factor

    Args:
        sensible_btu_hr: Sensible load in BTU/hr
        delta_t_k: Air temperature change across the coil in K
        density_factor: Optional storage-density adjustment

    Returns:
        Air flow in CFM, 0.0 when ΔT is zero
    """
    delta_t_f = convert_temperature_difference(delta_t_k, "K", "F")
    return safe_divide(sensible_btu_hr, AIR_SENSIBLE_HEAT_FACTOR * delta_t_f) * density_factor


def check_storage_capacity(
    daily_loading: float,
    storage_density: float,
    volume: float,
    maximum_storage: Optional[float] = None,
) -> Tuple[float, float, bool]:
    """
    Compare daily product loading against what the room can hold.

    Args:
        daily_loading: Product loaded per day in kg
        storage_density: Storage density in kg/m³
        volume: Room volume in m³
        maximum_storage: Explicit maximum storage in kg, if known

    Returns:
        Tuple of (capacity_kg, utilization, valid)
    """
    if maximum_storage is not None:
        capacity = maximum_storage
    else:
        capacity = storage_density * volume
    utilization = safe_divide(daily_loading, capacity)
    return capacity, utilization, utilization <= 1.0
