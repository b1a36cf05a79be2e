#!/usr/bin/env python3
"""Compare the three heat-load engines.

This example runs every engine on its default workbook inputs, then shows
how a product preset and a config change move the cold room result.
"""

from heatload import (
    ColdRoomEngine,
    calculate_blast_freezer_heat_load,
    calculate_cold_room_heat_load,
    calculate_freezer_heat_load,
    default_inputs,
)
from heatload.core.config import ColdRoomConfig
from heatload.products import apply_preset


def print_summary(label, results):
    """Print the headline figures of one calculation."""
    shares = results.component_shares()
    print(f"{label:<28} {results.total_load_kw:>9.2f} kW {results.total_load_tr:>7.2f} TR "
          f"{results.capacity_tr:>7.2f} TR (with margin) {results.air_flow_cfm:>8.0f} CFM")
    print(f"{'':<28} product {shares['product']:.0%}, transmission {shares['transmission']:.0%}, "
          f"misc {shares['miscellaneous']:.0%}")


def main():
    """Run the comparison."""
    print("=" * 90)
    print("Default workbook scenarios")
    print("=" * 90)
    print_summary("Cold room", calculate_cold_room_heat_load())
    print_summary("Freezer room", calculate_freezer_heat_load())
    print_summary("Blast freezer (per batch)", calculate_blast_freezer_heat_load())

    print()
    print("=" * 90)
    print("Cold room variations")
    print("=" * 90)
    room, product, misc = default_inputs("cold_room")
    for preset in ("Apple", "Banana", "Milk"):
        results = calculate_cold_room_heat_load(room, apply_preset(product, preset), misc)
        print_summary(f"Cold room, {preset}", results)

    legacy = ColdRoomEngine(ColdRoomConfig(ceiling_floor_policy="reduced", air_change_constant=1.36))
    print_summary("Cold room, legacy sheet", legacy.calculate(room, product, misc))


if __name__ == "__main__":
    main()
