#!/usr/bin/env python3
"""
Command-line heat-load calculator.

Usage:
    heatload cold-room
    heatload blast-freezer --input scenario.yaml --format json
    heatload freezer --preset "Ice Cream" --verbose

A scenario file (YAML or JSON) may hold ``room``, ``product`` and ``misc``
sections that override the engine's default inputs, and a ``config``
section that overrides the engine constants.
"""

import argparse
import json
import logging
import sys

import yaml

from heatload.core.config import build_inputs, create_engine_config, load_config
from heatload.engines import ENGINES, create_engine
from heatload.products import ENGINE_CATALOGUES, apply_preset

logger = logging.getLogger(__name__)

SCENARIO_SECTIONS = ("config", "room", "product", "misc")


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="heatload",
        description="Estimate the refrigeration heat load of a cold room, freezer room or blast freezer.",
    )
    parser.add_argument(
        "engine",
        choices=[name.replace("_", "-") for name in ENGINES],
        help="Product line to calculate",
    )
    parser.add_argument(
        "-i", "--input",
        help="YAML or JSON scenario file with config/room/product/misc overrides",
    )
    parser.add_argument(
        "-p", "--preset",
        help="Product preset to apply (e.g. 'Apple', 'Chicken')",
    )
    parser.add_argument(
        "-f", "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def run(engine_name: str, scenario=None, preset=None):
    """
    Calculate one scenario.

    Args:
        engine_name: cold_room, freezer or blast_freezer
        scenario: Optional dict with config/room/product/misc sections
        preset: Optional product preset name

    Returns:
        CalculationResults
    """
    scenario = scenario or {}
    unknown = sorted(set(scenario) - set(SCENARIO_SECTIONS))
    if unknown:
        raise ValueError(f"Unknown scenario section(s): {', '.join(unknown)}")

    config = create_engine_config(engine_name, scenario.get("config"))
    overrides = {k: v for k, v in scenario.items() if k != "config"}
    room, product, misc = build_inputs(engine_name, overrides)
    if preset:
        product = apply_preset(product, preset, ENGINE_CATALOGUES[engine_name])

    engine = create_engine(engine_name, config)
    logger.info("Calculating %s heat load", engine.name)
    return engine.calculate(room, product, misc)


def format_table(results, engine_cls) -> str:
    """Render results as an aligned two-column table."""
    metadata = engine_cls.get_results_metadata()
    values = results.to_dict()
    width = max(len(meta["label"]) + len(meta.get("unit", "")) + 3 for meta in metadata.values())

    lines = [f"{results.engine.replace('_', ' ').title()} heat load", "-" * (width + 16)]
    for key, meta in metadata.items():
        label = meta["label"]
        if meta.get("unit"):
            label = f"{label} [{meta['unit']}]"
        value = values[key]
        if isinstance(value, float):
            lines.append(f"{label:<{width}} {value:>15,.3f}")
        else:
            lines.append(f"{label:<{width}} {value!s:>15}")
    if not results.storage_capacity_valid:
        lines.append("WARNING: daily loading exceeds storage capacity")
    return "\n".join(lines)


def main(argv=None) -> int:
    """Entry point for the heatload command."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    engine_name = args.engine.replace("-", "_")

    try:
        scenario = load_config(args.input) if args.input else {}
        results = run(engine_name, scenario, args.preset)
    except (FileNotFoundError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.error("%s", e)
        return 1

    if args.format == "json":
        print(json.dumps(results.to_dict(), indent=2))
    else:
        print(format_table(results, ENGINES[engine_name]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
