#!/usr/bin/env python3
"""
GridFleet Synthetic Fleet — CLI Runner
========================================
Generate fleet → Summarize → Export all artifacts.

Usage:
  # Full fleet with today's reference date
  python main.py --output ./output

  # Bit-identical output across days
  python main.py --output ./output --reference-date 2025-06-30

  # Different fleet
  python main.py --output ./output --seed 7

  # Fleet plus one asset's full dossier
  python main.py --output ./output --tag COMED-0001

  # Only assets with health < 50 in the JSON export
  python main.py --output ./output --critical-only
"""

import sys
import json
import time
import argparse
from pathlib import Path
from datetime import date

from loguru import logger

from fleet_model.registry import FleetRegistry
from fleet_synth.generator import GeneratorConfig, generate_heat_data

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def build_fleet(config: GeneratorConfig) -> FleetRegistry:
    """Generate the fleet and log its statistics."""
    logger.info("━" * 60)
    logger.info("PHASE 1: Generating Substation Fleet")
    logger.info("━" * 60)
    logger.info(f"  Fleet seed:       {config.fleet_seed}")
    logger.info(f"  Reference date:   {config.reference_date.isoformat()}")

    registry = FleetRegistry.build(config)

    s = registry.summary
    stats = registry.stats()
    logger.info("")
    logger.info("Fleet Statistics:")
    for opco, count in s.by_opco.items():
        logger.info(f"  {opco + ':': <18}{count}")
    logger.info(f"  ─────────────────────────")
    logger.info(f"  TOTAL ASSETS:     {s.total} (sample {s.sample_ratio} of {s.total_real:,})")
    logger.info(f"  Avg age:          {s.avg_age} yr ({s.pct_over_40}% over 40)")
    logger.info(f"  Avg health:       {s.avg_health} ({s.pct_poor}% poor)")
    logger.info(f"  Critical (<50):   {stats['critical_assets']}")
    logger.info("")
    return registry


def export_artifacts(registry: FleetRegistry, output_path: Path, critical_only: bool):
    logger.info("━" * 60)
    logger.info("PHASE 2: Exporting Artifacts")
    logger.info("━" * 60)

    registry.export_json(str(output_path / "fleet.json"), critical_only=critical_only)
    registry.export_for_llm(str(output_path / "fleet_briefing_for_llm.md"))

    heat = generate_heat_data(registry.assets)
    (output_path / "outage_heatmap.json").write_text(json.dumps(heat), encoding="utf-8")
    logger.info(f"Outage heat map: {output_path / 'outage_heatmap.json'} ({len(heat):,} points)")


def parse_reference_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="GridFleet: deterministic synthetic substation-fleet generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --output ./output                          # Default fleet (seed 42)
  python main.py --output ./output --tag COMED-0001         # Fleet + asset dossier
  python main.py --output ./output --reference-date 2025-06-30
        """,
    )

    parser.add_argument("--output", "-o", type=str, default="./output",
                        help="Output directory for all generated artifacts (default: ./output)")
    parser.add_argument("--seed", "-s", type=int, default=42,
                        help="Fleet seed for reproducibility (default: 42)")
    parser.add_argument("--reference-date", "-r", type=parse_reference_date, default=None,
                        help="'Now' for health, work-order and scenario histories (default: today)")
    parser.add_argument("--tag", "-t", type=str, default=None,
                        help="Also export the full dossier of this asset (e.g. COMED-0001)")
    parser.add_argument("--critical-only", action="store_true",
                        help="Only include assets with health < 50 in fleet.json")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-asset synthesis detail")

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "INFO")

    output_path = Path(args.output)
    output_path.mkdir(parents=True, exist_ok=True)

    logger.info("╔════════════════════════════════════════════════════════╗")
    logger.info("║      GridFleet Synthetic Fleet Generator               ║")
    logger.info("║      Substations + Diagnostics + Maintenance History   ║")
    logger.info("╚════════════════════════════════════════════════════════╝")
    logger.info("")

    start_time = time.time()

    config = GeneratorConfig(fleet_seed=args.seed)
    if args.reference_date is not None:
        config.reference_date = args.reference_date

    registry = build_fleet(config)
    export_artifacts(registry, output_path, args.critical_only)

    if args.tag:
        dossier_path = output_path / f"asset_{args.tag}.json"
        if not registry.export_asset_dossier(args.tag, str(dossier_path)):
            logger.error(f"Unknown asset tag: {args.tag}")
            return 1

    elapsed = time.time() - start_time

    # Summary
    logger.info("")
    logger.info("━" * 60)
    logger.info("GENERATION COMPLETE")
    logger.info("━" * 60)
    logger.info(f"  Time elapsed:     {elapsed:.1f}s")
    logger.info(f"  Output directory: {output_path.absolute()}")
    logger.info("")
    logger.info("Output files:")
    for f in sorted(output_path.glob("*")):
        size = f.stat().st_size
        if size > 1_000_000:
            size_str = f"{size / 1_000_000:.1f} MB"
        elif size > 1_000:
            size_str = f"{size / 1_000:.1f} KB"
        else:
            size_str = f"{size} B"
        logger.info(f"  {f.name: <40} {size_str: >10}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
