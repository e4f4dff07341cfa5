"""
GridFleet Synthetic Fleet — Fleet Registry
============================================
In-memory, indexed view over a generated fleet.

Supports:
  - Asset lookup by tag and by operating company
  - Critical-asset filter (health < 50)
  - Fleet statistics
  - Export to JSON, an LLM-friendly markdown briefing, and per-asset dossiers
    (asset + equipment profile + health series + diagnostic + scenario +
    work-order history)

A process-wide fleet built from the default configuration is cached behind
get_fleet(); every derived record is recomputed from its asset on demand.
"""

import json
from functools import lru_cache
from pathlib import Path
from dataclasses import asdict
from collections import defaultdict
from typing import Optional
from loguru import logger

from .ontology import GridAsset, Fleet, FleetSummary, RiskTrend
from .catalog import OPCO_BY_ID
from fleet_synth.generator import (
    GeneratorConfig, generate_fleet, synthesize_equipment_profile, compute_age_distribution,
)
from fleet_synth.timeseries import synthesize_health_records
from fleet_synth.diagnostics import synthesize_diagnostic
from fleet_synth.scenario import synthesize_scenario
from fleet_synth.work_orders import synthesize_work_orders

CRITICAL_HEALTH = 50


class FleetRegistry:
    """Indexed, read-only access to one generated fleet."""

    def __init__(self, fleet: Fleet, config: Optional[GeneratorConfig] = None):
        self.assets: list[GridAsset] = fleet.assets
        self.summary: FleetSummary = fleet.stats
        self.config = config or GeneratorConfig()

        # Indexes for fast lookup
        self._tag_index: dict[str, GridAsset] = {}
        self._opco_index: dict[str, list[GridAsset]] = defaultdict(list)
        for asset in self.assets:
            self._tag_index[asset.tag] = asset
            self._opco_index[asset.opco].append(asset)

    @classmethod
    def build(cls, config: Optional[GeneratorConfig] = None) -> "FleetRegistry":
        config = config or GeneratorConfig()
        return cls(generate_fleet(config), config)

    # ── Queries ──────────────────────────────────────

    def get_by_tag(self, tag: str) -> Optional[GridAsset]:
        return self._tag_index.get(tag)

    def get_by_opco(self, opco: str) -> list[GridAsset]:
        return list(self._opco_index.get(opco, []))

    def get_critical_assets(self) -> list[GridAsset]:
        return [a for a in self.assets if a.health < CRITICAL_HEALTH]

    # ── Statistics ───────────────────────────────────

    def stats(self) -> dict:
        trends = defaultdict(int)
        for a in self.assets:
            trends[a.risk_trend.value] += 1
        return {
            "assets": len(self.assets),
            "operating_companies": len(self._opco_index),
            "critical_assets": len(self.get_critical_assets()),
            "risk_trend": {t.value: trends[t.value] for t in RiskTrend},
            "by_opco": {opco: len(assets) for opco, assets in self._opco_index.items()},
            "summary": asdict(self.summary),
        }

    # ── Derived records ──────────────────────────────

    def dossier(self, tag: str) -> Optional[dict]:
        """Every derived record for one asset, or None for an unknown tag."""
        asset = self.get_by_tag(tag)
        if asset is None:
            return None
        records = synthesize_health_records(asset, self.config)
        diagnostic = synthesize_diagnostic(asset, records, self.config)
        return {
            "asset": asdict(asset),
            "equipment_profile": asdict(synthesize_equipment_profile(asset, self.config)),
            "health_records": [asdict(r) for r in records],
            "diagnostic": asdict(diagnostic),
            "scenario": asdict(synthesize_scenario(asset, diagnostic, self.config)),
            "work_orders": [asdict(wo) for wo in synthesize_work_orders(asset, self.config)],
        }

    # ── Export ───────────────────────────────────────

    def export_json(self, filepath: str, critical_only: bool = False):
        """Export fleet assets and summary to JSON."""
        assets = self.get_critical_assets() if critical_only else self.assets
        data = {
            "metadata": {
                "version": "1.0",
                "generator": "GridFleet Synthetic Generator",
                "fleet_seed": self.config.fleet_seed,
                "reference_date": self.config.reference_date.isoformat(),
            },
            "statistics": self.stats(),
            "age_distribution": compute_age_distribution(self.assets),
            "assets": {a.tag: asdict(a) for a in assets},
        }
        Path(filepath).write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
        logger.info(f"Fleet exported to {filepath} ({len(assets)} assets)")

    def export_for_llm(self, filepath: str, critical_only: bool = True):
        """Export the fleet as a markdown briefing for LLM grounding."""
        s = self.summary
        lines = ["# Substation Fleet Briefing\n",
                 f"- Assets: {s.total} (sample {s.sample_ratio} of {s.total_real:,})",
                 f"- Average age: {s.avg_age} yr · average health: {s.avg_health}",
                 f"- Older than 40 yr: {s.pct_over_40}% · poor health (<40): {s.pct_poor}%"]

        for opco_id, assets in self._opco_index.items():
            opco = OPCO_BY_ID.get(opco_id)
            if opco:
                lines.append(f"\n## {opco.name} — {opco.territory} ({opco.state})")
                lines.append(f"- Customers: {opco.customers:,} · peak {opco.peak_mw:,} MW · "
                             f"avg restore {opco.avg_restore_hours} h")
            else:
                lines.append(f"\n## {opco_id}")
            lines.append(f"- Substations in sample: {len(assets)}")

            selected = [a for a in assets if a.health < CRITICAL_HEALTH] if critical_only else assets
            for a in sorted(selected, key=lambda x: x.health):
                lines.append(f"\n### {a.tag} — {a.name}")
                lines.append(f"- {a.kv} kV · age {a.age} yr · health {a.health} · load {a.load}%")
                lines.append(f"- Customers served: {a.customers:,}")
                lines.append(f"- Failure mode: {a.failure_mode} (TTF {a.ttf}, risk {a.risk_trend.value})")
                lines.append(f"- Repair: {a.repair_window}, {a.repair_duration}")
                if a.materials:
                    lines.append(f"- Materials: {', '.join(a.materials)}")
                if a.skills:
                    lines.append(f"- Skills: {', '.join(a.skills)}")

        Path(filepath).write_text("\n".join(lines), encoding="utf-8")
        logger.info(f"LLM fleet briefing exported: {filepath}")

    def export_asset_dossier(self, tag: str, filepath: str) -> bool:
        """Write one asset's dossier as JSON. Returns False for an unknown tag."""
        dossier = self.dossier(tag)
        if dossier is None:
            logger.warning(f"No asset with tag {tag}")
            return False
        Path(filepath).write_text(json.dumps(dossier, indent=2, default=str), encoding="utf-8")
        logger.info(f"Asset dossier exported: {filepath} ({len(dossier['work_orders'])} work orders)")
        return True


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  PROCESS-WIDE DEFAULT FLEET
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@lru_cache(maxsize=1)
def get_fleet() -> FleetRegistry:
    """The default-configuration fleet, generated once per process."""
    return FleetRegistry.build()


def get_substation_asset(tag: str) -> Optional[GridAsset]:
    return get_fleet().get_by_tag(tag)


def get_critical_assets() -> list[GridAsset]:
    return get_fleet().get_critical_assets()
