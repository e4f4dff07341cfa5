"""
GridFleet Synthetic Fleet — Quarterly Health Time Series
==========================================================
Four quarterly oil/gas/thermal snapshots per asset, oldest first, ending at
the asset's present health index.

Each quarter's synthetic health is `min(100, health + step * q)` where the
step is larger for currently unhealthy assets, so the series always trends
toward the present value. Every degradation indicator scales with a gas
multiplier `(100 - hi) / 50`: worse quarters carry more gas, wetter and more
acidic oil, and lower dielectric strength.

Also provides the IEEE C57.104 condition classifier and the Duval triangle
fault-zone classifier used by the diagnostic narrative.
"""

from __future__ import annotations
from typing import Optional

from loguru import logger

from fleet_model.ontology import GridAsset, HealthRecord, ConditionLabel
from fleet_model.catalog import DGA_CONDITION_LIMITS
from fleet_synth.random_source import Channel, channel_source
from fleet_synth.generator import GeneratorConfig, month_date

QUARTERS = 4


def condition_label(health_index: float) -> ConditionLabel:
    if health_index >= 85:
        return ConditionLabel.GOOD
    if health_index >= 70:
        return ConditionLabel.FAIR
    if health_index >= 50:
        return ConditionLabel.POOR
    if health_index >= 30:
        return ConditionLabel.VERY_POOR
    return ConditionLabel.END_OF_LIFE


def synthesize_health_records(asset: GridAsset,
                              config: Optional[GeneratorConfig] = None) -> list[HealthRecord]:
    """Four quarterly health records, chronological, the last one current."""
    cfg = config or GeneratorConfig()
    rng = channel_source(asset.tag, Channel.HEALTH)
    records: list[HealthRecord] = []

    age_factor = asset.age / 60
    step = 4 if asset.health < 40 else 2
    temp_base = 65 + (asset.load / 100) * 20
    arcing = "Winding" in asset.failure_mode

    for q in range(QUARTERS - 1, -1, -1):
        sampled_on = month_date(cfg.reference_date, q * 3, rng.int_from(10, 15))
        hi = min(100, asset.health + step * q)
        deficit = 100 - hi
        gas_multiplier = deficit / 50

        # Dissolved gases (ppm)
        h2 = int((150 + rng.next() * 100) * gas_multiplier + 50)
        ch4 = int((80 + rng.next() * 60) * gas_multiplier + 20)
        acetylene_draw = rng.next()
        c2h4 = int((100 + rng.next() * 80) * gas_multiplier + 30)
        if arcing:
            # 30–70 % of CH4 + C2H4 keeps the Duval share in the discharge zones
            c2h2 = int((ch4 + c2h4) * (0.3 + acetylene_draw * 0.4))
        else:
            c2h2 = int((2 + acetylene_draw * 5) * gas_multiplier)
        c2h6 = int((40 + rng.next() * 30) * gas_multiplier + 15)
        co = int((300 + rng.next() * 200) * gas_multiplier + 100)
        co2 = int((3000 + rng.next() * 2000) * gas_multiplier + 2000)
        o2 = int(3000 + rng.next() * 500)
        n2 = int(50000 + rng.next() * 3000)

        records.append(HealthRecord(
            asset_tag=asset.tag,
            timestamp=sampled_on.isoformat(),
            h2=h2, ch4=ch4, c2h2=c2h2, c2h4=c2h4, c2h6=c2h6, co=co, co2=co2, o2=o2, n2=n2,
            tdcg=h2 + ch4 + c2h2 + c2h4 + c2h6 + co,
            moisture=int(15 + deficit / 5 + rng.next() * 5),
            acidity=round(0.05 + deficit / 200 + rng.next() * 0.05, 2),
            dielectric_strength=int(45 - deficit / 5 + rng.next() * 3),
            interfacial_tension=int(28 - deficit / 8 + rng.next() * 2),
            color_number=round(2 + deficit / 15 + rng.next(), 1),
            power_factor=round(0.3 + deficit / 40 + rng.next() * 0.2, 1),
            furan_2fal=round(0.2 + age_factor * 2 + rng.next() * 0.3, 1),
            top_oil_temp=int(temp_base + rng.next() * 8 - 4),
            winding_hot_spot=int(temp_base + 15 + rng.next() * 10 - 5),
            ambient_temp=int(15 + rng.next() * 20),
            load_percent=int(asset.load - 5 + rng.next() * 10),
            health_index=hi,
            condition=condition_label(hi),
            remaining_life_years=max(1, int(hi / 10 - 1 + rng.next() * 3)),
        ))

    logger.debug(f"{asset.tag}: {len(records)} health records, "
                 f"HI {records[0].health_index} → {records[-1].health_index}")
    return records


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DGA INTERPRETATION — IEEE C57.104 conditions & Duval triangle
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def dga_condition_level(gas: str, value: float) -> int:
    """IEEE C57.104 condition (1–4) of one gas, or of "tdcg"."""
    limits = DGA_CONDITION_LIMITS.get(gas)
    if limits is None:
        return 1
    for level, upper in enumerate(limits, start=1):
        if value <= upper:
            return level
    return 4


def duval_zone(ch4: float, c2h4: float, c2h2: float) -> str:
    """Duval triangle 1 fault zone from the relative CH4 / C2H4 / C2H2 shares."""
    total = ch4 + c2h4 + c2h2
    if total == 0:
        return "Normal"
    p_ch4 = ch4 / total * 100
    p_c2h4 = c2h4 / total * 100
    p_c2h2 = c2h2 / total * 100

    if p_c2h2 > 29:
        return "D1 - High Energy Discharge"
    if p_c2h2 > 13:
        return "D2 - Low Energy Discharge"
    if p_c2h4 > 50 and p_c2h2 < 4:
        return "T3 - Thermal Fault >700°C"
    if p_c2h4 > 20 and p_ch4 < 50:
        return "T2 - Thermal Fault 300-700°C"
    if p_ch4 > 80:
        return "PD - Partial Discharge"
    if p_ch4 > 50:
        return "T1 - Thermal Fault <300°C"
    return "DT - Mix of Thermal & Electrical"
