"""
GridFleet Synthetic Fleet Generator — Core Engine
===================================================
Builds an internally consistent population of substation transformers from a
single integer seed, reproducible bit-for-bit.

PIPELINE (one shared fleet stream, consumed in a fixed order per asset):
  1. SpatialDistributor    — weighted density center + triangular jitter, clipped
  2. Voltage class         — CategoricalSampler over the OpCo's voltage mix
  3. AttributeCorrelator   — age → health → load → customers
  4. Display name          — name pool + kV suffix (or "Sub #n" draw)
  5. AttributeCorrelator   — failure mode → time-to-failure → repair → risk trend

DERIVED VIEWS (per-asset channels seeded from the tag, see random_source):
  - Equipment profile       (this module)
  - Quarterly health series (timeseries)
  - Diagnostic narrative    (diagnostics)
  - Decision scenario       (scenario)
  - Work-order history      (work_orders)

SHAPING, NOT UNIFORM NOISE:
  - Ages follow a stepped, mid-life-heavy distribution with a tail past 50
  - Health decays linearly with age, with summed-uniform noise and an
    independent "surprise failure" coin-flip
  - Urban substations run hotter than rural ones
  - Failure modes are only eligible once an asset is old enough to show them
"""

from __future__ import annotations
import math
import re
from datetime import date
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from loguru import logger

from fleet_model.ontology import (
    GridAsset, EquipmentProfile, FleetSummary, Fleet, RiskTrend,
    RegionGeometry, DensityCenter, VoltageClass, FailureModeProfile,
)
from fleet_model.catalog import (
    REGIONS, SUBSTATION_NAMES, FAILURE_MODES, DEFAULT_FAILURE_MODE,
    HEAT_BACKGROUND, MANUFACTURERS, COOLING_TYPES, TRANSFORMER_SUBTYPES,
)
from fleet_synth.random_source import (
    DeterministicRandomSource, CategoricalSampler, Channel, channel_source,
)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  CONFIGURATION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass
class GeneratorConfig:
    """Configuration for synthetic fleet generation."""
    fleet_seed: int = 42                        # Seed of the single fleet stream
    reference_date: date = field(default_factory=date.today)  # "Now" for all histories
    regions: tuple[RegionGeometry, ...] = REGIONS

    # Fleet summary labelling
    total_real_assets: int = 6230               # Size of the real fleet being sampled
    sample_ratio: str = "1:10.5"

    # Health shaping
    health_baseline: float = 95.0               # Health of a brand-new asset
    health_decay_per_year: float = 1.1
    health_noise_span: float = 20.0             # Peak-to-peak width of age noise
    surprise_failure_probability: float = 0.06
    surprise_failure_band: tuple[float, float] = (15.0, 40.0)
    health_bounds: tuple[int, int] = (12, 98)

    # Load shaping (% of nameplate)
    urban_load_base: float = 70.0
    rural_load_base: float = 55.0
    load_spread: float = 30.0


# Cumulative-probability → 5-year age band (start, width). Mid-life heavy.
AGE_BANDS: tuple[tuple[float, int, int], ...] = (
    (0.04, 1, 5),
    (0.12, 6, 5),
    (0.22, 11, 5),
    (0.34, 16, 5),
    (0.46, 21, 5),
    (0.56, 26, 5),
    (0.65, 31, 5),
    (0.77, 36, 5),
    (0.88, 41, 5),
    (0.95, 46, 5),
    (1.00, 51, 10),                              # Long tail: 51–60
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def month_date(reference: date, months_back: int, day: int) -> date:
    """Day `day` of the calendar month `months_back` months before `reference`."""
    index = reference.year * 12 + (reference.month - 1) - months_back
    return date(index // 12, index % 12 + 1, day)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  SPATIAL DISTRIBUTOR — Clustered placement inside a territory
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SpatialDistributor:
    """
    Places points around weighted density centers.

    A center is picked by weight, then each axis gets a triangular jitter
    (sum of three uniforms minus 1.5) scaled by the center radius, with the
    longitude axis widened by the region's stretch factor. The result is
    clipped to the bounding box.
    """

    def __init__(self, region: RegionGeometry):
        self.region = region
        self.sampler = CategoricalSampler.by_weight(region.centers, lambda c: c.weight)

    def place(self, rng: DeterministicRandomSource) -> tuple[float, float]:
        center: DensityCenter = self.sampler.sample(rng)
        lat = center.lat + rng.triangular_unit() * center.radius
        lng = center.lng + rng.triangular_unit() * center.radius * self.region.lng_stretch
        r = self.region
        return (
            max(r.lat_min, min(r.lat_max, lat)),
            max(r.lng_min, min(r.lng_max, lng)),
        )

    def is_urban(self, lat: float, lng: float) -> bool:
        """Inside the core of any density center."""
        return any(
            abs(lat - c.lat) < c.radius * 0.6 and abs(lng - c.lng) < c.radius * 0.8
            for c in self.region.centers
        )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  ATTRIBUTE CORRELATOR — Age → health → load → prognosis
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass
class ConditionAttributes:
    age: int
    health: int
    load: int
    customers: int


@dataclass
class PrognosisAttributes:
    failure_mode: FailureModeProfile
    ttf: str
    repair_window: str
    repair_duration: str
    risk_trend: RiskTrend


class AttributeCorrelator:
    """
    Derives correlated asset attributes from one random stream.

    Draw order is part of the contract: it decides which draw feeds which
    attribute, and therefore what a given seed produces.
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config

    # ── Condition ───────────────────────────────────

    def sample_age(self, rng: DeterministicRandomSource) -> int:
        r = rng.next()
        for threshold, start, width in AGE_BANDS:
            if r < threshold:
                return rng.int_from(start, width)
        _, start, width = AGE_BANDS[-1]
        return rng.int_from(start, width)

    def sample_health(self, age: int, rng: DeterministicRandomSource) -> int:
        cfg = self.config
        # Two summed uniforms: symmetric, peaked noise of ±span/2
        noise = (rng.next() + rng.next() - 1.0) * cfg.health_noise_span / 2
        value = cfg.health_baseline - age * cfg.health_decay_per_year + noise
        # Independent coin-flip: an unexpectedly sick asset of any age
        if rng.next() < cfg.surprise_failure_probability:
            low, high = cfg.surprise_failure_band
            value = rng.uniform(low, high)
        lo, hi = cfg.health_bounds
        return max(lo, min(hi, round_half_up(value)))

    def sample_load(self, is_urban: bool, rng: DeterministicRandomSource) -> int:
        cfg = self.config
        base = cfg.urban_load_base if is_urban else cfg.rural_load_base
        return round_half_up(base + rng.next() * cfg.load_spread)

    @staticmethod
    def sample_customers(voltage: VoltageClass, rng: DeterministicRandomSource) -> int:
        span = voltage.customers_max - voltage.customers_min
        return round_half_up(voltage.customers_min + rng.next() * span)

    def correlate_condition(self, is_urban: bool, voltage: VoltageClass,
                            rng: DeterministicRandomSource) -> ConditionAttributes:
        age = self.sample_age(rng)
        health = self.sample_health(age, rng)
        load = self.sample_load(is_urban, rng)
        customers = self.sample_customers(voltage, rng)
        return ConditionAttributes(age=age, health=health, load=load, customers=customers)

    # ── Prognosis ───────────────────────────────────

    @staticmethod
    def pick_failure_mode(age: int, rng: DeterministicRandomSource) -> FailureModeProfile:
        eligible = [fm for fm in FAILURE_MODES if fm.min_age <= age]
        if not eligible:
            return DEFAULT_FAILURE_MODE
        return CategoricalSampler.by_weight(eligible, lambda fm: fm.weight).sample(rng)

    @staticmethod
    def predict_time_to_failure(health: int, rng: DeterministicRandomSource) -> str:
        if health < 30:
            months = rng.int_from(1, 6)
        elif health < 50:
            months = rng.int_from(6, 18)
        elif health < 70:
            months = rng.int_from(18, 36)
        else:
            months = rng.int_from(36, 60)
        if months < 12:
            return f"{months} mo"
        return f"{months / 12:.1f} yr"

    @staticmethod
    def repair_window(health: int) -> str:
        if health < 30:
            return "Immediate"
        if health < 50:
            return "Within 30 days"
        if health < 70:
            return "Next outage cycle"
        return "Scheduled PM"

    @staticmethod
    def repair_duration(failure_mode: FailureModeProfile, rng: DeterministicRandomSource) -> str:
        hours = rng.int_from(48, 72) if failure_mode.heavy else rng.int_from(4, 24)
        if hours >= 48:
            return f"{hours // 24}d {hours % 24}h"
        return f"{hours}h"

    @staticmethod
    def risk_trend(health: int, load: int, age: int) -> RiskTrend:
        if health < 40 and load > 70:
            return RiskTrend.CRITICAL
        if health < 60 or (age > 35 and load > 60):
            return RiskTrend.DEGRADING
        return RiskTrend.STABLE

    def correlate_prognosis(self, condition: ConditionAttributes,
                            rng: DeterministicRandomSource) -> PrognosisAttributes:
        fm = self.pick_failure_mode(condition.age, rng)
        ttf = self.predict_time_to_failure(condition.health, rng)
        return PrognosisAttributes(
            failure_mode=fm,
            ttf=ttf,
            repair_window=self.repair_window(condition.health),
            repair_duration=self.repair_duration(fm, rng),
            risk_trend=self.risk_trend(condition.health, condition.load, condition.age),
        )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  FLEET GENERATOR — Orchestrates everything
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FleetGenerator:
    """
    Main fleet generation engine.

    Pipeline:
    1. One fleet stream seeded with config.fleet_seed
    2. For each OpCo region, in catalog order, for each substation slot:
       a. Place it (SpatialDistributor)
       b. Pick its voltage class (CategoricalSampler)
       c. Correlate age/health/load/customers
       d. Name it
       e. Correlate failure mode and prognosis
    3. Summarize the fleet
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.correlator = AttributeCorrelator(self.config)

    def generate(self) -> Fleet:
        rng = DeterministicRandomSource(self.config.fleet_seed)
        assets: list[GridAsset] = []

        for region in self.config.regions:
            distributor = SpatialDistributor(region)
            voltage_sampler = CategoricalSampler.by_weight(region.voltages, lambda v: v.share)
            names = SUBSTATION_NAMES[region.opco_id]
            for i in range(region.substation_count):
                asset = self._build_asset(
                    global_id=len(assets) + 1, slot=i, region=region, names=names,
                    distributor=distributor, voltage_sampler=voltage_sampler, rng=rng,
                )
                assets.append(asset)
            logger.debug(f"  {region.opco_id}: {region.substation_count} substations placed")

        stats = summarize_fleet(assets, self.config)
        logger.info(f"Fleet generated: {stats.total} assets (seed={self.config.fleet_seed}), "
                    f"avg age {stats.avg_age} yr, avg health {stats.avg_health}, "
                    f"{stats.pct_poor}% poor")
        return Fleet(assets=assets, stats=stats)

    def _build_asset(self, global_id: int, slot: int, region: RegionGeometry,
                     names: tuple[str, ...], distributor: SpatialDistributor,
                     voltage_sampler: CategoricalSampler,
                     rng: DeterministicRandomSource) -> GridAsset:
        lat, lng = distributor.place(rng)
        voltage: VoltageClass = voltage_sampler.sample(rng)
        condition = self.correlator.correlate_condition(
            distributor.is_urban(lat, lng), voltage, rng)

        if voltage.kv_value >= 69:
            suffix = f" {voltage.kv}kV"
        else:
            suffix = f" Sub #{rng.int_from(1, 9)}"

        prognosis = self.correlator.correlate_prognosis(condition, rng)
        tag = f"{region.opco_id.upper().replace(' ', '')}-{global_id:04d}"

        return GridAsset(
            tag=tag,
            name=names[slot % len(names)] + suffix,
            lat=lat, lng=lng,
            opco=region.opco_id,
            age=condition.age,
            health=condition.health,
            load=condition.load,
            kv=voltage.kv,
            customers=condition.customers,
            failure_mode=prognosis.failure_mode.mode,
            ttf=prognosis.ttf,
            repair_window=prognosis.repair_window,
            repair_duration=prognosis.repair_duration,
            materials=list(prognosis.failure_mode.materials),
            skills=list(prognosis.failure_mode.skills),
            risk_trend=prognosis.risk_trend,
        )


def generate_fleet(config: Optional[GeneratorConfig] = None) -> Fleet:
    """Build the full fleet and its summary statistics."""
    return FleetGenerator(config).generate()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  FLEET ANALYTICS — Summary, age histogram, outage heat map
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def summarize_fleet(assets: list[GridAsset], config: Optional[GeneratorConfig] = None) -> FleetSummary:
    cfg = config or GeneratorConfig()
    if not assets:
        return FleetSummary(total=0, total_real=cfg.total_real_assets, sample_ratio=cfg.sample_ratio,
                            pct_over_40=0, pct_poor=0, avg_age=0, avg_health=0)

    ages = np.array([a.age for a in assets])
    health = np.array([a.health for a in assets])
    by_opco: dict[str, int] = {}
    for a in assets:
        by_opco[a.opco] = by_opco.get(a.opco, 0) + 1

    return FleetSummary(
        total=len(assets),
        total_real=cfg.total_real_assets,
        sample_ratio=cfg.sample_ratio,
        pct_over_40=round_half_up(np.count_nonzero(ages > 40) / len(assets) * 100),
        pct_poor=round_half_up(np.count_nonzero(health < 40) / len(assets) * 100),
        avg_age=round_half_up(float(ages.mean())),
        avg_health=round_half_up(float(health.mean())),
        by_opco=by_opco,
    )


AGE_BIN_LABELS = ("0–10 yr", "11–20 yr", "21–30 yr", "31–40 yr", "41–50 yr", "51–60 yr")


def compute_age_distribution(assets: list[GridAsset]) -> list[dict]:
    """Count assets per 10-year age bin."""
    ages = np.array([a.age for a in assets], dtype=int)
    bins = np.digitize(ages, [10, 20, 30, 40, 50], right=True)
    counts = np.bincount(bins, minlength=len(AGE_BIN_LABELS))
    return [{"range": label, "count": int(counts[i])} for i, label in enumerate(AGE_BIN_LABELS)]


HEAT_SEED = 7777


def generate_heat_data(assets: list[GridAsset],
                       regions: tuple[RegionGeometry, ...] = REGIONS) -> list[tuple[float, float, float]]:
    """
    Outage-risk heat points: one weighted point per asset, 1–3 satellites
    around it, then a background scatter inside each OpCo territory.
    """
    rng = DeterministicRandomSource(HEAT_SEED)
    heat: list[tuple[float, float, float]] = []

    for a in assets:
        intensity = min(1.0, 0.3 + (100 - a.health) / 100 * 0.5 + (a.load / 100) * 0.2)
        heat.append((a.lat, a.lng, intensity * (0.7 + rng.next() * 0.3)))
        for _ in range(rng.int_from(1, 3)):
            heat.append((
                a.lat + (rng.next() - 0.5) * 0.08,
                a.lng + (rng.next() - 0.5) * 0.1,
                intensity * (0.3 + rng.next() * 0.5),
            ))

    region_by_opco = {r.opco_id: r for r in regions}
    for opco_id, count, base, spread in HEAT_BACKGROUND:
        region = region_by_opco.get(opco_id)
        if region is None:
            continue
        for _ in range(count):
            heat.append((
                region.lat_min + rng.next() * (region.lat_max - region.lat_min),
                region.lng_min + rng.next() * (region.lng_max - region.lng_min),
                base + rng.next() * spread,
            ))

    return heat


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  EQUIPMENT PROFILE — Nameplate record per asset
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_NAME_SUFFIX = re.compile(r" \d+(\.\d+)?kV$| Sub #\d+$")


def _rated_mva(kv: float, rng: DeterministicRandomSource) -> int:
    if kv >= 345:
        return rng.int_from(200, 300)
    if kv >= 138:
        return rng.int_from(60, 140)
    if kv >= 69:
        return rng.int_from(20, 40)
    return rng.int_from(5, 20)


def synthesize_equipment_profile(asset: GridAsset,
                                 config: Optional[GeneratorConfig] = None) -> EquipmentProfile:
    """Nameplate data for one asset, from its equipment channel."""
    cfg = config or GeneratorConfig()
    rng = channel_source(asset.tag, Channel.EQUIPMENT)
    kv = float(asset.kv)
    mva = _rated_mva(kv, rng)

    sub_type = rng.choice(TRANSFORMER_SUBTYPES)
    manufacturer = rng.choice(MANUFACTURERS)
    model = f"T-{rng.int_from(100, 900)}{chr(65 + rng.int_from(0, 6))}"
    cooling = rng.choice(COOLING_TYPES)

    if asset.health < 30:
        criticality = "critical"
    elif asset.health < 50:
        criticality = "major"
    else:
        criticality = "standard"

    return EquipmentProfile(
        asset_tag=asset.tag,
        name=asset.name,
        sub_type=sub_type,
        opco=asset.opco,
        substation_name=_NAME_SUFFIX.sub("", asset.name),
        lat=asset.lat, lng=asset.lng,
        voltage_class_kv=kv,
        rated_mva=mva,
        year_installed=cfg.reference_date.year - asset.age,
        manufacturer=manufacturer,
        model=model,
        cooling_type=cooling,
        status="alert" if asset.health < 30 else "operational",
        health_index=asset.health,
        load_factor=asset.load,
        customers_served=asset.customers,
        criticality=criticality,
        oil_volume_liters=int(mva * 40 + rng.next() * 2000),
        weight_kg=int(mva * 200 + rng.next() * 10000),
        tap_changer_type="OLTC" if rng.next() > 0.5 else "DETC",
        bushing_type="OIP" if rng.next() > 0.5 else "RIP",
        serial_number=f"SN-{asset.tag.replace('-', '')}-{rng.int_from(1000, 9000)}",
    )
