from __future__ import annotations

import re
from dataclasses import asdict, replace
from datetime import date

import pytest

from fleet_model.catalog import (
    REGIONS, REGION_BY_OPCO, FAILURE_MODE_BY_NAME, DEFAULT_FAILURE_MODE, OIL_CONTAMINATION,
    WINDING_FAULT, TAP_CHANGER_WEAR,
)
from fleet_model.ontology import RegionGeometry, DensityCenter, RiskTrend
from fleet_synth.generator import (
    GeneratorConfig, SpatialDistributor, AttributeCorrelator, generate_fleet,
    synthesize_equipment_profile, generate_heat_data, compute_age_distribution,
    summarize_fleet, round_half_up, month_date,
)
from fleet_synth.random_source import DeterministicRandomSource


# ── Fleet ───────────────────────────────────────

def test_fleet_size_and_tag_numbering(fleet) -> None:
    expected = sum(r.substation_count for r in REGIONS)
    assert len(fleet.assets) == expected == 590
    assert fleet.assets[0].tag == "COMED-0001"
    assert fleet.assets[250].tag == "PECO-0251"
    assert fleet.assets[-1].tag == "DPL-0590"
    assert len({a.tag for a in fleet.assets}) == len(fleet.assets)


def test_fleet_is_deterministic(config) -> None:
    first = [asdict(a) for a in generate_fleet(config).assets]
    second = [asdict(a) for a in generate_fleet(config).assets]
    assert first == second


def test_different_seed_gives_different_fleet(config, fleet) -> None:
    other = generate_fleet(replace(config, fleet_seed=7))
    assert [a.health for a in other.assets] != [a.health for a in fleet.assets]


def test_attribute_bounds(fleet) -> None:
    for a in fleet.assets:
        assert 12 <= a.health <= 98
        assert 1 <= a.age <= 60
        assert 55 <= a.load <= 100
        region = REGION_BY_OPCO[a.opco]
        assert region.contains(a.lat, a.lng)
        kv_class = next(v for v in region.voltages if v.kv == a.kv)
        assert kv_class.customers_min <= a.customers <= kv_class.customers_max


def test_failure_mode_respects_age_eligibility(fleet) -> None:
    for a in fleet.assets:
        profile = FAILURE_MODE_BY_NAME[a.failure_mode]
        assert profile.min_age <= a.age or profile is DEFAULT_FAILURE_MODE
        assert a.materials == list(profile.materials)
        assert a.skills == list(profile.skills)


def test_risk_trend_is_function_of_health_load_age(fleet) -> None:
    for a in fleet.assets:
        assert a.risk_trend == AttributeCorrelator.risk_trend(a.health, a.load, a.age)


def test_names_and_repair_fields(fleet) -> None:
    for a in fleet.assets:
        if float(a.kv) >= 69:
            assert a.name.endswith(f" {a.kv}kV")
        else:
            assert re.search(r" Sub #[1-9]$", a.name)
        assert re.fullmatch(r"\d+ mo|\d+\.\d yr", a.ttf)
        assert a.repair_window == AttributeCorrelator.repair_window(a.health)
        assert re.fullmatch(r"\d+h|\d+d \d+h", a.repair_duration)


def test_fleet_is_clustered_not_uniform(fleet) -> None:
    comed = [a for a in fleet.assets if a.opco == "ComEd"]
    distributor = SpatialDistributor(REGION_BY_OPCO["ComEd"])
    urban = sum(distributor.is_urban(a.lat, a.lng) for a in comed)
    # Density-center cores cover a small share of the bounding box
    assert urban > len(comed) * 0.3


def test_summary_statistics(fleet) -> None:
    s = fleet.stats
    assets = fleet.assets
    assert s.total == len(assets)
    assert s.total_real == 6230
    assert s.sample_ratio == "1:10.5"
    assert sum(s.by_opco.values()) == s.total
    assert s.by_opco["ComEd"] == 250
    assert s.avg_age == round_half_up(sum(a.age for a in assets) / len(assets))
    assert s.pct_poor == round_half_up(sum(a.health < 40 for a in assets) / len(assets) * 100)
    assert 0 <= s.pct_over_40 <= 100


def test_summary_of_empty_fleet() -> None:
    s = summarize_fleet([])
    assert s.total == 0
    assert s.avg_health == 0


# ── Spatial distributor ─────────────────────────

def test_spatial_points_are_clipped_to_bounding_box() -> None:
    tiny = RegionGeometry(
        opco_id="X", lat_min=10.0, lat_max=10.01, lng_min=20.0, lng_max=20.01,
        centers=(DensityCenter(lat=10.005, lng=20.005, radius=5.0, weight=1.0),),
        substation_count=1, voltages=(),
    )
    distributor = SpatialDistributor(tiny)
    rng = DeterministicRandomSource(5)
    for _ in range(200):
        lat, lng = distributor.place(rng)
        assert tiny.contains(lat, lng)


def test_spatial_place_uses_seven_draws(scripted) -> None:
    distributor = SpatialDistributor(REGION_BY_OPCO["PECO"])
    rng = scripted([0.0] + [0.5] * 6)
    lat, lng = distributor.place(rng)
    assert rng.consumed == 7
    # Mid-point jitter lands on the first center
    assert (lat, lng) == pytest.approx((39.95, -75.17))


def test_urban_classification() -> None:
    distributor = SpatialDistributor(REGION_BY_OPCO["ComEd"])
    assert distributor.is_urban(41.88, -87.63)
    assert not distributor.is_urban(42.49, -88.89)


# ── Attribute correlator ────────────────────────

def test_age_bands(scripted) -> None:
    correlator = AttributeCorrelator(GeneratorConfig())
    assert correlator.sample_age(scripted([0.01, 0.0])) == 1
    assert correlator.sample_age(scripted([0.5, 0.99])) == 30
    assert correlator.sample_age(scripted([0.97, 0.99])) == 60


def test_surprise_failure_overrides_age_curve() -> None:
    correlator = AttributeCorrelator(GeneratorConfig(surprise_failure_probability=1.0))
    rng = DeterministicRandomSource(11)
    for _ in range(200):
        assert 15 <= correlator.sample_health(2, rng) <= 40


def test_health_decays_with_age() -> None:
    correlator = AttributeCorrelator(GeneratorConfig(surprise_failure_probability=0.0))
    rng = DeterministicRandomSource(11)
    young = [correlator.sample_health(2, rng) for _ in range(200)]
    old = [correlator.sample_health(55, rng) for _ in range(200)]
    assert min(young) >= 83
    assert max(old) <= 45
    assert min(old) >= 12


def test_load_urban_higher_than_rural(scripted) -> None:
    correlator = AttributeCorrelator(GeneratorConfig())
    assert correlator.sample_load(True, scripted([0.5])) == 85
    assert correlator.sample_load(False, scripted([0.5])) == 70


def test_young_asset_falls_back_to_oil_contamination_without_a_draw(scripted) -> None:
    rng = scripted([])
    fm = AttributeCorrelator.pick_failure_mode(3, rng)
    assert fm.mode == OIL_CONTAMINATION
    assert rng.consumed == 0


def test_failure_mode_only_from_eligible(scripted) -> None:
    for draw in (0.0, 0.3, 0.6, 0.99):
        fm = AttributeCorrelator.pick_failure_mode(12, scripted([draw]))
        assert fm.min_age <= 12
    assert AttributeCorrelator.pick_failure_mode(12, scripted([0.0])).mode == TAP_CHANGER_WEAR


@pytest.mark.parametrize("health, load, age, expected", [
    (30, 80, 10, RiskTrend.CRITICAL),
    (30, 70, 10, RiskTrend.DEGRADING),
    (55, 50, 10, RiskTrend.DEGRADING),
    (80, 65, 40, RiskTrend.DEGRADING),
    (80, 65, 30, RiskTrend.STABLE),
    (80, 55, 40, RiskTrend.STABLE),
])
def test_risk_trend_rules(health: int, load: int, age: int, expected: RiskTrend) -> None:
    assert AttributeCorrelator.risk_trend(health, load, age) == expected


def test_time_to_failure_formatting(scripted) -> None:
    assert AttributeCorrelator.predict_time_to_failure(20, scripted([0.5])) == "4 mo"
    assert AttributeCorrelator.predict_time_to_failure(80, scripted([0.0])) == "3.0 yr"


def test_repair_duration_heavy_vs_light(scripted) -> None:
    heavy = FAILURE_MODE_BY_NAME[WINDING_FAULT]
    light = FAILURE_MODE_BY_NAME[OIL_CONTAMINATION]
    assert AttributeCorrelator.repair_duration(heavy, scripted([0.0])) == "2d 0h"
    assert AttributeCorrelator.repair_duration(light, scripted([0.5])) == "16h"


# ── Helpers ─────────────────────────────────────

def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2


def test_month_date_crosses_year_boundary() -> None:
    assert month_date(date(2025, 2, 14), 3, 10) == date(2024, 11, 10)
    assert month_date(date(2025, 6, 30), 0, 5) == date(2025, 6, 5)
    assert month_date(date(2025, 6, 30), 24, 1) == date(2023, 6, 1)


# ── Equipment profile, heat map, age histogram ──

def test_equipment_profile(fleet, config) -> None:
    asset = fleet.assets[0]
    profile = synthesize_equipment_profile(asset, config)
    assert profile == synthesize_equipment_profile(asset, config)
    assert profile.asset_tag == asset.tag
    assert profile.year_installed == config.reference_date.year - asset.age
    assert not re.search(r"kV$|Sub #\d+$", profile.substation_name)
    assert asset.name.startswith(profile.substation_name)
    assert profile.tap_changer_type in ("OLTC", "DETC")
    assert profile.bushing_type in ("OIP", "RIP")
    assert profile.serial_number.startswith("SN-COMED0001-")
    assert re.fullmatch(r"T-\d{3}[A-F]", profile.model)


@pytest.mark.parametrize("kv, low, high", [("765", 200, 499), ("138", 60, 199), ("69", 20, 59), ("12", 5, 24)])
def test_equipment_rating_by_voltage_tier(make_asset, kv: str, low: int, high: int) -> None:
    profile = synthesize_equipment_profile(make_asset(kv=kv))
    assert low <= profile.rated_mva <= high


@pytest.mark.parametrize("health, status, criticality", [
    (20, "alert", "critical"), (45, "operational", "major"), (80, "operational", "standard"),
])
def test_equipment_status_and_criticality(make_asset, health: int, status: str, criticality: str) -> None:
    profile = synthesize_equipment_profile(make_asset(health=health))
    assert profile.status == status
    assert profile.criticality == criticality


def test_heat_data(fleet) -> None:
    heat = generate_heat_data(fleet.assets)
    assert heat == generate_heat_data(fleet.assets)
    assert 2 * len(fleet.assets) + 125 <= len(heat) <= 4 * len(fleet.assets) + 125
    assert all(0 < intensity <= 1.0 for _, _, intensity in heat)


def test_age_distribution_covers_fleet(fleet) -> None:
    bins = compute_age_distribution(fleet.assets)
    assert [b["range"] for b in bins][0] == "0–10 yr"
    assert len(bins) == 6
    assert sum(b["count"] for b in bins) == len(fleet.assets)


def test_age_distribution_bin_edges(make_asset) -> None:
    assets = [make_asset(age=age) for age in (1, 10, 11, 40, 41, 60)]
    counts = [b["count"] for b in compute_age_distribution(assets)]
    assert counts == [2, 1, 0, 1, 1, 1]
