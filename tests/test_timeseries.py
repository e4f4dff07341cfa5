from __future__ import annotations

from dataclasses import replace

import pytest

from fleet_model.ontology import ConditionLabel
from fleet_synth.timeseries import (
    synthesize_health_records, condition_label, dga_condition_level, duval_zone,
)


def test_four_quarterly_records_in_chronological_order(make_asset, config) -> None:
    records = synthesize_health_records(make_asset(), config)
    assert len(records) == 4
    assert [r.timestamp[:7] for r in records] == ["2024-09", "2024-12", "2025-03", "2025-06"]
    for r in records:
        assert 10 <= int(r.timestamp[8:]) <= 24


@pytest.mark.parametrize("health, step", [(25, 4), (39, 4), (40, 2), (75, 2)])
def test_health_trends_toward_present_value(make_asset, config, health: int, step: int) -> None:
    records = synthesize_health_records(make_asset(health=health), config)
    assert [r.health_index for r in records] == [health + 3 * step, health + 2 * step, health + step, health]


def test_health_index_capped_at_100(make_asset, config) -> None:
    records = synthesize_health_records(make_asset(health=98), config)
    assert records[0].health_index == 100
    assert records[-1].health_index == 98


def test_fleet_series_never_improves(fleet, config) -> None:
    for asset in fleet.assets[:120]:
        his = [r.health_index for r in synthesize_health_records(asset, config)]
        assert his == sorted(his, reverse=True)
        assert his[-1] == asset.health


def test_records_are_deterministic_per_tag(make_asset, config) -> None:
    asset = make_asset()
    assert synthesize_health_records(asset, config) == synthesize_health_records(asset, config)
    other = synthesize_health_records(make_asset(tag="TEST-0002"), config)
    assert [r.h2 for r in other] != [r.h2 for r in synthesize_health_records(asset, config)]


def test_gases_rise_as_health_falls(make_asset, config) -> None:
    sick = synthesize_health_records(make_asset(health=20), config)[-1]
    healthy = synthesize_health_records(make_asset(health=95), config)[-1]
    assert sick.tdcg > healthy.tdcg
    assert sick.moisture > healthy.moisture
    assert sick.dielectric_strength < healthy.dielectric_strength


def test_tdcg_is_sum_of_combustible_gases(make_asset, config) -> None:
    for r in synthesize_health_records(make_asset(health=30), config):
        assert r.tdcg == r.h2 + r.ch4 + r.c2h2 + r.c2h4 + r.c2h6 + r.co


@pytest.mark.parametrize("health", [15, 30, 60, 98])
def test_winding_fault_gases_sit_in_discharge_zones(make_asset, config, health: int) -> None:
    base = make_asset(health=health)
    plain = synthesize_health_records(base, config)
    winding = synthesize_health_records(replace(base, failure_mode="Winding fault"), config)
    for p, w in zip(plain, winding):
        assert (w.h2, w.ch4, w.c2h4, w.co) == (p.h2, p.ch4, p.c2h4, p.co)
        assert w.c2h2 > p.c2h2
        assert duval_zone(w.ch4, w.c2h4, w.c2h2)[:2] in ("D1", "D2")


@pytest.mark.parametrize("hi, label", [
    (100, ConditionLabel.GOOD), (85, ConditionLabel.GOOD), (84, ConditionLabel.FAIR),
    (70, ConditionLabel.FAIR), (69, ConditionLabel.POOR), (50, ConditionLabel.POOR),
    (49, ConditionLabel.VERY_POOR), (30, ConditionLabel.VERY_POOR), (29, ConditionLabel.END_OF_LIFE),
])
def test_condition_ladder(hi: int, label: ConditionLabel) -> None:
    assert condition_label(hi) == label


def test_record_condition_matches_health_index(make_asset, config) -> None:
    for r in synthesize_health_records(make_asset(health=45), config):
        assert r.condition == condition_label(r.health_index)
        assert r.remaining_life_years >= 1


@pytest.mark.parametrize("gas, value, level", [
    ("tdcg", 720, 1), ("tdcg", 721, 2), ("tdcg", 1920, 2), ("tdcg", 4630, 3), ("tdcg", 5000, 4),
    ("c2h2", 1, 1), ("c2h2", 36, 4), ("h2", 150, 2), ("unknown", 10_000, 1),
])
def test_dga_condition_levels(gas: str, value: int, level: int) -> None:
    assert dga_condition_level(gas, value) == level


@pytest.mark.parametrize("ch4, c2h4, c2h2, zone", [
    (0, 0, 0, "Normal"),
    (10, 10, 80, "D1 - High Energy Discharge"),
    (50, 30, 20, "D2 - Low Energy Discharge"),
    (10, 90, 0, "T3 - Thermal Fault >700°C"),
    (40, 55, 5, "T2 - Thermal Fault 300-700°C"),
    (100, 0, 0, "PD - Partial Discharge"),
    (60, 35, 5, "T1 - Thermal Fault <300°C"),
    (50, 40, 10, "DT - Mix of Thermal & Electrical"),
])
def test_duval_zones(ch4: float, c2h4: float, c2h2: float, zone: str) -> None:
    assert duval_zone(ch4, c2h4, c2h2) == zone
