from __future__ import annotations

import pytest

from fleet_model.ontology import Urgency
from fleet_synth.diagnostics import synthesize_diagnostic
from fleet_synth.scenario import (
    synthesize_scenario, format_dollars, scenario_severity, scenario_urgency,
)


def _scenario(asset, config):
    return synthesize_scenario(asset, synthesize_diagnostic(asset, config=config), config)


@pytest.mark.parametrize("amount, text", [
    (1_500_000, "$1.5M"), (1_000_000, "$1.0M"), (12_345, "$12K"), (12_500, "$13K"), (400, "$0K"),
])
def test_format_dollars(amount: float, text: str) -> None:
    assert format_dollars(amount) == text


@pytest.mark.parametrize("health, severity", [(29, "critical"), (30, "high"), (39, "high"), (40, "medium")])
def test_severity_by_health(health: int, severity: str) -> None:
    assert scenario_severity(health) == severity


@pytest.mark.parametrize("window, urgency", [
    ("Immediate", Urgency.IMMEDIATE),
    ("Within 30 days", Urgency.WITHIN_WEEK),
    ("Next outage cycle", Urgency.WITHIN_MONTH),
    ("Scheduled PM", Urgency.WITHIN_MONTH),
])
def test_urgency_by_repair_window(window: str, urgency: Urgency) -> None:
    assert scenario_urgency(window) == urgency


def test_scenario_identity_and_title(make_asset, config) -> None:
    asset = make_asset(health=25)
    diag = synthesize_diagnostic(asset, config=config)
    scenario = synthesize_scenario(asset, diag, config)
    assert scenario.id == "synth-TEST-0001"
    assert scenario.title == diag.scenario_title
    assert scenario.category == diag.scenario_category
    assert scenario.severity == "critical"
    assert scenario.decision_support.confidence_score == diag.cross_validation.confidence


def test_timeline_is_four_chronological_steps(make_asset, config) -> None:
    timeline = _scenario(make_asset(), config).timeline
    assert [e.type for e in timeline] == ["detection", "analysis", "recommendation", "action"]
    assert [e.id for e in timeline] == [f"TEST-0001-e{i}" for i in range(1, 5)]
    stamps = [e.timestamp for e in timeline]
    assert stamps == sorted(stamps)
    assert stamps[0] == "2025-01-01T00:00:00"
    assert stamps[-1] == "2025-06-16T00:00:00"


def test_outage_hours_scale_with_health(make_asset, config) -> None:
    assert 36 <= _scenario(make_asset(health=20), config).outcome.outage_hours_avoided < 84
    assert 12 <= _scenario(make_asset(health=35), config).outcome.outage_hours_avoided < 36
    assert 4 <= _scenario(make_asset(health=70), config).outcome.outage_hours_avoided < 16


def test_customers_are_comma_formatted(make_asset, config) -> None:
    scenario = _scenario(make_asset(customers=123456), config)
    assert scenario.outcome.customers_protected == 123456
    assert "123,456 customers" in scenario.outcome.description
    assert "Protects 123,456 customers" in scenario.decision_support.approve_option.pros


def test_cost_figures(make_asset, config) -> None:
    scenario = _scenario(make_asset(), config)
    approve = scenario.decision_support.approve_option
    defer = scenario.decision_support.defer_option
    capital = next(c for c in approve.cons if c.startswith("Capital cost: "))
    assert capital.endswith("M")
    assert approve.financial_impact.value == scenario.outcome.cost_avoided
    assert approve.financial_impact.trend == "positive"
    assert defer.financial_impact.trend == "negative"
    assert defer.financial_impact.value.startswith("$")


def test_immediate_repair_uses_emergency_window(make_asset, config) -> None:
    asset = make_asset(health=20, repair_window="Immediate")
    support = _scenario(asset, config).decision_support
    assert support.urgency == Urgency.IMMEDIATE
    assert "emergency window" in support.approve_option.description
    assert support.defer_option.timeline == "Re-evaluate in 7 days"
    assert support.defer_option.risk_level == "critical"


def test_scenario_is_deterministic(make_asset, config) -> None:
    asset = make_asset(health=33)
    assert _scenario(asset, config) == _scenario(asset, config)
