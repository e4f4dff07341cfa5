from __future__ import annotations

from datetime import date

import pytest

from fleet_model.ontology import GridAsset, RiskTrend
from fleet_synth.generator import GeneratorConfig, generate_fleet
from fleet_synth.random_source import DeterministicRandomSource

REFERENCE_DATE = date(2025, 6, 30)


class ScriptedSource(DeterministicRandomSource):
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        super().__init__(seed=1)
        self.draws = list(draws)
        self.consumed = 0

    def next(self) -> float:
        value = self.draws[self.consumed]
        self.consumed += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture(scope="session")
def config() -> GeneratorConfig:
    return GeneratorConfig(reference_date=REFERENCE_DATE)


@pytest.fixture(scope="session")
def fleet(config):
    return generate_fleet(config)


@pytest.fixture
def make_asset():
    def _make(**overrides) -> GridAsset:
        fields = dict(
            tag="TEST-0001", name="Fisk 138kV", lat=41.85, lng=-87.65, opco="ComEd",
            age=30, health=60, load=70, kv="138", customers=50_000,
            failure_mode="Insulation degradation", ttf="2.5 yr",
            repair_window="Next outage cycle", repair_duration="12h",
            materials=["Insulating oil"], skills=["Oil processing"],
            risk_trend=RiskTrend.DEGRADING,
        )
        fields.update(overrides)
        return GridAsset(**fields)
    return _make
