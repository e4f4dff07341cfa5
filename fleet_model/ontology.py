"""
GridFleet Synthetic Fleet — Ontology & Schema
===============================================
Defines the data model for a synthetic population of substation transformers:

ENTITY HIERARCHY:
  OperatingCompany → RegionGeometry → GridAsset
                                      ├── EquipmentProfile
                                      ├── HealthRecord × 4 (quarterly)
                                      ├── DiagnosticRecord
                                      ├── WorkOrder × N (24 months)
                                      └── DecisionScenario

STATIC REFERENCE DATA:
  DensityCenter, VoltageClass, FailureModeProfile,
  DiagnosticTemplate, WorkOrderTemplate

Every derived record is owned by (and always recomputed from) its GridAsset.
Nothing here carries behaviour beyond simple derived properties.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  ENUMERATIONS — Controlled Vocabularies
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RiskTrend(str, Enum):
    STABLE = "stable"
    DEGRADING = "degrading"
    CRITICAL = "critical"


class ConditionLabel(str, Enum):
    """Condition ladder over the health index."""
    GOOD = "Good"                # ≥ 85
    FAIR = "Fair"                # ≥ 70
    POOR = "Poor"                # ≥ 50
    VERY_POOR = "Very Poor"      # ≥ 30
    END_OF_LIFE = "End of Life"


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"


class WorkOrderType(str, Enum):
    PREVENTIVE = "PM"
    CORRECTIVE = "CM"
    INSPECTION = "INSP"
    EMERGENCY = "EMER"
    MODIFICATION = "MOD"
    DIAGNOSTIC_TEST = "TEST"

    @property
    def label(self) -> str:
        return _WORK_ORDER_TYPE_LABELS[self]


_WORK_ORDER_TYPE_LABELS = {
    WorkOrderType.PREVENTIVE: "Preventive Maintenance",
    WorkOrderType.CORRECTIVE: "Corrective Maintenance",
    WorkOrderType.INSPECTION: "Inspection",
    WorkOrderType.EMERGENCY: "Emergency Repair",
    WorkOrderType.MODIFICATION: "Modification / Upgrade",
    WorkOrderType.DIAGNOSTIC_TEST: "Diagnostic Test",
}


class WorkOrderStatus(str, Enum):
    COMPLETED = "completed"
    DEFERRED = "deferred"
    CANCELLED = "cancelled"
    IN_PROGRESS = "in-progress"


class WorkOrderPriority(str, Enum):
    ROUTINE = "routine"
    HIGH = "high"
    EMERGENCY = "emergency"


class ScenarioCategory(str, Enum):
    DGA_ALERT = "dga_alert"
    AGING_ASSET = "aging_asset"
    AVOIDED_OUTAGE = "avoided_outage"


class Urgency(str, Enum):
    IMMEDIATE = "immediate"
    WITHIN_WEEK = "within_week"
    WITHIN_MONTH = "within_month"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  REFERENCE DATA — Static catalog records
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class OperatingCompany:
    """A utility operating company (OpCo) owning part of the fleet."""
    id: str
    name: str
    state: str
    customers: int
    territory: str
    center: tuple[float, float]
    outages_10yr: int = 0
    avg_restore_hours: float = 0.0
    peak_mw: int = 0


@dataclass(frozen=True)
class DensityCenter:
    """A population center that attracts substations."""
    lat: float
    lng: float
    radius: float       # Jitter radius in degrees
    weight: float       # Relative pick weight


@dataclass(frozen=True)
class VoltageClass:
    kv: str
    share: float        # Fraction of the OpCo's substations
    customers_min: int
    customers_max: int

    @property
    def kv_value(self) -> float:
        return float(self.kv)


@dataclass(frozen=True)
class RegionGeometry:
    """Bounding box + density centers + fleet mix for one OpCo."""
    opco_id: str
    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float
    centers: tuple[DensityCenter, ...]
    substation_count: int
    voltages: tuple[VoltageClass, ...]
    lng_stretch: float = 1.3    # Longitude degrees are shorter; widen jitter

    def contains(self, lat: float, lng: float) -> bool:
        return (self.lat_min <= lat <= self.lat_max
                and self.lng_min <= lng <= self.lng_max)


@dataclass(frozen=True)
class FailureModeProfile:
    """Failure-mode taxonomy entry with its age eligibility and repair needs."""
    mode: str
    min_age: int
    weight: float
    materials: tuple[str, ...]
    skills: tuple[str, ...]
    heavy: bool = False         # Heavy repairs run days rather than hours


@dataclass(frozen=True)
class TriggerSlot:
    label: str
    color: str
    icon: str


@dataclass(frozen=True)
class DiagnosticTemplate:
    """Fixed narrative skeleton for one failure mode."""
    failure_mode: str
    triggers: tuple[TriggerSlot, TriggerSlot, TriggerSlot]
    agent_ids: tuple[str, str, str]
    finding_severities: tuple[Severity, Severity, Severity]
    analysis_methods: tuple[str, str, str]
    cross_validation_label: str
    cross_validation_detail: str
    cross_links: tuple[str, ...]


@dataclass(frozen=True)
class WorkOrderTemplate:
    title: str
    description: str
    duration: str
    crew: str
    cost: int


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  ENTITY MODELS — Generated records
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass
class GridAsset:
    """One substation transformer in the synthetic fleet — the root record."""
    tag: str                    # Stable key and seed source (e.g. COMED-0001)
    name: str
    lat: float
    lng: float
    opco: str
    age: int                    # Years in service, 1–60
    health: int                 # Health index, 12–98
    load: int                   # % of nameplate
    kv: str
    customers: int

    # Predictive maintenance
    failure_mode: str = ""
    ttf: str = ""               # Predicted time to failure
    repair_window: str = ""
    repair_duration: str = ""
    materials: list = field(default_factory=list)
    skills: list = field(default_factory=list)
    risk_trend: RiskTrend = RiskTrend.STABLE

    @property
    def is_critical(self) -> bool:
        return self.health < 50


@dataclass
class EquipmentProfile:
    """Nameplate-level equipment record synthesized for an asset."""
    asset_tag: str
    name: str
    sub_type: str
    opco: str
    substation_name: str
    lat: float
    lng: float
    voltage_class_kv: float
    rated_mva: int
    year_installed: int
    manufacturer: str
    model: str
    cooling_type: str
    status: str                 # operational | alert
    health_index: int
    load_factor: int
    customers_served: int
    criticality: str            # critical | major | standard
    oil_volume_liters: int = 0
    weight_kg: int = 0
    tap_changer_type: str = ""  # OLTC | DETC
    bushing_type: str = ""      # OIP | RIP
    serial_number: str = ""
    equipment_type: str = "power_transformer"


@dataclass
class HealthRecord:
    """One quarterly point of oil, gas and thermal condition data."""
    asset_tag: str
    timestamp: str              # ISO date
    # Dissolved gases (ppm)
    h2: int
    ch4: int
    c2h2: int
    c2h4: int
    c2h6: int
    co: int
    co2: int
    o2: int
    n2: int
    tdcg: int                   # Total dissolved combustible gas
    # Oil quality
    moisture: int               # ppm
    acidity: float              # mg KOH/g
    dielectric_strength: int    # kV
    interfacial_tension: int    # mN/m
    color_number: float
    power_factor: float         # %
    furan_2fal: float           # ppm
    # Thermal / loading
    top_oil_temp: int
    winding_hot_spot: int
    ambient_temp: int
    load_percent: int
    # Computed
    health_index: int
    condition: ConditionLabel
    remaining_life_years: int


@dataclass
class Trigger:
    label: str
    detail: str
    color: str
    icon: str


@dataclass
class Finding:
    text: str
    severity: Severity


@dataclass
class DeepAnalysis:
    text: str
    method: str


@dataclass
class CrossValidation:
    label: str
    detail: str
    confidence: int             # %


@dataclass
class DiagnosticRecord:
    """Multi-agent diagnostic narrative expanded from an asset's failure mode."""
    asset_tag: str
    failure_mode: str
    triggers: list[Trigger]
    agent_ids: list[str]
    findings: list[Finding]
    deep_analysis: list[DeepAnalysis]
    cross_validation: CrossValidation
    cross_links: list[str]
    scenario_title: str
    scenario_category: ScenarioCategory
    dga_condition: int = 1      # IEEE C57.104 TDCG condition of latest sample
    duval_zone: str = "Normal"


@dataclass
class WorkOrder:
    """One maintenance event in the 24-month history."""
    id: str
    date: str                   # ISO date
    type: WorkOrderType
    title: str
    description: str
    duration: str
    crew: str
    status: WorkOrderStatus
    cost: int
    priority: WorkOrderPriority
    finding: Optional[str] = None

    @property
    def type_label(self) -> str:
        return self.type.label


@dataclass
class ScenarioEvent:
    id: str
    timestamp: str
    type: str                   # detection | analysis | recommendation | action
    title: str
    description: str
    icon: str


@dataclass
class ScenarioOutcome:
    title: str
    description: str
    cost_avoided: str
    customers_protected: int
    outage_hours_avoided: int


@dataclass
class ScenarioMetric:
    label: str
    value: str
    trend: str                  # up | down | stable
    context: str


@dataclass
class FinancialImpact:
    label: str
    value: str
    trend: str                  # positive | negative


@dataclass
class DecisionOption:
    label: str
    description: str
    pros: list[str]
    cons: list[str]
    financial_impact: FinancialImpact
    risk_level: str
    customer_impact: str
    timeline: str


@dataclass
class DecisionSupport:
    summary: str
    urgency: Urgency
    confidence_score: int
    approve_option: DecisionOption
    defer_option: DecisionOption
    key_risks: list[str]


@dataclass
class DecisionScenario:
    """What-if narrative composed from an asset and its diagnostic."""
    id: str
    title: str
    subtitle: str
    description: str
    asset_tag: str
    asset_name: str
    opco: str
    category: ScenarioCategory
    severity: str               # critical | high | medium
    timeline: list[ScenarioEvent]
    outcome: ScenarioOutcome
    metrics: list[ScenarioMetric]
    decision_support: DecisionSupport


@dataclass
class FleetSummary:
    total: int
    total_real: int
    sample_ratio: str
    pct_over_40: int            # % of assets older than 40 years
    pct_poor: int               # % of assets with health < 40
    avg_age: int
    avg_health: int
    by_opco: dict = field(default_factory=dict)


@dataclass
class Fleet:
    """A complete generated fleet and its summary."""
    assets: list[GridAsset]
    stats: FleetSummary
