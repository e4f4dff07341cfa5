"""
GridFleet Synthetic Fleet — 24-Month Work-Order History
=========================================================
Replays two years of maintenance for one asset, month by month, oldest first:

FIXED CADENCE (always present):
  - Quarterly visual inspection        (months-ago % 3 == 0)
  - Semi-annual oil sampling & DGA     (months-ago % 6 == 0)
  - Annual bushing inspection          (12 and 24 months ago)
  - Annual cooling-system service      (12 months ago and this month)

HEALTH-SCALED (probability grows with (100 - health) / 50):
  - Extra PM / inspection / diagnostic test
  - Corrective maintenance
  - Emergency de-energization (health < 35 only)

Current-month cadence items are "in-progress"; everything else is completed
or, rarely, deferred. The finished log is returned most recent first.
"""

from __future__ import annotations
from datetime import date
from typing import Optional

from loguru import logger

from fleet_model.ontology import (
    GridAsset, WorkOrder, WorkOrderTemplate, WorkOrderType, WorkOrderStatus, WorkOrderPriority,
)
from fleet_model.catalog import (
    PM_TEMPLATES, CM_TEMPLATES, INSP_TEMPLATES, TEST_TEMPLATES, EMERGENCY_TEMPLATE,
)
from fleet_synth.random_source import Channel, channel_source
from fleet_synth.generator import GeneratorConfig, month_date

HISTORY_MONTHS = 24

QUARTERLY_INSPECTION = INSP_TEMPLATES[0]
OIL_SAMPLING = PM_TEMPLATES[0]
BUSHING_INSPECTION = PM_TEMPLATES[1]
COOLING_SERVICE = PM_TEMPLATES[2]

# Discretionary pool; the source list decides the work-order type
EXTRA_POOL: tuple[tuple[WorkOrderTemplate, WorkOrderType], ...] = (
    tuple((t, WorkOrderType.PREVENTIVE) for t in PM_TEMPLATES[3:])
    + tuple((t, WorkOrderType.INSPECTION) for t in INSP_TEMPLATES[1:])
    + tuple((t, WorkOrderType.DIAGNOSTIC_TEST) for t in TEST_TEMPLATES)
)

FINDING_OIL_WEEP = "Oil weep noted at main tank flange"
FINDING_ELEVATED_GASES = "Elevated dissolved gases — TDCG trending above IEEE Condition 2"
FINDING_BUSHING_PF = "Bushing C1 power factor 0.8% — approaching action level"
FINDING_ANOMALY = "Anomaly noted — follow-up recommended"
FINDING_DEFECT_CORRECTED = "Defect corrected — returned to service"
FINDING_ACTIVE_ARCING = "Active arcing detected — winding damage confirmed"


class WorkOrderLog:
    """Accumulates work orders for one asset and numbers them in creation order."""

    def __init__(self, asset: GridAsset):
        self.prefix = f"WO-{asset.tag[-4:]}"
        self.orders: list[WorkOrder] = []

    def add(self, when: date, wo_type: WorkOrderType, template: WorkOrderTemplate,
            status: WorkOrderStatus = WorkOrderStatus.COMPLETED,
            priority: WorkOrderPriority = WorkOrderPriority.ROUTINE,
            finding: Optional[str] = None):
        self.orders.append(WorkOrder(
            id=f"{self.prefix}-{len(self.orders) + 1:03d}",
            date=when.isoformat(),
            type=wo_type,
            title=template.title,
            description=template.description,
            duration=template.duration,
            crew=template.crew,
            status=status,
            cost=template.cost,
            priority=priority,
            finding=finding,
        ))

    def newest_first(self) -> list[WorkOrder]:
        # ISO dates sort lexically; the sort is stable for same-day orders
        return sorted(self.orders, key=lambda wo: wo.date, reverse=True)


def synthesize_work_orders(asset: GridAsset,
                           config: Optional[GeneratorConfig] = None) -> list[WorkOrder]:
    """24 months of maintenance history, most recent first."""
    cfg = config or GeneratorConfig()
    rng = channel_source(asset.tag, Channel.WORK_ORDERS)
    log = WorkOrderLog(asset)
    health_factor = (100 - asset.health) / 50

    for months_ago in range(HISTORY_MONTHS, -1, -1):
        current = months_ago == 0

        def on_day(day: int) -> date:
            return month_date(cfg.reference_date, months_ago, day)

        if months_ago % 3 == 0:
            when = on_day(rng.int_from(5, 10))
            finding = FINDING_OIL_WEEP if asset.health < 40 and rng.next() > 0.5 else None
            log.add(when, WorkOrderType.INSPECTION, QUARTERLY_INSPECTION,
                    status=WorkOrderStatus.IN_PROGRESS if current else WorkOrderStatus.COMPLETED,
                    finding=finding)

        if months_ago % 6 == 0:
            when = on_day(rng.int_from(10, 10))
            finding = FINDING_ELEVATED_GASES if asset.health < 45 and rng.next() > 0.3 else None
            log.add(when, WorkOrderType.PREVENTIVE, OIL_SAMPLING, finding=finding)

        if months_ago % 12 == 0 and not current:
            when = on_day(rng.int_from(15, 5))
            finding = FINDING_BUSHING_PF if asset.health < 35 else None
            log.add(when, WorkOrderType.PREVENTIVE, BUSHING_INSPECTION, finding=finding)

        if months_ago in (12, 0):
            when = on_day(rng.int_from(18, 5))
            log.add(when, WorkOrderType.PREVENTIVE, COOLING_SERVICE,
                    status=WorkOrderStatus.IN_PROGRESS if current else WorkOrderStatus.COMPLETED)

        if rng.next() < 0.15 + health_factor * 0.2:
            template, wo_type = rng.choice(EXTRA_POOL)
            when = on_day(rng.int_from(1, 25))
            status = WorkOrderStatus.DEFERRED if rng.next() > 0.9 else WorkOrderStatus.COMPLETED
            finding = FINDING_ANOMALY if asset.health < 40 and rng.next() > 0.6 else None
            log.add(when, wo_type, template, status=status, finding=finding)

        if rng.next() < health_factor * 0.15:
            template = rng.choice(CM_TEMPLATES)
            when = on_day(rng.int_from(1, 25))
            log.add(when, WorkOrderType.CORRECTIVE, template,
                    priority=WorkOrderPriority.HIGH, finding=FINDING_DEFECT_CORRECTED)

        if asset.health < 35 and rng.next() < 0.06:
            when = on_day(rng.int_from(1, 25))
            log.add(when, WorkOrderType.EMERGENCY, EMERGENCY_TEMPLATE,
                    priority=WorkOrderPriority.EMERGENCY, finding=FINDING_ACTIVE_ARCING)

    orders = log.newest_first()
    logger.debug(f"{asset.tag}: {len(orders)} work orders over {HISTORY_MONTHS} months")
    return orders
