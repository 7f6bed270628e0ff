"""Visitor analytics for a time range, derived from the demo datasets."""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import date, timedelta
from typing import Mapping, Optional

from mallmaster.models.enums import TimeRange
from mallmaster.schemas.analytics import (
    AnalyticsSnapshot,
    Demographics,
    DwellStat,
    DwellTime,
    HeatmapPoint,
    VisitorMetrics,
)
from mallmaster.services import demo_data

logger = logging.getLogger(__name__)

DEFAULT_FACTORS: dict[str, float] = {"yesterday": 0.9, "week": 5.2, "month": 22.7}


def _fmt_day(d: date) -> str:
    return f"{d:%B} {d.day}, {d.year}"


def _fmt_month_day(d: date) -> str:
    return f"{d:%B} {d.day}"


def date_range_label(time_range: TimeRange, today: Optional[date] = None) -> str:
    """Human-readable window, e.g. "October 18 - October 24, 2026" for a week."""
    today = today or date.today()
    time_range = TimeRange(time_range)
    if time_range == TimeRange.YESTERDAY:
        return _fmt_day(today - timedelta(days=1))
    if time_range == TimeRange.WEEK:
        # Weeks start on Sunday
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return f"{_fmt_month_day(start)} - {_fmt_day(today)}"
    if time_range == TimeRange.MONTH:
        return f"{_fmt_month_day(today.replace(day=1))} - {_fmt_day(today)}"
    return _fmt_day(today)


def _normalize(values: list[float]) -> list[float]:
    total = sum(values)
    if total <= 0:
        return values
    return [v / total * 100 for v in values]


def dwell_summary(dwell: DwellTime) -> list[DwellStat]:
    """Highest, lowest and average dwell time across areas."""
    if not dwell.values:
        return []
    hi = max(dwell.values)
    lo = min(dwell.values)
    avg = round(sum(dwell.values) / len(dwell.values), 1)
    return [
        DwellStat(label="Highest Dwell Time", value=hi, area=dwell.areas[dwell.values.index(hi)]),
        DwellStat(label="Lowest Dwell Time", value=lo, area=dwell.areas[dwell.values.index(lo)]),
        DwellStat(label="Average Dwell Time", value=avg, area="All Areas"),
    ]


def heatmap_for_floor(points: list[HeatmapPoint], floor: str) -> list[HeatmapPoint]:
    if floor not in demo_data.FLOORS:
        raise ValueError(f"Unknown floor: {floor}")
    return [p for p in points if p.floor == floor]


class AnalyticsService:
    """Builds analytics snapshots. Jitter comes from an injectable RNG."""

    def __init__(
        self,
        latency: float = 0.0,
        refresh_latency: float = 0.0,
        factors: Optional[Mapping[str, float]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.latency = latency
        self.refresh_latency = refresh_latency
        self.factors = dict(factors or DEFAULT_FACTORS)
        self._rng = rng or random.Random()
        self._snapshots: dict[TimeRange, AnalyticsSnapshot] = {}
        self._lock = asyncio.Lock()

    def _jitter(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def snapshot(self, time_range: TimeRange = TimeRange.TODAY, today: Optional[date] = None) -> AnalyticsSnapshot:
        time_range = TimeRange(time_range)
        label = date_range_label(time_range, today)
        if time_range == TimeRange.TODAY:
            return AnalyticsSnapshot(
                time_range=time_range,
                date_range_label=label,
                metrics=demo_data.VISITOR_METRICS.model_copy(deep=True),
                demographics=demo_data.DEMOGRAPHICS.model_copy(deep=True),
                heatmap=[p.model_copy() for p in demo_data.HEATMAP],
                dwell_time=demo_data.DWELL_TIME.model_copy(deep=True),
            )
        factor = self.factors[time_range.value]
        return AnalyticsSnapshot(
            time_range=time_range,
            date_range_label=label,
            metrics=self._scale_metrics(factor),
            demographics=self._scale_demographics(),
            heatmap=[
                p.model_copy(update={"intensity": p.intensity * self._jitter(0.8, 1.2)})
                for p in demo_data.HEATMAP
            ],
            dwell_time=DwellTime(
                areas=list(demo_data.DWELL_TIME.areas),
                values=[v * self._jitter(0.9, 1.1) for v in demo_data.DWELL_TIME.values],
            ),
        )

    def _scale_metrics(self, factor: float) -> VisitorMetrics:
        base = demo_data.VISITOR_METRICS
        return VisitorMetrics(
            total_visitors=round(base.total_visitors * factor),
            average_dwell_time=round(base.average_dwell_time * self._jitter(0.9, 1.1)),
            peak_hour_visitors=round(base.peak_hour_visitors * factor * self._jitter(0.8, 1.2)),
            conversion_rate=base.conversion_rate * self._jitter(0.95, 1.05),
        )

    def _scale_demographics(self) -> Demographics:
        base = demo_data.DEMOGRAPHICS
        age = _normalize([a.percentage * self._jitter(0.9, 1.1) for a in base.age])
        gender = _normalize([g.percentage * self._jitter(0.95, 1.05) for g in base.gender])
        return Demographics(
            age=[a.model_copy(update={"percentage": pct}) for a, pct in zip(base.age, age)],
            gender=[g.model_copy(update={"percentage": pct}) for g, pct in zip(base.gender, gender)],
            location=[loc.model_copy() for loc in base.location],
        )

    def current(self, time_range: TimeRange = TimeRange.TODAY) -> Optional[AnalyticsSnapshot]:
        """Last snapshot served for *time_range*, if any."""
        return self._snapshots.get(TimeRange(time_range))

    async def load(self, time_range: TimeRange = TimeRange.TODAY) -> AnalyticsSnapshot:
        time_range = TimeRange(time_range)
        async with self._lock:
            return await self._fetch(time_range)

    async def refresh(self, time_range: TimeRange = TimeRange.TODAY) -> AnalyticsSnapshot:
        """Re-pull the headline metrics of the current snapshot with slight variations."""
        time_range = TimeRange(time_range)
        async with self._lock:
            current = self.current(time_range)
            if current is None:
                current = await self._fetch(time_range)
            if self.refresh_latency > 0:
                await asyncio.sleep(self.refresh_latency)
            m = current.metrics
            metrics = m.model_copy(update={
                "total_visitors": round(m.total_visitors * self._jitter(0.98, 1.02)),
                "average_dwell_time": round(m.average_dwell_time * self._jitter(0.97, 1.03)),
                "peak_hour_visitors": round(m.peak_hour_visitors * self._jitter(0.95, 1.05)),
            })
            snap = current.model_copy(update={"metrics": metrics})
            self._snapshots[time_range] = snap
            logger.info("Analytics data refreshed (%s)", time_range.value)
            return snap

    async def _fetch(self, time_range: TimeRange) -> AnalyticsSnapshot:
        # Caller holds the lock
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        snap = self.snapshot(time_range)
        self._snapshots[time_range] = snap
        return snap
