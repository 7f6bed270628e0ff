"""Visitor analytics payloads rendered by the chart widgets."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from mallmaster.models.enums import TimeRange


class VisitorMetrics(BaseModel):
    total_visitors: int
    average_dwell_time: int  # minutes
    peak_hour_visitors: int
    conversion_rate: float  # percent


class AgeShare(BaseModel):
    range: str
    percentage: float


class GenderShare(BaseModel):
    type: str
    percentage: float


class LocationShare(BaseModel):
    area: str
    percentage: float


class Demographics(BaseModel):
    age: list[AgeShare]
    gender: list[GenderShare]
    location: list[LocationShare]


class HeatmapPoint(BaseModel):
    x: int
    y: int
    intensity: float
    floor: str  # "1" | "2" | "3"


class DwellTime(BaseModel):
    areas: list[str]
    values: list[float]  # minutes, aligned with areas

    @model_validator(mode="after")
    def _aligned(self) -> "DwellTime":
        if len(self.areas) != len(self.values):
            raise ValueError("areas and values must have the same length")
        return self


class DwellStat(BaseModel):
    label: str
    value: float
    area: str


class AnalyticsSnapshot(BaseModel):
    time_range: TimeRange
    date_range_label: str
    metrics: VisitorMetrics
    demographics: Demographics
    heatmap: list[HeatmapPoint]
    dwell_time: DwellTime
