"""
Response models handed to the dashboard's chart and summary widgets, serialized with camelCase field names, and the report builder that assembles everything rendered for a single series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import datetime as dt
from typing import Any, List, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

from forecasting.anomaly.detection import detect_anomalies
from forecasting.enums import ForecastMethod, TrendDirection
from forecasting.forecast.methods import forecast, resolve_method
from forecasting.forecast.summary import ForecastSummary, summarize
from forecasting.models import ForecastPoint, Sample, TrendAnalysis
from forecasting.trend.analysis import analyze_trend


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class ForecastPointOut(NpModel):

    date: dt.date
    predicted: float
    lower_bound: float
    upper_bound: float
    confidence: float

    @classmethod
    def of(cls, point: ForecastPoint) -> ForecastPointOut:
        return cls(
            date=point.date,
            predicted=point.predicted,
            lower_bound=point.lower_bound,
            upper_bound=point.upper_bound,
            confidence=point.confidence,
        )


class TrendAnalysisOut(NpModel):

    trend: TrendDirection
    strength: float
    slope: float
    r_squared: float

    @classmethod
    def of(cls, analysis: TrendAnalysis) -> TrendAnalysisOut:
        return cls(
            trend=analysis.trend,
            strength=analysis.strength,
            slope=analysis.slope,
            r_squared=analysis.r_squared,
        )


class ForecastSummaryOut(NpModel):

    total_predicted: float
    average_predicted: float
    average_confidence: float
    expected_growth: float
    periods: int

    @classmethod
    def of(cls, summary: ForecastSummary) -> ForecastSummaryOut:
        return cls(
            total_predicted=summary.total_predicted,
            average_predicted=summary.average_predicted,
            average_confidence=summary.average_confidence,
            expected_growth=summary.expected_growth,
            periods=summary.periods,
        )


class ForecastReport(NpModel):

    method: ForecastMethod
    forecast: List[ForecastPointOut]
    trend: TrendAnalysisOut
    anomalies: List[int]
    summary: ForecastSummaryOut


def build_report(
    samples: Sequence[Sample],
    periods_ahead: int,
    method: str | ForecastMethod | None = ForecastMethod.ensemble,
) -> ForecastReport:
    resolved = resolve_method(method)
    points = forecast(samples, periods_ahead, resolved)
    return ForecastReport(
        method=resolved,
        forecast=[ForecastPointOut.of(p) for p in points],
        trend=TrendAnalysisOut.of(analyze_trend(samples)),
        anomalies=detect_anomalies(samples),
        summary=ForecastSummaryOut.of(summarize(samples, points)),
    )
