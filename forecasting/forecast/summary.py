"""
Roll-ups of a forecast for summary widgets: totals, averages and expected growth over the historical level, and optimistic/conservative scenario bands derived by scaling a base forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence

from forecasting.enums import Scenario
from forecasting.models import ForecastPoint, Sample, values_of
from forecasting.stats.descriptive import mean


@dataclass(frozen=True)
class ForecastSummary:
    total_predicted: float
    average_predicted: float
    average_confidence: float
    expected_growth: float
    periods: int


_EMPTY = ForecastSummary(
    total_predicted=0.0,
    average_predicted=0.0,
    average_confidence=0.0,
    expected_growth=0.0,
    periods=0,
)


def summarize(samples: Sequence[Sample], points: Sequence[ForecastPoint]) -> ForecastSummary:
    if not points:
        return _EMPTY

    total = sum(p.predicted for p in points)
    avg = total / len(points)
    historical = mean(values_of(samples))
    growth = (avg - historical) / historical * 100 if historical else 0.0
    return ForecastSummary(
        total_predicted=total,
        average_predicted=avg,
        average_confidence=mean([p.confidence for p in points]),
        expected_growth=growth,
        periods=len(points),
    )


def _scale(point: ForecastPoint, factor: float) -> ForecastPoint:
    return replace(
        point,
        predicted=point.predicted * factor,
        lower_bound=point.lower_bound * factor,
        upper_bound=point.upper_bound * factor,
    )


def scenarios(points: Sequence[ForecastPoint]) -> Dict[Scenario, List[ForecastPoint]]:
    out: Dict[Scenario, List[ForecastPoint]] = {}
    for scenario in Scenario:
        factor = scenario.multiplier()
        out[scenario] = list(points) if factor == 1.0 else [_scale(p, factor) for p in points]
    return out
