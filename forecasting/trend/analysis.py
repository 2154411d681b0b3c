"""
Trend classification from the regression slope of a series: direction relative to the average level and a bounded strength heuristic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from forecasting.enums import TrendDirection
from forecasting.models import Sample, TrendAnalysis, values_of
from forecasting.stats.descriptive import mean
from forecasting.stats.regression import linear_regression
from config import settings


def _direction(slope: float, level: float) -> TrendDirection:
    if slope == 0 or abs(slope) < settings.trend_stable_ratio * level:
        return TrendDirection.stable
    return TrendDirection.increasing if slope > 0 else TrendDirection.decreasing


def analyze_trend(samples: Sequence[Sample]) -> TrendAnalysis:
    reg = linear_regression(samples)
    # magnitude of the average, so negative-valued series still scale sensibly
    level = abs(mean(values_of(samples)))
    strength = min(1.0, abs(reg.slope) / (level or 1.0) * settings.trend_strength_scale)
    return TrendAnalysis(
        trend=_direction(reg.slope, level),
        strength=strength,
        slope=reg.slope,
        r_squared=reg.r_squared,
    )
