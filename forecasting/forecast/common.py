"""
Shared helpers for the forecasters: dating future periods from the last observed sample, sizing the margin of error from in-sample residuals, and building floored, clamped forecast points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Sequence

import numpy as np

from forecasting.models import ForecastPoint, Sample
from forecasting.stats.descriptive import population_std_dev
from config import settings


def future_dates(samples: Sequence[Sample], periods_ahead: int) -> List[date]:
    anchor = samples[-1].date if samples else date.today()
    return [anchor + timedelta(days=i) for i in range(1, periods_ahead + 1)]


def residual_spread(residuals: np.ndarray) -> float:
    return settings.confidence_z * population_std_dev(residuals)


def horizon_widening(i: int, n: int) -> float:
    """Growth of the margin ``i`` periods past the last of ``n`` observations."""
    if n <= 0:
        return 0.0
    return math.sqrt(1 + i / n)


def clamp_confidence(value: float) -> float:
    return max(settings.confidence_min, min(settings.confidence_max, value))


def make_point(day: date, predicted: float, margin: float, confidence: float) -> ForecastPoint:
    # forecast metrics such as revenue or occupancy cannot go negative
    return ForecastPoint(
        date=day,
        predicted=max(0.0, predicted),
        lower_bound=max(0.0, predicted - margin),
        upper_bound=max(0.0, predicted + margin),
        confidence=clamp_confidence(confidence),
    )
