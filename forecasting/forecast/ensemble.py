"""
Ensemble forecaster blending the linear-regression, exponential-smoothing and seasonal-decomposition forecasts with fixed weights, falling back to the linear forecaster alone when the history is too short for smoothing and seasonality to mean anything.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from forecasting.enums import ForecastMethod
from forecasting.forecast.exponential import forecast_exponential_smoothing
from forecasting.forecast.linear import forecast_linear_regression
from forecasting.forecast.seasonal import forecast_seasonal_decomposition
from forecasting.models import ForecastPoint, Sample
from config import DEFAULT_ENSEMBLE_WEIGHTS, settings

log = logging.getLogger(__name__)


def _weights() -> Dict[ForecastMethod, float]:
    configured = settings.ensemble_weights
    return {
        method: float(configured.get(method.value, DEFAULT_ENSEMBLE_WEIGHTS[method.value]))
        for method in (ForecastMethod.linear, ForecastMethod.exponential, ForecastMethod.seasonal)
    }


def _blend(members: Dict[ForecastMethod, ForecastPoint], weights: Dict[ForecastMethod, float]) -> ForecastPoint:
    first = members[ForecastMethod.linear]
    return ForecastPoint(
        date=first.date,
        predicted=sum(weights[m] * p.predicted for m, p in members.items()),
        lower_bound=min(p.lower_bound for p in members.values()),
        upper_bound=max(p.upper_bound for p in members.values()),
        confidence=sum(weights[m] * p.confidence for m, p in members.items()),
    )


def ensemble_forecast(samples: Sequence[Sample], periods_ahead: int) -> List[ForecastPoint]:
    if len(samples) < settings.ensemble_min_samples:
        log.debug("ensemble_forecast: %d sample(s), linear forecast only", len(samples))
        return forecast_linear_regression(samples, periods_ahead)

    runs = {
        ForecastMethod.linear: forecast_linear_regression(samples, periods_ahead),
        ForecastMethod.exponential: forecast_exponential_smoothing(samples, periods_ahead),
        ForecastMethod.seasonal: forecast_seasonal_decomposition(samples, periods_ahead),
    }
    weights = _weights()
    return [
        _blend({method: points[i] for method, points in runs.items()}, weights)
        for i in range(max(0, periods_ahead))
    ]
