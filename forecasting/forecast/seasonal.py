"""
Seasonal-decomposition forecaster: the regression trend scaled by the multiplicative seasonal factor of each period's phase.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from forecasting.forecast.common import (
    future_dates,
    horizon_widening,
    make_point,
    residual_spread,
)
from forecasting.models import ForecastPoint, Sample
from forecasting.seasonality.factors import seasonal_factors
from forecasting.stats.regression import fitted_values, linear_regression, residuals
from config import settings


def forecast_seasonal_decomposition(
    samples: Sequence[Sample],
    periods_ahead: int,
    period: int | None = None,
) -> List[ForecastPoint]:
    if periods_ahead <= 0:
        return []
    if period is None:
        period = settings.seasonal_period
    period = max(1, int(period))

    n = len(samples)
    reg = linear_regression(samples)
    factors = np.array(seasonal_factors(samples, period))
    in_sample = fitted_values(reg, n) * factors[np.arange(n) % period]
    spread = residual_spread(residuals(samples, in_sample))

    base = settings.seasonal_confidence_base
    decay = settings.seasonal_confidence_decay
    points: List[ForecastPoint] = []
    for i, day in enumerate(future_dates(samples, periods_ahead), start=1):
        x = n + i - 1
        points.append(make_point(
            day,
            predicted=reg.predict(x) * float(factors[x % period]),
            margin=spread * horizon_widening(i, n),
            confidence=base - decay * i,
        ))
    return points
