"""
Exponential-smoothing forecaster built on Holt's linear trend method. The margin of error comes from one-step-ahead in-sample errors and grows with the square root of the horizon; confidence decays linearly per period ahead.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

from forecasting.forecast.common import future_dates, make_point, residual_spread
from forecasting.models import ForecastPoint, Sample
from forecasting.smoothing.holt import double_exponential_smoothing, holt_one_step_fits
from forecasting.stats.regression import residuals
from config import settings


def forecast_exponential_smoothing(
    samples: Sequence[Sample],
    periods_ahead: int,
    alpha: float | None = None,
    beta: float | None = None,
) -> List[ForecastPoint]:
    if periods_ahead <= 0:
        return []
    state = double_exponential_smoothing(samples, alpha, beta)
    # index 0 fits itself, so its zero error still counts towards the spread
    spread = residual_spread(residuals(samples, holt_one_step_fits(samples, alpha, beta)))

    base = settings.exponential_confidence_base
    decay = settings.exponential_confidence_decay
    return [
        make_point(
            day,
            predicted=state.project(i),
            margin=spread * math.sqrt(i),
            confidence=base - decay * i,
        )
        for i, day in enumerate(future_dates(samples, periods_ahead), start=1)
    ]
