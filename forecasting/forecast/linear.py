"""
Linear-regression forecaster: extends the least-squares trend line past the last sample, with a constant confidence taken from the fit's R² and a margin that widens with distance from the observed data.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

from forecasting.forecast.common import (
    future_dates,
    horizon_widening,
    make_point,
    residual_spread,
)
from forecasting.models import ForecastPoint, Sample
from forecasting.stats.regression import fitted_values, linear_regression, residuals


def forecast_linear_regression(samples: Sequence[Sample], periods_ahead: int) -> List[ForecastPoint]:
    if periods_ahead <= 0:
        return []
    n = len(samples)
    reg = linear_regression(samples)
    spread = residual_spread(residuals(samples, fitted_values(reg, n)))
    confidence = reg.r_squared * 100

    return [
        make_point(
            day,
            predicted=reg.predict(n + i - 1),
            margin=spread * horizon_widening(i, n),
            confidence=confidence,
        )
        for i, day in enumerate(future_dates(samples, periods_ahead), start=1)
    ]
