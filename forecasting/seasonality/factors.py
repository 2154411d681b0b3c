"""
Multiplicative seasonal factors for equally spaced series: each value is divided by the regression trend at its index, the detrended values are averaged per phase of the period, and the phase averages are normalised to a mean of one.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from forecasting.models import Sample, values_of
from forecasting.stats.regression import fitted_values, linear_regression
from config import settings

log = logging.getLogger(__name__)


def detrend(samples: Sequence[Sample]) -> np.ndarray:
    vals = values_of(samples)
    trend = fitted_values(linear_regression(samples), len(vals))
    # non-positive trend values would flip or blow up the ratio
    safe = np.where(trend > 0, trend, 1.0)
    return np.where(trend > 0, vals / safe, vals)


def seasonal_factors(samples: Sequence[Sample], period: int | None = None) -> List[float]:
    if period is None:
        period = settings.seasonal_period
    period = max(1, int(period))
    if len(samples) < 2 * period:
        log.debug(
            "seasonal_factors: %d sample(s) < two periods of %d, using flat factors",
            len(samples), period,
        )
        return [1.0] * period

    detrended = detrend(samples)
    phases = np.arange(len(detrended)) % period
    raw = np.array([detrended[phases == p].mean() for p in range(period)])

    avg = float(raw.mean())
    return [float(f) for f in raw / (avg or 1.0)]
