"""
Ordinary least-squares regression of sample values against their ordinal position, with coefficient of determination, for equally spaced series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from forecasting.models import Regression, Sample, values_of

log = logging.getLogger(__name__)

_NEUTRAL = Regression(slope=0.0, intercept=0.0, r_squared=0.0)


def _fit(x: np.ndarray, y: np.ndarray) -> tuple[float, float]:
    x_mean, y_mean = x.mean(), y.mean()
    sxx = float(np.sum((x - x_mean) ** 2))
    slope = float(np.sum((x - x_mean) * (y - y_mean)) / sxx) if sxx > 0 else 0.0
    return slope, float(y_mean - slope * x_mean)


def _r_squared(y: np.ndarray, fitted: np.ndarray) -> float:
    ss_tot = float(np.sum((y - y.mean()) ** 2))
    if ss_tot <= 0:
        return 0.0
    ss_res = float(np.sum((y - fitted) ** 2))
    return min(1.0, max(0.0, 1.0 - ss_res / ss_tot))


def linear_regression(samples: Sequence[Sample]) -> Regression:
    """Fit ``value = slope * i + intercept`` where ``i`` is the sample's index.

    Dates are ignored; the series is assumed equally spaced. Fewer than two
    samples give a zero regression, and a constant series gives ``r_squared`` 0.
    """
    if len(samples) < 2:
        log.debug("linear_regression: %d sample(s), returning neutral fit", len(samples))
        return _NEUTRAL

    y = values_of(samples)
    x = np.arange(len(y), dtype=float)
    slope, intercept = _fit(x, y)
    return Regression(
        slope=slope,
        intercept=intercept,
        r_squared=_r_squared(y, slope * x + intercept),
    )


def fitted_values(regression: Regression, n: int) -> np.ndarray:
    return regression.slope * np.arange(n, dtype=float) + regression.intercept


def residuals(samples: Sequence[Sample], fitted: np.ndarray) -> np.ndarray:
    return values_of(samples) - np.asarray(fitted, dtype=float)
