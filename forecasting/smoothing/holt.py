"""
Double exponential smoothing (Holt's linear trend method) over equally spaced samples, tracking a level and a trend component, and the one-step-ahead in-sample fits used to size forecast error.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from forecasting.models import HoltState, Sample, values_of
from config import settings

log = logging.getLogger(__name__)


def _step(value: float, level: float, trend: float, alpha: float, beta: float) -> tuple[float, float]:
    prev_level = level
    level = alpha * value + (1 - alpha) * (level + trend)
    trend = beta * (level - prev_level) + (1 - beta) * trend
    return level, trend


def double_exponential_smoothing(
    samples: Sequence[Sample],
    alpha: float | None = None,
    beta: float | None = None,
) -> HoltState:
    if alpha is None:
        alpha = settings.smoothing_alpha
    if beta is None:
        beta = settings.smoothing_beta
    if len(samples) < 2:
        log.debug("double_exponential_smoothing: %d sample(s), no trend", len(samples))
        return HoltState(level=float(samples[0].value) if samples else 0.0, trend=0.0)

    vals = values_of(samples)
    level = float(vals[0])
    trend = float(vals[1] - vals[0])
    for i in range(1, len(vals)):
        level, trend = _step(float(vals[i]), level, trend, alpha, beta)
    return HoltState(level=level, trend=trend)


def holt_one_step_fits(
    samples: Sequence[Sample],
    alpha: float | None = None,
    beta: float | None = None,
) -> np.ndarray:
    """Value predicted for each index by Holt's method fitted on the samples before it.

    Entry ``i`` equals ``level + trend`` of ``double_exponential_smoothing(samples[:i])``.
    Index 0 has no history and is fitted as its own value; index 1 sees a
    single sample, which carries no trend, so it is fitted as ``value[0]``.
    From index 2 on every prefix shares the same initialisation, so the states
    come from a single forward pass.
    """
    if alpha is None:
        alpha = settings.smoothing_alpha
    if beta is None:
        beta = settings.smoothing_beta

    vals = values_of(samples)
    n = len(vals)
    fits = np.zeros(n)
    if n == 0:
        return fits
    fits[0] = vals[0]
    if n == 1:
        return fits
    fits[1] = vals[0]

    level = float(vals[0])
    trend = float(vals[1] - vals[0])
    for i in range(2, n):
        level, trend = _step(float(vals[i - 1]), level, trend, alpha, beta)
        fits[i] = level + trend
    return fits
