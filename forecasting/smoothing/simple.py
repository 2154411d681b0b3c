"""
Single exponential smoothing and trailing moving average over sample values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from forecasting.models import Sample, values_of
from config import settings


def exponential_smoothing(samples: Sequence[Sample], alpha: float | None = None) -> List[float]:
    if alpha is None:
        alpha = settings.smoothing_alpha
    vals = values_of(samples)
    if vals.size == 0:
        return []
    result = np.zeros(len(vals))
    result[0] = vals[0]
    for i in range(1, len(vals)):
        result[i] = alpha * vals[i] + (1 - alpha) * result[i - 1]
    return [float(v) for v in result]


def moving_average(samples: Sequence[Sample], window: int | None = None) -> List[float]:
    """Mean of the trailing ``window`` values at each index, fewer at the start of the series."""
    if window is None:
        window = settings.moving_average_window
    vals = values_of(samples)
    if vals.size == 0:
        return []
    window = max(1, min(int(window), len(vals)))
    return [float(np.mean(vals[max(0, i - window + 1) : i + 1])) for i in range(len(vals))]
