"""
Z-score outlier flagging over a whole series, using the population mean and standard deviation of its values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from forecasting.models import Sample, values_of
from forecasting.stats.descriptive import population_std_dev
from config import settings


def z_scores(values: np.ndarray) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr
    # constant series score 0 even when round-off in the mean leaves a tiny std
    if np.ptp(arr) == 0:
        return np.zeros_like(arr)
    std = population_std_dev(arr) or 1.0
    return np.abs(arr - arr.mean()) / std


def detect_anomalies(samples: Sequence[Sample], threshold: float | None = None) -> List[int]:
    if threshold is None:
        threshold = settings.anomaly_zscore_threshold
    arr = values_of(samples)
    if arr.size == 0 or np.ptp(arr) == 0:
        return []
    scores = z_scores(arr)
    # inclusive: a lone outlier among n points sits at exactly sqrt(n - 1)
    return [int(i) for i in np.flatnonzero(scores >= threshold)]
