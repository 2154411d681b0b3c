"""
Descriptive statistics over plain value sequences: arithmetic mean and population standard deviation, both defined as zero on empty input.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

Values = Union[Sequence[float], np.ndarray]


def mean(values: Values) -> float:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(arr.mean())


def population_std_dev(values: Values) -> float:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return 0.0
    # divides by n, not n - 1
    return float(np.sqrt(np.mean((arr - arr.mean()) ** 2)))
