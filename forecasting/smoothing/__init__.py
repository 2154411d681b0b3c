"""
Smoothing for the forecasting core: Holt's double exponential smoothing, single exponential smoothing and the trailing moving average.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.smoothing.holt import double_exponential_smoothing, holt_one_step_fits
from forecasting.smoothing.simple import exponential_smoothing, moving_average

__all__ = [
    "double_exponential_smoothing",
    "holt_one_step_fits",
    "exponential_smoothing",
    "moving_average",
]
