"""
Forecasters for equally spaced daily series: linear regression, Holt exponential smoothing, seasonal decomposition and their weighted ensemble, each emitting dated point forecasts with confidence bounds, plus method dispatch and summary roll-ups.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.forecast.linear import forecast_linear_regression
from forecasting.forecast.exponential import forecast_exponential_smoothing
from forecasting.forecast.seasonal import forecast_seasonal_decomposition
from forecasting.forecast.ensemble import ensemble_forecast
from forecasting.forecast.methods import forecast, resolve_method
from forecasting.forecast.summary import ForecastSummary, scenarios, summarize

__all__ = [
    "forecast_linear_regression",
    "forecast_exponential_smoothing",
    "forecast_seasonal_decomposition",
    "ensemble_forecast",
    "forecast",
    "resolve_method",
    "ForecastSummary",
    "summarize",
    "scenarios",
]
