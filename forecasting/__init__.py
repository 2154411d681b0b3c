"""
Forecasting core for the operational dashboard: univariate forecasting and anomaly detection over equally spaced daily samples.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.enums import ForecastMethod, Scenario, TrendDirection
from forecasting.models import (
    ForecastPoint,
    HoltState,
    Regression,
    Sample,
    TrendAnalysis,
    samples_from_records,
)
from forecasting.stats import linear_regression, mean, population_std_dev
from forecasting.smoothing import (
    double_exponential_smoothing,
    exponential_smoothing,
    moving_average,
)
from forecasting.seasonality import seasonal_factors
from forecasting.forecast import (
    ensemble_forecast,
    forecast,
    forecast_exponential_smoothing,
    forecast_linear_regression,
    forecast_seasonal_decomposition,
    scenarios,
    summarize,
)
from forecasting.trend import analyze_trend
from forecasting.anomaly import detect_anomalies

__all__ = [
    "ForecastMethod",
    "Scenario",
    "TrendDirection",
    "ForecastPoint",
    "HoltState",
    "Regression",
    "Sample",
    "TrendAnalysis",
    "samples_from_records",
    "linear_regression",
    "mean",
    "population_std_dev",
    "double_exponential_smoothing",
    "exponential_smoothing",
    "moving_average",
    "seasonal_factors",
    "ensemble_forecast",
    "forecast",
    "forecast_exponential_smoothing",
    "forecast_linear_regression",
    "forecast_seasonal_decomposition",
    "scenarios",
    "summarize",
    "analyze_trend",
    "detect_anomalies",
]
