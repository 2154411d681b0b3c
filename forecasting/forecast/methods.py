"""
Dispatch from a forecast method name to the matching forecaster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

from forecasting.enums import ForecastMethod
from forecasting.forecast.ensemble import ensemble_forecast
from forecasting.forecast.exponential import forecast_exponential_smoothing
from forecasting.forecast.linear import forecast_linear_regression
from forecasting.forecast.seasonal import forecast_seasonal_decomposition
from forecasting.models import ForecastPoint, Sample

log = logging.getLogger(__name__)

Forecaster = Callable[[Sequence[Sample], int], List[ForecastPoint]]

FORECASTERS: Dict[ForecastMethod, Forecaster] = {
    ForecastMethod.linear: forecast_linear_regression,
    ForecastMethod.exponential: forecast_exponential_smoothing,
    ForecastMethod.seasonal: forecast_seasonal_decomposition,
    ForecastMethod.ensemble: ensemble_forecast,
}


def resolve_method(method: str | ForecastMethod | None) -> ForecastMethod:
    parsed = ForecastMethod.parse(method)
    if parsed is None:
        if method is not None:
            log.warning("unknown forecast method %r, using ensemble", method)
        return ForecastMethod.ensemble
    return parsed


def forecast(
    samples: Sequence[Sample],
    periods_ahead: int,
    method: str | ForecastMethod | None = ForecastMethod.ensemble,
) -> List[ForecastPoint]:
    return FORECASTERS[resolve_method(method)](samples, periods_ahead)
