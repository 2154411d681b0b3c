"""
Constants and configuration for the forecasting core.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict

from pydantic_settings import BaseSettings


# blend weights for the ensemble forecaster, keyed by ForecastMethod value
DEFAULT_ENSEMBLE_WEIGHTS: Dict[str, float] = {
    "linear": 0.30,
    "exponential": 0.35,
    "seasonal": 0.35,
}

# multipliers applied to predicted value and bounds for each scenario
SCENARIO_MULTIPLIERS: Dict[str, float] = {
    "optimistic": 1.20,
    "realistic": 1.00,
    "conservative": 0.85,
}


class Settings(BaseSettings):
    # holt's linear trend method
    smoothing_alpha: float = 0.3
    smoothing_beta: float = 0.3

    # trailing moving average window
    moving_average_window: int = 7

    # seasonality
    seasonal_period: int = 7

    # 95% normal factor used for forecast margins
    confidence_z: float = 1.96
    confidence_min: float = 0.0
    confidence_max: float = 100.0

    # confidence decay per period ahead: base - decay * i
    exponential_confidence_base: float = 85.0
    exponential_confidence_decay: float = 2.0
    seasonal_confidence_base: float = 90.0
    seasonal_confidence_decay: float = 1.5

    # ensemble
    ensemble_min_samples: int = 7
    ensemble_weights: Dict[str, float] = DEFAULT_ENSEMBLE_WEIGHTS

    # trend analysis heuristics
    trend_stable_ratio: float = 0.01
    trend_strength_scale: float = 10.0

    # anomaly detection
    anomaly_zscore_threshold: float = 2.0

    scenario_multipliers: Dict[str, float] = SCENARIO_MULTIPLIERS

    model_config = {
        "env_prefix": "FORECAST_",
        "extra": "ignore",
    }


settings = Settings()
