"""
Test cases for configuration defaults and environment overrides.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import DEFAULT_ENSEMBLE_WEIGHTS, Settings


def test_defaults():
    s = Settings()
    assert s.smoothing_alpha == 0.3
    assert s.smoothing_beta == 0.3
    assert s.seasonal_period == 7
    assert s.confidence_z == 1.96
    assert s.ensemble_min_samples == 7
    assert s.ensemble_weights == DEFAULT_ENSEMBLE_WEIGHTS
    assert sum(DEFAULT_ENSEMBLE_WEIGHTS.values()) == pytest.approx(1.0)
    assert s.anomaly_zscore_threshold == 2.0


def test_env_override(monkeypatch):
    monkeypatch.setenv("FORECAST_SMOOTHING_ALPHA", "0.5")
    monkeypatch.setenv("FORECAST_ENSEMBLE_WEIGHTS", '{"linear": 1.0, "exponential": 0.0, "seasonal": 0.0}')
    s = Settings()
    assert s.smoothing_alpha == 0.5
    assert s.ensemble_weights["linear"] == 1.0


def test_seasonal_period_has_single_env_knob(monkeypatch):
    import config

    assert not hasattr(config, "FORECAST_DEFAULT_PERIOD")
    monkeypatch.setenv("FORECAST_DEFAULT_PERIOD", "12")
    assert Settings().seasonal_period == 7
    monkeypatch.setenv("FORECAST_SEASONAL_PERIOD", "5")
    assert Settings().seasonal_period == 5
