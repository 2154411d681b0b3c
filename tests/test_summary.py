"""
Test cases for forecast summaries and scenario bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import date

import pytest

from config import settings
from forecasting.enums import Scenario
from forecasting.forecast import forecast_linear_regression, scenarios, summarize
from forecasting.models import ForecastPoint


def _point(day, predicted, lower, upper, confidence):
    return ForecastPoint(date=date(2024, 1, day), predicted=predicted, lower_bound=lower,
                         upper_bound=upper, confidence=confidence)


def test_summary_totals(make_samples):
    samples = make_samples([10, 20, 30, 40])
    summary = summarize(samples, forecast_linear_regression(samples, 2))
    assert summary.periods == 2
    assert summary.total_predicted == pytest.approx(110.0)
    assert summary.average_predicted == pytest.approx(55.0)
    assert summary.average_confidence == pytest.approx(100.0)
    # history averages 25
    assert summary.expected_growth == pytest.approx(120.0)


def test_summary_empty_forecast(make_samples):
    summary = summarize(make_samples([1, 2, 3]), [])
    assert summary.periods == 0
    assert summary.total_predicted == 0.0
    assert summary.expected_growth == 0.0


def test_summary_zero_history_growth(make_samples):
    summary = summarize(make_samples([0, 0, 0]), [_point(5, 4.0, 2.0, 6.0, 80.0)])
    assert summary.expected_growth == 0.0
    assert summary.average_predicted == pytest.approx(4.0)


def test_scenarios_scale_values_not_confidence():
    base = [_point(1, 100.0, 80.0, 120.0, 70.0), _point(2, 50.0, 40.0, 60.0, 65.0)]
    out = scenarios(base)
    assert set(out) == set(Scenario)
    assert out[Scenario.realistic] == base

    optimistic = out[Scenario.optimistic][0]
    assert optimistic.predicted == pytest.approx(120.0)
    assert optimistic.lower_bound == pytest.approx(96.0)
    assert optimistic.upper_bound == pytest.approx(144.0)
    assert optimistic.confidence == 70.0
    assert optimistic.date == base[0].date

    conservative = out[Scenario.conservative][1]
    assert conservative.predicted == pytest.approx(42.5)
    assert conservative.upper_bound == pytest.approx(51.0)


def test_scenario_multipliers_setting(monkeypatch):
    monkeypatch.setattr(
        settings, "scenario_multipliers",
        {"optimistic": 2.0, "realistic": 1.0, "conservative": 0.5},
    )
    out = scenarios([_point(1, 10.0, 8.0, 12.0, 50.0)])
    assert out[Scenario.optimistic][0].predicted == pytest.approx(20.0)
    assert out[Scenario.conservative][0].predicted == pytest.approx(5.0)
