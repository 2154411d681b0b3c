"""
Test cases for the dashboard response models and report builder, checking camelCase serialization and numpy coercion.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import date

import numpy as np
import pytest

from forecasting.enums import ForecastMethod, TrendDirection
from forecasting.models import ForecastPoint
from forecasting.responses import ForecastPointOut, ForecastReport, build_report


def test_point_serializes_camel_case():
    out = ForecastPointOut.of(ForecastPoint(date(2024, 5, 1), 10.0, 8.0, 12.0, 90.0))
    dumped = out.model_dump(by_alias=True, mode="json")
    assert dumped == {
        "date": "2024-05-01",
        "predicted": 10.0,
        "lowerBound": 8.0,
        "upperBound": 12.0,
        "confidence": 90.0,
    }


def test_numpy_values_are_coerced():
    out = ForecastPointOut(
        date=date(2024, 5, 1),
        predicted=np.float64(3.5),
        lower_bound=np.float64(1.0),
        upper_bound=np.float64(6.0),
        confidence=np.float64(50.0),
    )
    dumped = out.model_dump(by_alias=True)
    assert type(dumped["predicted"]) is float


def test_build_report(weekly_samples):
    report = build_report(weekly_samples, 7, "seasonal")
    assert isinstance(report, ForecastReport)
    assert report.method == ForecastMethod.seasonal
    assert len(report.forecast) == 7
    assert report.trend.trend == TrendDirection.increasing
    assert report.summary.periods == 7

    dumped = report.model_dump(by_alias=True, mode="json")
    assert dumped["method"] == "seasonal"
    assert dumped["trend"]["trend"] == "increasing"
    assert "rSquared" in dumped["trend"]
    assert "averageConfidence" in dumped["summary"]
    assert dumped["forecast"][0]["date"] == "2024-01-29"
    assert isinstance(dumped["anomalies"], list)


def test_build_report_short_history(make_samples):
    report = build_report(make_samples([4, 1]), 3, "bogus")
    assert report.method == ForecastMethod.ensemble
    assert len(report.forecast) == 3
    assert report.anomalies == []
    assert all(p.predicted >= 0 for p in report.forecast)
