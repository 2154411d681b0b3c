"""
Test cases for the statistics primitives: mean, population standard deviation and ordinal least-squares regression, including the degenerate inputs that must stay NaN-free.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import numpy as np
import pytest

from forecasting.models import Regression
from forecasting.stats import fitted_values, linear_regression, mean, population_std_dev, residuals


def test_mean_and_std_empty():
    assert mean([]) == 0.0
    assert population_std_dev([]) == 0.0


def test_population_std_divides_by_n():
    # sample std would be sqrt(32/7); population std is sqrt(32/8) = 2
    vals = [2, 4, 4, 4, 5, 5, 7, 9]
    assert mean(vals) == pytest.approx(5.0)
    assert population_std_dev(vals) == pytest.approx(2.0)
    assert population_std_dev(np.array(vals, dtype=float)) == pytest.approx(2.0)


def test_regression_recovers_perfect_line(make_samples):
    reg = linear_regression(make_samples([3 + 1.5 * i for i in range(12)]))
    assert reg.slope == pytest.approx(1.5)
    assert reg.intercept == pytest.approx(3.0)
    assert reg.r_squared == pytest.approx(1.0)


def test_regression_uses_position_not_date(make_samples):
    samples = make_samples([10, 20, 30, 40])
    reg = linear_regression(samples)
    assert reg.slope == pytest.approx(10.0)
    assert reg.intercept == pytest.approx(10.0)
    assert reg.predict(4) == pytest.approx(50.0)


@pytest.mark.parametrize("values", [[], [42.0]])
def test_regression_too_short_is_neutral(make_samples, values):
    assert linear_regression(make_samples(values)) == Regression(0.0, 0.0, 0.0)


def test_regression_constant_series(make_samples):
    reg = linear_regression(make_samples([7.0] * 10))
    assert reg.slope == 0.0
    assert reg.r_squared == 0.0
    assert reg.intercept == pytest.approx(7.0)
    assert not math.isnan(reg.r_squared)


def test_regression_noisy_series_r2_in_range(make_samples):
    reg = linear_regression(make_samples([5, 9, 4, 12, 8, 15, 9, 18]))
    assert reg.slope > 0
    assert 0.0 < reg.r_squared < 1.0


def test_residuals_against_fit(make_samples):
    samples = make_samples([1, 3, 2, 4])
    reg = linear_regression(samples)
    res = residuals(samples, fitted_values(reg, len(samples)))
    assert len(res) == 4
    # OLS residuals sum to zero
    assert float(res.sum()) == pytest.approx(0.0, abs=1e-12)
