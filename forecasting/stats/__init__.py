"""
Statistics primitives for the forecasting core: mean, population standard deviation and ordinary least-squares regression on ordinal position.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.stats.descriptive import mean, population_std_dev
from forecasting.stats.regression import fitted_values, linear_regression, residuals

__all__ = ["mean", "population_std_dev", "linear_regression", "fitted_values", "residuals"]
