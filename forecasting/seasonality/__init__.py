"""
Seasonality estimation for the forecasting core, producing normalised multiplicative factors per phase of a repeating period.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecasting.seasonality.factors import detrend, seasonal_factors

__all__ = ["detrend", "seasonal_factors"]
