"""
Enumerations for trend direction, forecast method and forecast scenario

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TrendDirection(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"


class ForecastMethod(str, Enum):
    linear = "linear"
    exponential = "exponential"
    seasonal = "seasonal"
    ensemble = "ensemble"

    @classmethod
    def parse(cls, value: str | ForecastMethod | None) -> ForecastMethod | None:
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return None


class Scenario(str, Enum):
    optimistic = "optimistic"
    realistic = "realistic"
    conservative = "conservative"

    def multiplier(self) -> float:
        from config import settings

        return float(settings.scenario_multipliers.get(self.value, 1.0))
