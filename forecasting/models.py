"""
Value objects shared across the forecasting core: dated samples, regression and smoothing results, forecast points and trend analyses, plus coercion of raw dated records supplied by the aggregation layer into samples.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Sequence, Tuple

import numpy as np

from forecasting.enums import TrendDirection

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    date: date
    value: float


@dataclass(frozen=True)
class Regression:
    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class HoltState:
    level: float
    trend: float

    def project(self, periods: int) -> float:
        return self.level + self.trend * periods


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    predicted: float
    lower_bound: float
    upper_bound: float
    confidence: float


@dataclass(frozen=True)
class TrendAnalysis:
    trend: TrendDirection
    strength: float
    slope: float
    r_squared: float


def values_of(samples: Sequence[Sample]) -> np.ndarray:
    return np.array([s.value for s in samples], dtype=float)


def _coerce_date(raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw).strip()[:10])


def samples_from_records(records: Iterable[Any]) -> Tuple[Sample, ...]:
    """Coerce ``{"date", "value"}`` mappings or ``(date, value)`` pairs into samples.

    Dates may be ``date``/``datetime`` objects or ISO ``YYYY-MM-DD`` strings.
    Records that cannot be parsed are skipped.
    """
    out: list[Sample] = []
    for record in records:
        if isinstance(record, Sample):
            out.append(record)
            continue
        try:
            if isinstance(record, Mapping):
                raw_date, raw_value = record["date"], record["value"]
            else:
                raw_date, raw_value = record
            value = float(raw_value)
            if not math.isfinite(value):
                raise ValueError(f"non-finite value {value!r}")
            out.append(Sample(date=_coerce_date(raw_date), value=value))
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("skipping malformed sample record %r: %s", record, exc)
            continue
    return tuple(out)
