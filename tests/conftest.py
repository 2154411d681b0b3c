import os
import sys
from datetime import date, timedelta

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from forecasting.models import Sample

START = date(2024, 1, 1)


def series(values, start=START):
    """Daily samples starting at ``start``, one per value."""
    return [Sample(date=start + timedelta(days=i), value=float(v)) for i, v in enumerate(values)]


@pytest.fixture
def make_samples():
    return series


@pytest.fixture
def weekly_samples():
    """Four weeks of an upward trend with a weekend peak."""
    pattern = [0.8, 0.9, 1.0, 1.0, 1.1, 1.3, 0.9]
    return series([(100 + 2 * i) * pattern[i % 7] for i in range(28)])
