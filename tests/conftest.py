import os
import sys
from datetime import datetime

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.regression import Sample, series_from_pairs


@pytest.fixture
def revenue_series() -> list[Sample]:
    """Six months of freelancer revenue, x = month index."""
    return series_from_pairs([
        (0, 2800), (1, 3200), (2, 2950), (3, 3600), (4, 3400), (5, 3800),
    ])


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 12, 15, 12, 0, 0)
