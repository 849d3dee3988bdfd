"""
Polynomial least-squares regression over short integer-indexed series, used to fit monthly revenue and project the months that follow. Predictions are clamped at zero because revenue cannot be negative, and degenerate inputs surface as typed errors rather than NaN coefficients.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.errors import EmptySeriesError, InvalidDegreeError, InvalidSeriesError
from engine.regression.linalg import design_matrix, normal_equations, solve

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    x: float
    y: float


@dataclass(frozen=True)
class RegressionSummary:
    requested_degree: int
    degree: int
    coefficients: List[float]
    r_squared: Optional[float]
    fitted: List[Sample]
    projections: List[Sample]


def series_from_pairs(pairs: Iterable[Tuple[float, float]]) -> List[Sample]:
    return [Sample(x=float(x), y=float(y)) for x, y in pairs]


def _arrays(series: Sequence[Sample]) -> Tuple[np.ndarray, np.ndarray]:
    if not series:
        raise EmptySeriesError("series must contain at least one sample")
    xs = np.array([s.x for s in series], dtype=float)
    ys = np.array([s.y for s in series], dtype=float)
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise InvalidSeriesError("series contains non-finite values")
    return xs, ys


def effective_degree(n: int, degree: int) -> int:
    if degree < 0:
        raise InvalidDegreeError(f"degree must be non-negative, got {degree}")
    if n >= degree + 1:
        return degree
    # a single sample only determines a constant
    return max(1, n - 1) if n > 1 else 0


def fit(series: Sequence[Sample], degree: int | None = None) -> List[float]:
    if degree is None:
        degree = settings.regression_default_degree
    xs, ys = _arrays(series)
    used = effective_degree(len(xs), degree)
    if used != degree:
        log.debug("degree %d needs %d samples, got %d; fitting degree %d", degree, degree + 1, len(xs), used)

    xtx, xty = normal_equations(design_matrix(xs, used), ys)
    return [float(c) for c in solve(xtx, xty)]


def evaluate(x: float, coefficients: Sequence[float]) -> float:
    y = 0.0
    for c in reversed(coefficients):
        y = y * x + c
    return float(y)


def predict(x: float, coefficients: Sequence[float]) -> float:
    return max(0.0, evaluate(x, coefficients))


def r_squared(series: Sequence[Sample], coefficients: Sequence[float]) -> Optional[float]:
    """Coefficient of determination of ``coefficients`` over ``series``.

    Residuals are measured against :func:`predict`, the same clamped values
    callers display. A series with no variance scores ``1.0`` when the fit
    reproduces it and ``None`` (undefined) otherwise. Poor fits may score
    below zero; the value is not clamped.
    """
    xs, ys = _arrays(series)
    predicted = np.array([predict(x, coefficients) for x in xs])
    ss_res = float(np.sum((ys - predicted) ** 2))
    ss_tot = float(np.sum((ys - np.mean(ys)) ** 2))

    if ss_tot == 0.0:
        scale = max(float(np.sum(ys ** 2)), 1.0)
        if ss_res <= settings.regression_zero_variance_tolerance * scale:
            return 1.0
        return None
    return 1.0 - ss_res / ss_tot


def project(series: Sequence[Sample], count: int, degree: int | None = None) -> List[Sample]:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if not series:
        raise EmptySeriesError("cannot project from an empty series")

    coefficients = fit(series, degree)
    last_x = series[-1].x
    return [
        Sample(x=last_x + i, y=predict(last_x + i, coefficients))
        for i in range(1, count + 1)
    ]


def summarize(series: Sequence[Sample], degree: int | None = None, count: int = 0) -> RegressionSummary:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if degree is None:
        degree = settings.regression_default_degree
    coefficients = fit(series, degree)
    last_x = series[-1].x

    return RegressionSummary(
        requested_degree=degree,
        degree=len(coefficients) - 1,
        coefficients=coefficients,
        r_squared=r_squared(series, coefficients),
        fitted=[Sample(x=s.x, y=predict(s.x, coefficients)) for s in series],
        projections=[
            Sample(x=last_x + i, y=predict(last_x + i, coefficients))
            for i in range(1, count + 1)
        ],
    )
