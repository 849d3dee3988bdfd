"""
Revenue forecasting over monthly buckets: picks the polynomial degree from the number of months with data, attaches fitted values to every observed month, and relabels the regression's integer projections back onto the calendar months that follow.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config import MONTH_NAMES, settings
from engine.enums import Period
from engine.errors import RegressionError
from engine.regression import Sample, fit, predict, project, r_squared
from engine.revenue.buckets import MonthBucket, add_months

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendPoint:
    label: str
    year: int
    month: int
    index: int
    actual: int
    projected: Optional[int] = None


@dataclass(frozen=True)
class MonthProjection:
    label: str
    year: int
    month: int
    x: int
    projected: int


@dataclass(frozen=True)
class RevenueForecast:
    period: Period
    trends: List[TrendPoint]
    projections: List[MonthProjection] = field(default_factory=list)
    r_squared: Optional[float] = None
    degree: Optional[int] = None
    coefficients: List[float] = field(default_factory=list)


def choose_degree(n: int) -> int:
    return 3 if n >= settings.revenue_cubic_min_points else 2


def _trends(buckets: Sequence[MonthBucket], coefficients: Sequence[float] | None = None) -> List[TrendPoint]:
    return [
        TrendPoint(
            label=b.label,
            year=b.year,
            month=b.month,
            index=b.index,
            actual=b.actual,
            projected=int(round(predict(b.index, coefficients))) if coefficients else None,
        )
        for b in buckets
    ]


def forecast_revenue(buckets: Sequence[MonthBucket], period: Period) -> RevenueForecast:
    if len(buckets) < settings.revenue_min_points:
        log.warning(
            "Not enough months for projections (need %d, got %d)",
            settings.revenue_min_points, len(buckets),
        )
        return RevenueForecast(period=period, trends=_trends(buckets))
    if not any(b.actual > 0 for b in buckets):
        log.info("No revenue in %d month(s); nothing to project", len(buckets))
        return RevenueForecast(period=period, trends=_trends(buckets))

    series = [Sample(x=b.index, y=b.actual) for b in buckets]
    degree = choose_degree(len(series))

    try:
        coefficients = fit(series, degree)
        future = project(series, period.future_points(), degree)
    except RegressionError as exc:
        log.warning("Skipping revenue projections: %s", exc)
        return RevenueForecast(period=period, trends=_trends(buckets))

    last = buckets[-1]
    projections: List[MonthProjection] = []
    for i, point in enumerate(future, start=1):
        year, month = add_months(last.year, last.month, i)
        projections.append(MonthProjection(
            label=MONTH_NAMES[month - 1],
            year=year,
            month=month,
            x=int(point.x),
            projected=int(round(point.y)),
        ))

    r2 = r_squared(series, coefficients)
    log.info(
        "Generated %d projections with degree %d, R²=%s",
        len(projections), len(coefficients) - 1, "n/a" if r2 is None else f"{r2:.3f}",
    )
    return RevenueForecast(
        period=period,
        trends=_trends(buckets, coefficients),
        projections=projections,
        r_squared=r2,
        degree=len(coefficients) - 1,
        coefficients=coefficients,
    )
