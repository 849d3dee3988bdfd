"""
Forecast service that turns API requests into engine calls and engine results into response models.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from api.requests import RegressionRequest, RevenueRequest
from api.responses import (
    ProjectionOut,
    RegressionResponse,
    RevenueAnalytics,
    RevenueTimeline,
    SampleOut,
    TimelineOut,
    TrendOut,
)
from engine.regression import Sample, summarize
from engine.revenue import (
    Invoice,
    build_timeline,
    forecast_revenue,
    monthly_totals,
    paid_invoices,
    period_window,
    trim_leading_empty,
)

log = logging.getLogger(__name__)


def _invoices(req: RevenueRequest) -> List[Invoice]:
    return [
        Invoice(amount=inv.amount, status=inv.status, paid_date=inv.paid_date)
        for inv in req.invoices
    ]


def regression_report(req: RegressionRequest) -> RegressionResponse:
    series = [Sample(x=p.x, y=p.y) for p in req.series]
    summary = summarize(series, req.degree, req.count)
    return RegressionResponse(
        requested_degree=summary.requested_degree,
        degree=summary.degree,
        coefficients=summary.coefficients,
        r_squared=summary.r_squared,
        fitted=[SampleOut(x=s.x, y=s.y) for s in summary.fitted],
        projections=[SampleOut(x=s.x, y=s.y) for s in summary.projections],
    )


def revenue_analytics(req: RevenueRequest) -> RevenueAnalytics:
    now = req.now or datetime.now()
    start, months = period_window(req.period, now)
    paid = paid_invoices(_invoices(req), start)
    buckets = trim_leading_empty(monthly_totals(paid, start, months))
    log.info(
        "Analytics: %d paid invoices since %s across %d month(s)",
        len(paid), start.isoformat(), len(buckets),
    )

    result = forecast_revenue(buckets, req.period)
    return RevenueAnalytics(
        period=result.period,
        trends=[
            TrendOut(month=t.label, year=t.year, index=t.index, actual=t.actual, projected=t.projected)
            for t in result.trends
        ],
        projections=[
            ProjectionOut(month=p.label, year=p.year, x=p.x, projected=p.projected)
            for p in result.projections
        ],
        r_squared=result.r_squared,
        degree=result.degree,
        invoice_count=len(paid),
    )


def revenue_timeline(req: RevenueRequest) -> RevenueTimeline:
    now = req.now or datetime.now()
    entries = build_timeline(_invoices(req), req.period, now)
    log.info(
        "Timeline: %d months, %d with actual data",
        len(entries), sum(1 for e in entries if e.is_past),
    )
    return RevenueTimeline(
        period=req.period,
        months=[
            TimelineOut(month=e.label, year=e.year, amount=e.amount, is_past=e.is_past)
            for e in entries
        ],
    )
