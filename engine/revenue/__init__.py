"""
Revenue analytics built on the regression engine: monthly aggregation of paid invoices, month-labelled projections with fit quality, and the revenue timeline consumed by narration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.revenue.buckets import (
    Invoice,
    MonthBucket,
    monthly_totals,
    paid_invoices,
    period_window,
    trim_leading_empty,
)
from engine.revenue.forecast import MonthProjection, RevenueForecast, TrendPoint, choose_degree, forecast_revenue
from engine.revenue.timeline import TimelineEntry, build_timeline

__all__ = [
    "Invoice",
    "MonthBucket",
    "monthly_totals",
    "paid_invoices",
    "period_window",
    "trim_leading_empty",
    "MonthProjection",
    "RevenueForecast",
    "TrendPoint",
    "choose_degree",
    "forecast_revenue",
    "TimelineEntry",
    "build_timeline",
]
