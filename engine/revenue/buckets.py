"""
Monthly revenue aggregation for forecasting: reporting period windows, paid invoice filtering, per-calendar-month totals, and trimming of the empty months that precede the first paid invoice so the regression starts at the first real data point.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from config import MONTH_NAMES
from engine.enums import InvoiceStatus, Period


@dataclass(frozen=True)
class Invoice:
    amount: float
    status: InvoiceStatus
    paid_date: Optional[datetime] = None


@dataclass(frozen=True)
class MonthBucket:
    year: int
    month: int
    actual: int
    index: int

    @property
    def label(self) -> str:
        return MONTH_NAMES[self.month - 1]


def add_months(year: int, month: int, delta: int) -> Tuple[int, int]:
    total = year * 12 + (month - 1) + delta
    return total // 12, total % 12 + 1


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def period_window(period: Period, now: date | datetime) -> Tuple[date, int]:
    """First day covered by ``period`` and the number of calendar months it spans."""
    today = _as_date(now)
    if period is Period.week:
        start = today - timedelta(days=28)
        # 28 days can straddle a month boundary
        spanned = (today.year - start.year) * 12 + today.month - start.month + 1
        return start, spanned
    if period is Period.month:
        return today.replace(day=1), 1
    if period is Period.quarter:
        first_month = (today.month - 1) // 3 * 3 + 1
        return date(today.year, first_month, 1), 3
    if period is Period.year:
        return date(today.year, 1, 1), 12
    year, month = add_months(today.year, today.month, -5)
    return date(year, month, 1), 6


def paid_invoices(invoices: Iterable[Invoice], since: date) -> List[Invoice]:
    rows = [
        inv for inv in invoices
        if inv.status == InvoiceStatus.paid
        and inv.paid_date is not None
        and _as_date(inv.paid_date) >= since
    ]
    return sorted(rows, key=lambda inv: _as_date(inv.paid_date))


def monthly_totals(invoices: Iterable[Invoice], start: date, months: int) -> List[MonthBucket]:
    keys = [add_months(start.year, start.month, i) for i in range(months)]
    totals: Dict[Tuple[int, int], float] = {key: 0.0 for key in keys}

    for inv in invoices:
        if inv.paid_date is None:
            continue
        key = (inv.paid_date.year, inv.paid_date.month)
        if key in totals:
            totals[key] += inv.amount

    return [
        MonthBucket(year=year, month=month, actual=int(round(totals[(year, month)])), index=i)
        for i, (year, month) in enumerate(keys)
    ]


def trim_leading_empty(buckets: List[MonthBucket]) -> List[MonthBucket]:
    first = next((i for i, b in enumerate(buckets) if b.actual > 0), None)
    if first is None:
        return list(buckets)
    return [replace(b, index=i) for i, b in enumerate(buckets[first:])]
