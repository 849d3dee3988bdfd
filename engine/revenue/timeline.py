"""
Revenue timeline handed to the narration layer: a run of calendar months starting a few months before the reporting window, with paid totals for months that have begun and empty placeholders for months still to come.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from config import MONTH_NAMES, settings
from engine.enums import Period
from engine.revenue.buckets import Invoice, add_months, paid_invoices, period_window

_TIMELINE_MONTHS: Dict[Period, int] = {
    Period.week: 6,
    Period.month: 6,
    Period.quarter: 6,
    Period.year: 15,
    Period.trailing: 12,
}


@dataclass(frozen=True)
class TimelineEntry:
    label: str
    year: int
    month: int
    amount: Optional[float]
    is_past: bool


def build_timeline(invoices: Iterable[Invoice], period: Period, now: date | datetime) -> List[TimelineEntry]:
    today = now.date() if isinstance(now, datetime) else now
    start, _ = period_window(period, today)
    first_year, first_month = add_months(start.year, start.month, -settings.timeline_lead_months)

    totals: Dict[Tuple[int, int], float] = {}
    for inv in paid_invoices(invoices, date(first_year, first_month, 1)):
        key = (inv.paid_date.year, inv.paid_date.month)
        totals[key] = totals.get(key, 0.0) + inv.amount

    entries: List[TimelineEntry] = []
    for i in range(_TIMELINE_MONTHS[period]):
        year, month = add_months(first_year, first_month, i)
        is_past = date(year, month, 1) <= today
        entries.append(TimelineEntry(
            label=f"{MONTH_NAMES[month - 1]} {year}",
            year=year,
            month=month,
            amount=round(totals.get((year, month), 0.0), 2) if is_past else None,
            is_past=is_past,
        ))
    return entries
