"""
Enumerations for reporting periods and invoice states

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Period(str, Enum):
    week = "week"
    month = "month"
    quarter = "quarter"
    year = "year"
    # last six calendar months
    trailing = "trailing"

    def future_points(self) -> int:
        # read at call time so the counts stay tunable from settings
        from config import settings

        if self is Period.week:
            return settings.revenue_week_future_points
        return settings.revenue_default_future_points


class InvoiceStatus(str, Enum):
    draft = "DRAFT"
    pending = "PENDING"
    sent = "SENT"
    paid = "PAID"
