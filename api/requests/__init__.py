from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from config import settings
from engine.enums import InvoiceStatus, Period


class SamplePoint(BaseModel):
    x: float
    y: float


class RegressionRequest(BaseModel):
    series: List[SamplePoint] = Field(default_factory=list)
    degree: int = Field(default=settings.regression_default_degree, ge=0, le=settings.regression_max_degree)
    count: int = Field(default=settings.revenue_default_future_points, ge=0, le=settings.regression_max_count)


class InvoiceRecord(BaseModel):
    amount: float = Field(ge=0.0)
    status: InvoiceStatus = InvoiceStatus.paid
    paid_date: Optional[datetime] = None


class RevenueRequest(BaseModel):
    invoices: List[InvoiceRecord] = Field(default_factory=list)
    period: Period = Period.month
    now: Optional[datetime] = None
