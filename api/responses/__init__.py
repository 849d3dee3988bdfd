"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from engine.enums import Period


class SampleOut(BaseModel):

    x: float
    y: float


class RegressionResponse(BaseModel):

    requested_degree: int
    degree: int
    coefficients: List[float]
    r_squared: Optional[float] = None
    fitted: List[SampleOut] = Field(default_factory=list)
    projections: List[SampleOut] = Field(default_factory=list)


class TrendOut(BaseModel):

    month: str
    year: int
    index: int
    actual: int
    projected: Optional[int] = None


class ProjectionOut(BaseModel):

    month: str
    year: int
    x: int
    projected: int


class RevenueAnalytics(BaseModel):

    period: Period
    trends: List[TrendOut] = Field(default_factory=list)
    projections: List[ProjectionOut] = Field(default_factory=list)
    r_squared: Optional[float] = None
    degree: Optional[int] = None
    invoice_count: int = 0


class TimelineOut(BaseModel):

    month: str
    year: int
    amount: Optional[float] = None
    is_past: bool


class RevenueTimeline(BaseModel):

    period: Period
    months: List[TimelineOut] = Field(default_factory=list)
