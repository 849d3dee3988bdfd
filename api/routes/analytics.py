"""
Revenue analytics routes: monthly trends with regression projections, and the revenue timeline used for narration.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import RevenueRequest
from api.responses import RevenueAnalytics, RevenueTimeline
from api.routes.exception import handle_exceptions
from services.forecast_service import revenue_analytics, revenue_timeline

router = APIRouter(tags=["Analytics"])


@router.post("/analytics/revenue", summary="Monthly revenue trends with projected months")
@handle_exceptions
async def revenue(req: RevenueRequest) -> RevenueAnalytics:
    return revenue_analytics(req)


@router.post("/analytics/revenue/timeline", summary="Revenue timeline with future placeholders")
@handle_exceptions
async def timeline(req: RevenueRequest) -> RevenueTimeline:
    return revenue_timeline(req)
