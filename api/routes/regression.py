"""
Regression routes exposing the polynomial fit, fit quality and projections over a caller-supplied series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import RegressionRequest, SamplePoint
from api.responses import RegressionResponse
from api.routes.exception import handle_exceptions
from config import SAMPLE_COUNT, SAMPLE_DEGREE, SAMPLE_SERIES
from services.forecast_service import regression_report

router = APIRouter(tags=["Regression"])


@router.post("/regression/fit", summary="Polynomial fit, R² and projections for a series")
@handle_exceptions
async def regression_fit(req: RegressionRequest) -> RegressionResponse:
    return regression_report(req)


@router.get("/regression/sample", summary="Run the engine on the built-in sample series")
@handle_exceptions
async def regression_sample() -> RegressionResponse:
    req = RegressionRequest(
        series=[SamplePoint(x=x, y=y) for x, y in SAMPLE_SERIES],
        degree=SAMPLE_DEGREE,
        count=SAMPLE_COUNT,
    )
    return regression_report(req)
