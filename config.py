"""
Constants and configuration for the Revenue Forecast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Tuple

from pydantic_settings import BaseSettings


MONTH_NAMES: List[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# built-in series served by the regression sample endpoint
SAMPLE_SERIES: List[Tuple[float, float]] = [
    (0, 2800.0),
    (1, 3200.0),
    (2, 2950.0),
    (3, 3600.0),
    (4, 3400.0),
    (5, 3800.0),
]
SAMPLE_DEGREE = 2
SAMPLE_COUNT = 3

FORECAST_HOST = os.getenv("FORECAST_HOST", "0.0.0.0")
FORECAST_PORT = int(os.getenv("FORECAST_PORT", "4323"))
FORECAST_LOG_LEVEL = os.getenv("FORECAST_LOG_LEVEL", "INFO").upper()


class Settings(BaseSettings):
    host: str = FORECAST_HOST
    port: int = FORECAST_PORT
    log_level: str = FORECAST_LOG_LEVEL

    # regression engine
    regression_default_degree: int = 2
    # upper bound accepted from API callers; the engine itself has no cap
    regression_max_degree: int = 6
    regression_max_count: int = 36
    # a pivot at or below this fraction of the largest entry counts as zero
    regression_singular_tolerance: float = 1e-12
    # residual sum of squares treated as zero, relative to sum(y^2)
    regression_zero_variance_tolerance: float = 1e-12

    # revenue analytics
    revenue_min_points: int = 3
    revenue_cubic_min_points: int = 5
    revenue_default_future_points: int = 3
    revenue_week_future_points: int = 4

    # narration timeline
    timeline_lead_months: int = 3

    model_config = {
        "env_prefix": "FORECAST_",
        "extra": "ignore",
    }


settings = Settings()
