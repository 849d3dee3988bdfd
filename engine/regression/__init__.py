"""
Polynomial regression engine: least-squares fitting via normal equations and partial-pivot Gaussian elimination, non-negative prediction, R-squared fit quality, and forward projection of integer-indexed series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.regression.polynomial import (
    RegressionSummary,
    Sample,
    effective_degree,
    evaluate,
    fit,
    predict,
    project,
    r_squared,
    series_from_pairs,
    summarize,
)

__all__ = [
    "RegressionSummary",
    "Sample",
    "effective_degree",
    "evaluate",
    "fit",
    "predict",
    "project",
    "r_squared",
    "series_from_pairs",
    "summarize",
]
