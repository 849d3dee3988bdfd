"""
Test cases for polynomial regression in the forecast engine, including exact-fit recovery, degree clamping, non-negative prediction, R-squared edge cases, and projection contiguity.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from config import settings
from engine.errors import (
    EmptySeriesError,
    InvalidDegreeError,
    InvalidSeriesError,
    RegressionError,
    SingularSystemError,
)
from engine.regression import (
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


def test_exact_quadratic_is_recovered():
    series = series_from_pairs([(0, 1), (1, 4), (2, 9), (3, 16)])
    coeffs = fit(series, 2)
    assert coeffs == pytest.approx([1.0, 2.0, 1.0], abs=1e-6)
    assert r_squared(series, coeffs) == pytest.approx(1.0, abs=1e-9)


def test_exact_line_and_cubic_are_recovered():
    line = series_from_pairs([(0, 3), (1, 5), (2, 7)])
    assert fit(line, 1) == pytest.approx([3.0, 2.0], abs=1e-6)

    def cubic(x):
        return 1 - x + 0.5 * x ** 2 + 0.25 * x ** 3

    series = [Sample(x=float(x), y=cubic(x)) for x in range(6)]
    coeffs = fit(series, 3)
    assert coeffs == pytest.approx([1.0, -1.0, 0.5, 0.25], abs=1e-6)
    assert r_squared(series, coeffs) == pytest.approx(1.0, abs=1e-9)


def test_fit_matches_numpy_least_squares(revenue_series):
    xs = [s.x for s in revenue_series]
    ys = [s.y for s in revenue_series]
    expected = np.polyfit(xs, ys, 2)[::-1]
    assert fit(revenue_series, 2) == pytest.approx(list(expected), rel=1e-6)


def test_fit_returns_degree_plus_one_coefficients(revenue_series):
    for degree in (1, 2, 3):
        assert len(fit(revenue_series, degree)) == degree + 1


def test_fit_is_deterministic(revenue_series):
    assert fit(revenue_series, 3) == fit(revenue_series, 3)


def test_fit_uses_default_degree(monkeypatch, revenue_series):
    monkeypatch.setattr(settings, "regression_default_degree", 1)
    assert len(fit(revenue_series)) == 2


def test_degree_is_clamped_to_available_samples():
    series = series_from_pairs([(0, 10), (1, 20)])
    coeffs = fit(series, 3)
    assert len(coeffs) == 2
    assert coeffs == pytest.approx([10.0, 10.0], abs=1e-9)

    three = series_from_pairs([(0, 1), (1, 2), (2, 5)])
    assert len(fit(three, 3)) == 3


def test_single_sample_fits_a_constant():
    series = [Sample(x=4.0, y=7.0)]
    coeffs = fit(series, 2)
    assert coeffs == pytest.approx([7.0])
    assert predict(10, coeffs) == pytest.approx(7.0)


def test_effective_degree():
    assert effective_degree(6, 2) == 2
    assert effective_degree(2, 3) == 1
    assert effective_degree(3, 3) == 2
    assert effective_degree(1, 3) == 0
    assert effective_degree(1, 0) == 0
    with pytest.raises(InvalidDegreeError):
        effective_degree(5, -1)


def test_negative_degree_is_rejected(revenue_series):
    with pytest.raises(ValueError):
        fit(revenue_series, -2)


def test_identical_x_values_are_singular():
    with pytest.raises(SingularSystemError):
        fit(series_from_pairs([(2, 10), (2, 20), (2, 30)]), 2)
    with pytest.raises(SingularSystemError):
        fit(series_from_pairs([(1, 5), (1, 9)]), 1)


def test_empty_and_non_finite_series_are_rejected():
    with pytest.raises(EmptySeriesError):
        fit([], 2)
    with pytest.raises(InvalidSeriesError):
        fit([Sample(x=0.0, y=1.0), Sample(x=1.0, y=float("nan"))], 1)
    with pytest.raises(RegressionError):
        fit([Sample(x=float("inf"), y=1.0)], 1)


def test_evaluate_is_raw_polynomial():
    assert evaluate(3, [100, -50, 5]) == pytest.approx(-5.0)
    assert evaluate(2, [1, 2, 1]) == pytest.approx(9.0)
    assert evaluate(5, []) == 0.0


def test_predict_clamps_negative_values():
    assert predict(3, [100, -50, 5]) == 0.0
    assert predict(2, [1, 2, 1]) == pytest.approx(9.0)


def test_predict_is_never_negative():
    coefficient_sets = [[100, -50, 5], [-1.0], [0.0, -3.0], [5, 2, -1, 0.1], [-10, 0, 0, -1]]
    for coeffs in coefficient_sets:
        for x in np.linspace(-10, 20, 61):
            assert predict(float(x), coeffs) >= 0.0


def test_r_squared_zero_variance():
    flat = series_from_pairs([(0, 5), (1, 5), (2, 5), (3, 5)])
    assert r_squared(flat, fit(flat, 2)) == 1.0
    assert r_squared(flat, [1.0]) is None

    zeros = series_from_pairs([(0, 0), (1, 0), (2, 0)])
    assert r_squared(zeros, [0.0]) == 1.0


def test_r_squared_passes_negative_values_through():
    series = series_from_pairs([(0, 0), (1, 10), (2, 0)])
    assert r_squared(series, [20.0]) == pytest.approx(1.0 - 900.0 / (200.0 / 3.0))
    assert r_squared(series, [20.0]) < 0


def test_r_squared_rejects_empty_series():
    with pytest.raises(EmptySeriesError):
        r_squared([], [1.0])


def test_projection_is_contiguous(revenue_series):
    projections = project(revenue_series, 3, 2)
    assert [p.x for p in projections] == [6, 7, 8]
    assert all(p.y >= 0 for p in projections)

    tail = series_from_pairs([(3, 10), (4, 12), (5, 15)])
    assert [p.x for p in project(tail, 2, 2)] == [6, 7]


def test_projection_uses_predict(revenue_series):
    coeffs = fit(revenue_series, 2)
    for p in project(revenue_series, 4, 2):
        assert p.y == predict(p.x, coeffs)


def test_projection_clamps_falling_revenue():
    falling = series_from_pairs([(0, 900), (1, 600), (2, 300)])
    projections = project(falling, 3, 1)
    assert [p.y for p in projections] == pytest.approx([0.0, 0.0, 0.0], abs=1e-6)


def test_projection_edge_cases(revenue_series):
    assert project(revenue_series, 0, 2) == []
    with pytest.raises(ValueError):
        project(revenue_series, -1, 2)
    with pytest.raises(EmptySeriesError):
        project([], 3, 2)


def test_end_to_end_revenue_scenario(revenue_series):
    coeffs = fit(revenue_series, 2)
    assert len(coeffs) == 3
    r2 = r_squared(revenue_series, coeffs)
    assert 0.0 <= r2 <= 1.0

    projections = project(revenue_series, 3, 2)
    assert len(projections) == 3
    assert [p.x for p in projections] == [6, 7, 8]
    assert all(p.y >= 0 for p in projections)


def test_summarize(revenue_series):
    summary = summarize(revenue_series, 2, 3)
    assert summary.requested_degree == 2
    assert summary.degree == 2
    assert summary.coefficients == fit(revenue_series, 2)
    assert [s.x for s in summary.fitted] == [s.x for s in revenue_series]
    assert summary.projections == project(revenue_series, 3, 2)
    assert summary.r_squared == r_squared(revenue_series, summary.coefficients)


def test_summarize_reports_clamped_degree():
    summary = summarize(series_from_pairs([(0, 10), (1, 20)]), 3, 1)
    assert summary.requested_degree == 3
    assert summary.degree == 1
    assert [p.x for p in summary.projections] == [2.0]
    assert summary.projections[0].y == pytest.approx(30.0)
    with pytest.raises(ValueError):
        summarize(series_from_pairs([(0, 10), (1, 20)]), 1, -1)
