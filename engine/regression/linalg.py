"""
Linear algebra helpers for least-squares polynomial fitting: design matrix construction, normal equation assembly, and a Gaussian elimination solver with partial pivoting that refuses singular systems instead of dividing by a zero pivot.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from config import settings
from engine.errors import SingularSystemError


def design_matrix(xs: np.ndarray, degree: int) -> np.ndarray:
    # row i is [1, x_i, x_i^2, ..., x_i^degree]
    return np.vander(np.asarray(xs, dtype=float), degree + 1, increasing=True)


def normal_equations(x_mat: np.ndarray, ys: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    xt = x_mat.T
    return xt @ x_mat, xt @ np.asarray(ys, dtype=float)


def solve(a: np.ndarray, b: np.ndarray, tolerance: float | None = None) -> np.ndarray:
    """Solve ``a @ x = b`` by Gaussian elimination with partial pivoting.

    At every step the remaining row with the largest magnitude in the pivot
    column is swapped into place before eliminating below it. A pivot whose
    magnitude is at or below ``tolerance`` times the largest entry of ``a``
    means the system has no unique solution and raises
    :class:`SingularSystemError`.
    """
    if tolerance is None:
        tolerance = settings.regression_singular_tolerance

    a = np.asarray(a, dtype=float)
    n = a.shape[0]
    if a.shape != (n, n) or len(b) != n:
        raise ValueError(f"expected a square system, got {a.shape} and {len(b)} targets")
    if n == 0:
        return np.zeros(0)

    aug = np.column_stack((a.copy(), np.asarray(b, dtype=float)))
    scale = float(np.max(np.abs(aug[:, :n])))
    if not np.isfinite(scale) or scale == 0.0:
        raise SingularSystemError("fit not possible for given series: degenerate system")
    cutoff = tolerance * scale

    for col in range(n):
        pivot = col + int(np.argmax(np.abs(aug[col:, col])))
        if abs(aug[pivot, col]) <= cutoff:
            raise SingularSystemError(
                f"fit not possible for given series: zero pivot in column {col}"
            )
        if pivot != col:
            aug[[col, pivot]] = aug[[pivot, col]]
        for row in range(col + 1, n):
            factor = aug[row, col] / aug[col, col]
            aug[row, col:] -= factor * aug[col, col:]

    solution = np.zeros(n)
    for i in range(n - 1, -1, -1):
        solution[i] = (aug[i, n] - np.dot(aug[i, i + 1:n], solution[i + 1:])) / aug[i, i]

    if not np.all(np.isfinite(solution)):
        raise SingularSystemError("fit not possible for given series: non-finite solution")
    return solution
