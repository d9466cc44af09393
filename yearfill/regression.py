"""Least-squares curve fitting used to estimate missing years."""

from __future__ import annotations

import math
from typing import Sequence

PIVOT_EPSILON = 1e-10


class SingularMatrixError(ArithmeticError):
    """Raised when a linear system has no unique solution."""


def gauss_jordan(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> list[float]:
    """Solve ``matrix @ x = rhs`` by Gauss-Jordan elimination with partial pivoting."""
    n = len(matrix)
    if len(rhs) != n or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and match the right-hand side")
    augmented = [[float(v) for v in row] + [float(b)] for row, b in zip(matrix, rhs)]

    for col in range(n):
        pivot_row = max(range(col, n), key=lambda r: abs(augmented[r][col]))
        augmented[col], augmented[pivot_row] = augmented[pivot_row], augmented[col]

        pivot = augmented[col][col]
        if abs(pivot) < PIVOT_EPSILON:
            raise SingularMatrixError("singular matrix, the system cannot be solved")
        augmented[col] = [value / pivot for value in augmented[col]]

        pivot_values = augmented[col]
        for r, row in enumerate(augmented):
            if r != col:
                factor = row[col]
                augmented[r] = [v - factor * p for v, p in zip(row, pivot_values)]

    return [row[-1] for row in augmented]


def polynomial_regression(
    x: Sequence[float], y: Sequence[float], degree: int
) -> list[float]:
    """Fit ``y = c0 + c1*x + ... + cd*x^d``; return the coefficients lowest first."""
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    if degree < 0:
        raise ValueError("degree must not be negative")
    power_sums = [sum(xi ** k for xi in x) for k in range(2 * degree + 1)]
    matrix = [[power_sums[i + j] for j in range(degree + 1)] for i in range(degree + 1)]
    rhs = [sum(yi * xi ** i for xi, yi in zip(x, y)) for i in range(degree + 1)]
    return gauss_jordan(matrix, rhs)


def evaluate_polynomial(x: float, coef: Sequence[float]) -> float:
    """Evaluate a polynomial whose coefficients are given lowest power first."""
    return sum(c * x ** i for i, c in enumerate(coef))


def r_squared(x: Sequence[float], y: Sequence[float], coef: Sequence[float]) -> float:
    """Coefficient of determination of a polynomial fit."""
    if not y:
        raise ValueError("no data points")
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    mean_y = sum(y) / len(y)
    ss_total = sum((yi - mean_y) ** 2 for yi in y)
    ss_residual = sum((yi - evaluate_polynomial(xi, coef)) ** 2 for xi, yi in zip(x, y))
    if ss_total == 0:
        raise ValueError("y values are constant, R squared is undefined")
    return 1 - ss_residual / ss_total


def linear_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Fit ``y = a + b*x``; return ``(a, b)``."""
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    n = len(x)
    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(xi * yi for xi, yi in zip(x, y))
    sum_x2 = sum(xi * xi for xi in x)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise ValueError("at least two distinct x values are required")
    b = (n * sum_xy - sum_x * sum_y) / denominator
    a = (sum_y - b * sum_x) / n
    return a, b


def exponential_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Fit ``y = a * e^(b*x)`` over the points with positive y; return ``(a, b)``."""
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    points = [(xi, math.log(yi)) for xi, yi in zip(x, y) if yi > 0]
    ln_a, b = linear_regression([p[0] for p in points], [p[1] for p in points])
    return math.exp(ln_a), b


def normalize_years(years: Sequence[int], base_year: int) -> list[float]:
    """Shift years so that ``base_year`` becomes zero."""
    return [float(year - base_year) for year in years]