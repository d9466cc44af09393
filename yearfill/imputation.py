"""Fitting trend models to yearly data and filling in the missing years."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from yearfill.csvdata import DataRow
from yearfill.regression import (
    evaluate_polynomial,
    exponential_regression,
    linear_regression,
    normalize_years,
    polynomial_regression,
    r_squared,
)

BASE_YEAR = 2000
INTERNET_FIRST_YEAR = 2000
MISSING_YEARS = (2005, 2006, 2015, 2016)
DEGREE_INTERNET = 3
DEGREE_POPULATION = 2


class Model(Protocol):
    """Anything that can estimate a row for a given year."""

    def predict(self, year: int) -> DataRow: ...


def _internet_points(rows: Sequence[DataRow]) -> tuple[list[int], list[float]]:
    """Years from ``INTERNET_FIRST_YEAR`` on that have a positive percentage."""
    selected = [
        row for row in rows if row.year >= INTERNET_FIRST_YEAR and row.percentage > 0
    ]
    return [row.year for row in selected], [row.percentage for row in selected]


def _sorted_rows(rows: Iterable[DataRow]) -> list[DataRow]:
    ordered = sorted(rows, key=lambda row: row.year)
    if not ordered:
        raise ValueError("no data rows to fit")
    return ordered


def _safe_r_squared(x: Sequence[float], y: Sequence[float], coef: Sequence[float]) -> float:
    try:
        return r_squared(x, y, coef)
    except ValueError:
        return math.nan


@dataclass(frozen=True)
class PolynomialModels:
    """Polynomial trends for internet percentage and population."""

    base_year: int
    coef_internet: tuple[float, ...]
    coef_population: tuple[float, ...]
    r_squared_internet: float
    r_squared_population: float

    @classmethod
    def fit(
        cls,
        rows: Iterable[DataRow],
        base_year: int = BASE_YEAR,
        degree_internet: int = DEGREE_INTERNET,
        degree_population: int = DEGREE_POPULATION,
    ) -> "PolynomialModels":
        """Fit both polynomials; raises ``SingularMatrixError`` on too little data."""
        ordered = _sorted_rows(rows)

        internet_years, percentages = _internet_points(ordered)
        x_internet = normalize_years(internet_years, base_year)
        coef_internet = polynomial_regression(x_internet, percentages, degree_internet)

        x_population = normalize_years([row.year for row in ordered], base_year)
        populations = [row.population for row in ordered]
        coef_population = polynomial_regression(
            x_population, populations, degree_population
        )

        return cls(
            base_year=base_year,
            coef_internet=tuple(coef_internet),
            coef_population=tuple(coef_population),
            r_squared_internet=_safe_r_squared(x_internet, percentages, coef_internet),
            r_squared_population=_safe_r_squared(
                x_population, populations, coef_population
            ),
        )

    def predict(self, year: int) -> DataRow:
        """Estimate a row, with percentage kept in 0..100 and population non-negative."""
        x = float(year - self.base_year)
        percentage = evaluate_polynomial(x, self.coef_internet)
        percentage = min(max(percentage, 0.0), 100.0)
        population = max(evaluate_polynomial(x, self.coef_population), 0.0)
        return DataRow(year, percentage, population)

    def forecast_users(self, year: int) -> float:
        """Estimated number of internet users in ``year``."""
        row = self.predict(year)
        return row.percentage / 100.0 * row.population


@dataclass(frozen=True)
class ExponentialModels:
    """Exponential trend for internet percentage, linear trend for population."""

    base_year: int
    a_internet: float
    b_internet: float
    a_population: float
    b_population: float

    @classmethod
    def fit(cls, rows: Iterable[DataRow], base_year: int = BASE_YEAR) -> "ExponentialModels":
        """Fit ``a*e^(b*x)`` to percentages and ``a + b*x`` to population."""
        ordered = _sorted_rows(rows)

        internet_years, percentages = _internet_points(ordered)
        a_internet, b_internet = exponential_regression(
            normalize_years(internet_years, base_year), percentages
        )
        a_population, b_population = linear_regression(
            normalize_years([row.year for row in ordered], base_year),
            [row.population for row in ordered],
        )
        return cls(base_year, a_internet, b_internet, a_population, b_population)

    def predict(self, year: int) -> DataRow:
        """Estimate a row for ``year`` without any clamping."""
        x = float(year - self.base_year)
        percentage = self.a_internet * math.exp(self.b_internet * x)
        population = self.a_population + self.b_population * x
        return DataRow(year, percentage, population)


def fill_missing(
    rows: Iterable[DataRow],
    missing_years: Iterable[int] = MISSING_YEARS,
    model: Model | None = None,
) -> list[DataRow]:
    """Return the rows plus a prediction for each missing year, sorted by year.

    When no model is given, polynomial models are fitted to ``rows``.
    """
    existing = list(rows)
    if model is None:
        model = PolynomialModels.fit(existing)
    predicted = [model.predict(year) for year in missing_years]
    return sorted(existing + predicted, key=lambda row: row.year)