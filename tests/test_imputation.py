import math

import pytest

from yearfill.csvdata import DataRow
from yearfill.imputation import (
    MISSING_YEARS,
    ExponentialModels,
    PolynomialModels,
    fill_missing,
)
from yearfill.regression import SingularMatrixError

KNOWN_YEARS = [y for y in range(2000, 2021) if y not in (2005, 2006, 2015, 2016)]


def _pct(t):
    return 1.0 + 0.5 * t + 0.1 * t**2 + 0.01 * t**3


def _pop(t):
    return 1000.0 + 20.0 * t + 0.5 * t**2


@pytest.fixture
def poly_rows():
    # deliberately unsorted
    rows = [DataRow(y, _pct(y - 2000), _pop(y - 2000)) for y in KNOWN_YEARS]
    return list(reversed(rows))


def test_polynomial_fit_recovers_coefficients(poly_rows):
    model = PolynomialModels.fit(poly_rows)
    assert model.coef_internet == pytest.approx([1.0, 0.5, 0.1, 0.01], abs=1e-6)
    assert model.coef_population == pytest.approx([1000.0, 20.0, 0.5], abs=1e-6)
    assert model.r_squared_internet == pytest.approx(1.0)
    assert model.r_squared_population == pytest.approx(1.0)


def test_polynomial_predict_interpolates(poly_rows):
    model = PolynomialModels.fit(poly_rows)
    row = model.predict(2015)
    assert row.year == 2015
    assert row.percentage == pytest.approx(_pct(15), rel=1e-6)
    assert row.population == pytest.approx(_pop(15), rel=1e-6)


def test_internet_fit_ignores_early_and_zero_rows(poly_rows):
    extra = [DataRow(1990, 50.0, _pop(-10)), DataRow(2021, 0.0, _pop(21))]
    base = PolynomialModels.fit(poly_rows)
    model = PolynomialModels.fit(poly_rows + extra)
    assert model.coef_internet == pytest.approx(base.coef_internet, abs=1e-6)
    assert model.coef_population == pytest.approx([1000.0, 20.0, 0.5], abs=1e-6)


def test_polynomial_predict_clamps_percentage_and_population():
    rows = [DataRow(y, 10.0 * (y - 2000) + 1.0, 1000.0 - 100.0 * (y - 2000)) for y in KNOWN_YEARS]
    model = PolynomialModels.fit(rows)
    far = model.predict(2035)
    assert far.percentage == 100.0
    assert far.population == 0.0


def test_forecast_users_is_share_of_population(poly_rows):
    model = PolynomialModels.fit(poly_rows)
    row = model.predict(2012)
    assert model.forecast_users(2012) == pytest.approx(row.percentage / 100.0 * row.population)


def test_forecast_users_zero_when_population_clamped():
    rows = [DataRow(y, 10.0 * (y - 2000) + 1.0, 1000.0 - 100.0 * (y - 2000)) for y in KNOWN_YEARS]
    model = PolynomialModels.fit(rows)
    assert model.forecast_users(2035) == 0.0


def test_polynomial_fit_with_custom_base_year(poly_rows):
    model = PolynomialModels.fit(poly_rows, base_year=2010, degree_internet=3, degree_population=2)
    assert model.base_year == 2010
    assert model.predict(2006).population == pytest.approx(_pop(6), rel=1e-6)


def test_polynomial_fit_too_few_points_is_singular():
    with pytest.raises(SingularMatrixError):
        PolynomialModels.fit([DataRow(2005, 10.0, 1000.0)])


def test_fit_without_rows_raises():
    with pytest.raises(ValueError):
        PolynomialModels.fit([])
    with pytest.raises(ValueError):
        ExponentialModels.fit([])


def test_exponential_fit_recovers_parameters():
    rows = [DataRow(y, 2.0 * math.exp(0.1 * (y - 2000)), 100.0 + 5.0 * (y - 2000)) for y in KNOWN_YEARS]
    model = ExponentialModels.fit(rows)
    assert model.a_internet == pytest.approx(2.0)
    assert model.b_internet == pytest.approx(0.1)
    assert model.a_population == pytest.approx(100.0)
    assert model.b_population == pytest.approx(5.0)
    row = model.predict(2016)
    assert row.percentage == pytest.approx(2.0 * math.exp(1.6))
    assert row.population == pytest.approx(180.0)


def test_exponential_predict_is_not_clamped():
    rows = [DataRow(y, 2.0 * math.exp(0.1 * (y - 2000)), 100.0 - 10.0 * (y - 2000)) for y in KNOWN_YEARS]
    model = ExponentialModels.fit(rows)
    assert model.predict(2030).population < 0


def test_fill_missing_adds_sorted_predictions(poly_rows):
    original = list(poly_rows)
    filled = fill_missing(poly_rows, MISSING_YEARS)
    years = [row.year for row in filled]
    assert years == sorted(years)
    assert years == list(range(2000, 2021))
    assert poly_rows == original
    for row in original:
        assert row in filled


def test_fill_missing_uses_given_model(poly_rows):
    model = ExponentialModels.fit(poly_rows)
    filled = fill_missing(poly_rows, [2005], model)
    added = [row for row in filled if row.year == 2005]
    assert added == [model.predict(2005)]
    assert len(filled) == len(poly_rows) + 1