# yearfill

Fill the gaps in a yearly series of internet-user percentages and population
counts by fitting curves to the years that are present and evaluating them at
the years that are missing.

## Data format

The input is a CSV file with a header line and three columns per row:

```
Year,Percentage_Internet_User,Population
2000,1.9,211513823
...
```

`yearfill.csvdata.read_csv(path)` skips the header line and blank lines and
reads at most 100 data rows into `DataRow(year, percentage, population)`
objects. Each field is read from its leading number; a field without one, or a
missing field, counts as zero. A file that cannot be opened raises `OSError`.

`yearfill.csvdata.write_csv(path, rows)` writes the same header followed by one
line per row, with percentages to six decimals and populations rounded to
whole numbers.

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the Python standard library
(Python 3.10 or newer).

## Command line

```
yearfill [-i INPUT] [-o OUTPUT]
```

- `-i`, `--input` – the CSV file to read (default `Data Tugas Pemrograman A.csv`);
- `-o`, `--output` – the CSV file to write (default
  `Data_Lengkap_Hasil_Polinomial.csv`).

The command fits a cubic polynomial to the internet-user percentages of the
years from 2000 onwards that have a positive percentage, and a quadratic
polynomial to the population of all years, with years measured from 2000. It
then prints, in Indonesian:

- both fitted models together with their coefficient of determination (R²);
- predictions for the missing years 2005, 2006, 2015 and 2016;
- a long-range estimate of the population in 2030, and of the internet-user
  percentage, population and number of internet users in 2035;
- a reminder that extrapolating far beyond the fitted range can be badly off.

The existing rows plus the predicted ones are written, sorted by year, to the
output file. Predicted percentages are clamped to the range 0–100 and
predicted populations to zero or more.

The exit status is 1 when no data could be read or when the fit fails on a
singular system (too few distinct years), and 0 otherwise. A failure to write
the output file is reported but does not stop the rest of the report.

## Library use

```python
from yearfill.csvdata import read_csv, write_csv
from yearfill.imputation import PolynomialModels, fill_missing

rows = read_csv("input.csv")
models = PolynomialModels.fit(rows, 2000, 3, 2)
completed = fill_missing(rows, [2005, 2006, 2015, 2016], models)
write_csv("completed.csv", completed)
```

`yearfill.imputation` provides:

- `PolynomialModels.fit(rows, base_year, degree_internet, degree_population)`
  – polynomial fits as used by the command (defaults 2000, 3 and 2). The
  result holds `coef_internet`, `coef_population`, `r_squared_internet` and
  `r_squared_population`; an R² that is undefined because the values are
  constant is `nan`. `predict(year)` returns a clamped `DataRow` and
  `forecast_users(year)` the estimated number of internet users.
- `ExponentialModels.fit(rows, base_year)` – an exponential curve
  `y = a · e^(b·x)` for the positive percentages and a straight line for the
  population. Its `predict(year)` applies no clamping.
- `fill_missing(rows, missing_years, model)` – returns the rows plus one
  prediction per missing year, sorted by year. Without a model, polynomial
  models are fitted to the rows; the missing years default to 2005, 2006,
  2015 and 2016.

Fitting an empty set of rows raises `ValueError`.

The numerical building blocks live in `yearfill.regression`:

- `polynomial_regression(x, y, degree)` – least-squares polynomial fit via the
  normal equations, returning coefficients from the constant term upwards;
- `evaluate_polynomial(x, coef)` and `r_squared(x, y, coef)`;
- `linear_regression(x, y)` and `exponential_regression(x, y)`, each returning
  `(a, b)`;
- `gauss_jordan(matrix, rhs)` – solves a linear system with partial pivoting
  and raises `SingularMatrixError` when a pivot vanishes;
- `normalize_years(years, base_year)` – shifts years so the fits stay
  numerically stable.

`yearfill.cli.format_polynomial(coef, base_year, precision)` renders a fitted
model in the form printed by the command, for example
`1.500000 + 2.000000 * (x - 2000)^1 - 0.250000 * (x - 2000)^2`.

## What it does not do

The command always uses the polynomial models; the exponential and linear
fits are available from Python only. The missing years, the forecast years
(2030 and 2035) and the polynomial degrees used by the command are fixed and
cannot be changed from the command line.

## Running the tests

```
pip install ".[test]"
pytest
```