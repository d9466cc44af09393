"""Command line entry point: fill missing years and print long-range forecasts."""

from __future__ import annotations

import argparse
from typing import Sequence

from yearfill.csvdata import read_csv, write_csv
from yearfill.imputation import (
    BASE_YEAR,
    DEGREE_INTERNET,
    DEGREE_POPULATION,
    MISSING_YEARS,
    PolynomialModels,
    fill_missing,
)
from yearfill.regression import SingularMatrixError

DEFAULT_INPUT = "Data Tugas Pemrograman A.csv"
DEFAULT_OUTPUT = "Data_Lengkap_Hasil_Polinomial.csv"
POPULATION_FORECAST_YEAR = 2030
INTERNET_FORECAST_YEAR = 2035

_EXTRAPOLATION_NOTE = (
    "\nCATATAN: Prediksi jangka panjang (tahun 2030 dan 2035) perlu diinterpretasikan dengan hati-hati\n"
    "karena ekstrapolasi jauh di luar rentang data yang digunakan untuk menyusun model dapat\n"
    "menghasilkan kesalahan yang signifikan. Faktor-faktor seperti kebijakan pemerintah, pandemi,\n"
    "perkembangan teknologi, dan dinamika sosial-ekonomi dapat mengubah tren historis secara drastis."
)


def format_polynomial(coef: Sequence[float], base_year: int, precision: int) -> str:
    """Render coefficients as ``c0 + c1 * (x - base)^1 - c2 * (x - base)^2 ...``."""
    if not coef:
        return ""
    parts = [f"{coef[0]:.{precision}f}"]
    for power, value in enumerate(coef[1:], start=1):
        sign = "+" if value >= 0 else "-"
        parts.append(f"{sign} {abs(value):.{precision}f} * (x - {base_year})^{power}")
    return " ".join(parts)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yearfill",
        description="Fill missing years with polynomial trends and forecast ahead.",
    )
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT, help="input CSV file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="output CSV file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the whole fill-and-forecast report; return the exit status."""
    args = _parse_args(argv)

    try:
        rows = read_csv(args.input)
    except OSError:
        print(f"Error: Tidak dapat membuka file {args.input}")
        rows = []
    if not rows:
        print("Error: Tidak ada data yang dibaca!")
        return 1

    print(f"Data yang berhasil dibaca: {len(rows)} baris")

    try:
        models = PolynomialModels.fit(
            rows,
            base_year=BASE_YEAR,
            degree_internet=DEGREE_INTERNET,
            degree_population=DEGREE_POPULATION,
        )
    except SingularMatrixError:
        print("Error: Matriks singular, tidak dapat menyelesaikan sistem.")
        return 1

    print("\nHasil Regresi Polinomial (Persentase Internet):")
    print("Model: y = " + format_polynomial(models.coef_internet, models.base_year, 6))
    print(f"R² (koefisien determinasi): {models.r_squared_internet:.4f}")

    print("\nHasil Regresi Polinomial (Populasi):")
    print("Model: y = " + format_polynomial(models.coef_population, models.base_year, 2))
    print(f"R² (koefisien determinasi): {models.r_squared_population:.4f}")

    print("\nPrediksi untuk Tahun yang Hilang:")
    print(f"{'Tahun':<6} {'Persentase Pengguna Internet':<25} {'Populasi':<15}")
    for year in MISSING_YEARS:
        row = models.predict(year)
        print(f"{row.year:<6d} {row.percentage:<25.6f} {row.population:<15.0f}")

    completed = fill_missing(rows, MISSING_YEARS, models)
    try:
        write_csv(args.output, completed)
    except OSError:
        print(f"Error: Tidak dapat membuka file {args.output} untuk ditulis")
    else:
        print(f"\nData lengkap telah disimpan ke file '{args.output}'")

    print("\n------ Prediksi Jangka Panjang ------")
    population_year = models.predict(POPULATION_FORECAST_YEAR)
    print(
        f"Estimasi Populasi Indonesia tahun {POPULATION_FORECAST_YEAR}: "
        f"{population_year.population:.0f} jiwa"
    )

    internet_year = models.predict(INTERNET_FORECAST_YEAR)
    users = models.forecast_users(INTERNET_FORECAST_YEAR)
    print(
        f"Estimasi Persentase Pengguna Internet Indonesia tahun {INTERNET_FORECAST_YEAR}: "
        f"{internet_year.percentage:.2f}%"
    )
    print(
        f"Estimasi Populasi Indonesia tahun {INTERNET_FORECAST_YEAR}: "
        f"{internet_year.population:.0f} jiwa"
    )
    print(
        f"Estimasi Jumlah Pengguna Internet Indonesia tahun {INTERNET_FORECAST_YEAR}: "
        f"{users:.0f} jiwa"
    )

    print("\n------ Evaluasi Model ------")
    print("Model regresi polinomial memiliki nilai R² sebagai berikut:")
    print(
        f"- Model persentase internet: {models.r_squared_internet:.4f} "
        "(semakin mendekati 1 semakin baik)"
    )
    print(
        f"- Model populasi: {models.r_squared_population:.4f} "
        "(semakin mendekati 1 semakin baik)"
    )
    print(_EXTRAPOLATION_NOTE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())