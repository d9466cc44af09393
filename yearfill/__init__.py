"""Fill missing years in yearly internet-usage and population data with curve fits."""

__version__ = "0.1.0"
__all__ = ["__version__"]