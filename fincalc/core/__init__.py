"""
Core modules for FinCalc.

This package contains the constants, calculator models and calculation
engines. Everything here is pure: results depend only on the arguments.
"""

from fincalc.core.constants import (
    EFinanceType,
    EAssetClass,
    UK_RPI_INFLATION_PCT,
    DEFAULT_FALLBACK_INFLATION_PCT,
    RATE_SENSITIVITY_DELTA_PCT,
)

__all__ = [
    "EFinanceType",
    "EAssetClass",
    "UK_RPI_INFLATION_PCT",
    "DEFAULT_FALLBACK_INFLATION_PCT",
    "RATE_SENSITIVITY_DELTA_PCT",
]
