"""
FinCalc Core Engine Package.

Modules:
    inflation_index: Annual inflation series (year -> rate) with fallback
    purchasing_power: Historical value adjustment across calendar years
"""

from fincalc.core.engine.inflation_index import InflationSeries
from fincalc.core.engine.purchasing_power import PurchasingPowerCalculator, PurchasingPowerResult

__all__ = ["InflationSeries", "PurchasingPowerCalculator", "PurchasingPowerResult"]
