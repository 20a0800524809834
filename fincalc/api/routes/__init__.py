"""
API route modules.

Contains one FastAPI router per calculator.
"""

from fincalc.api.routes import mortgage, car_finance, pension, purchasing_power

__all__ = ["mortgage", "car_finance", "pension", "purchasing_power"]
