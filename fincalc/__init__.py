"""
FinCalc - Personal Finance Calculators

Pure calculation engine and JSON API for:
- Mortgage payments, overpayment savings and rate sensitivity
- Car finance (hire purchase and PCP)
- Pension projection across asset classes
- Purchasing power over historical inflation
"""

__version__ = "1.0.0"
__author__ = "FinCalc Contributors"
