"""
Core constants and enumerations for FinCalc.

This module defines the constant values, enumerations and default data
tables used by the calculators.
"""

from enum import Enum

# Schedule / projection column names
PERIOD = "period"
DATE = "date"
PAYMENT = "payment"
INTEREST = "interest"
PRINCIPAL = "principal"
OVERPAYMENT = "overpayment"
BALANCE = "balance"
VALUE = "value"
REAL_VALUE = "real_value"

# Rate sensitivity: percentage points above/below the quoted rate
RATE_SENSITIVITY_DELTA_PCT = 1.0

# Balances below half a penny count as repaid
BALANCE_TOLERANCE = 0.005

# Purchasing power: rate assumed for years missing from the series
DEFAULT_FALLBACK_INFLATION_PCT = 2.0

# Car finance: PCP balloon cannot exceed this share of the car price
MAX_BALLOON_PCT_OF_PRICE = 60.0

# Pension allocations must total exactly this
ALLOCATION_TOTAL_PCT = 100.0


class EFinanceType(str, Enum):
    """Car finance agreement types"""
    HIRE_PURCHASE = "hp"
    PCP = "pcp"


class EAssetClass(str, Enum):
    """Asset classes a pension can be allocated across"""
    STOCKS = "stocks"
    BONDS = "bonds"
    CASH = "cash"


# UK inflation (RPI, annual %) 1980-2024. Source: Office for National Statistics
UK_RPI_INFLATION_PCT = {
    1980: 18.0, 1981: 11.9, 1982: 8.6, 1983: 4.6, 1984: 5.0, 1985: 6.1,
    1986: 3.4, 1987: 4.2, 1988: 4.9, 1989: 7.8, 1990: 9.5, 1991: 5.9,
    1992: 3.7, 1993: 1.6, 1994: 2.4, 1995: 3.5, 1996: 2.4, 1997: 3.1,
    1998: 3.4, 1999: 1.5, 2000: 3.0, 2001: 1.8, 2002: 1.7, 2003: 2.9,
    2004: 3.0, 2005: 2.8, 2006: 3.2, 2007: 4.3, 2008: 4.0, 2009: -0.5,
    2010: 4.6, 2011: 5.2, 2012: 3.2, 2013: 3.0, 2014: 2.4, 2015: 1.0,
    2016: 1.8, 2017: 3.6, 2018: 3.3, 2019: 2.6, 2020: 1.5, 2021: 4.1,
    2022: 9.0, 2023: 6.7, 2024: 3.2,
}
