"""
Date utilities for payment schedules.

Schedules are monthly, so every date is normalized to the first day of its
month. Accepts ISO (YYYY-MM-DD, YYYY-MM) and day-first (DD/MM/YYYY) strings.
"""

from datetime import datetime, date
from typing import List, Union

import pandas as pd
from dateutil.relativedelta import relativedelta

from fincalc.utils.error_utils import error_handler, InvalidInputError

_FORMAT_PATTERNS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y-%m",
    "%d/%m/%Y",
    "%d-%m-%Y",
]


@error_handler
def parse_date(
    date_input: Union[str, datetime, date, pd.Timestamp],
    normalize_to_month_start: bool = True,
) -> pd.Timestamp:
    """
    Parse a date into a pandas Timestamp.

    Examples:
        >>> parse_date("2024-01-15")
        Timestamp('2024-01-01 00:00:00')
        >>> parse_date("15/03/2024")
        Timestamp('2024-03-01 00:00:00')
    """
    if date_input is None:
        raise InvalidInputError("Date input cannot be None", field="start_date")

    if isinstance(date_input, pd.Timestamp):
        result = date_input
    elif isinstance(date_input, (datetime, date)):
        result = pd.Timestamp(date_input)
    elif isinstance(date_input, str):
        result = _parse_date_string(date_input.strip())
    else:
        raise TypeError(f"Unsupported date input type: {type(date_input)}")

    if normalize_to_month_start:
        result = result.replace(day=1)

    return result.normalize()


def _parse_date_string(date_str: str) -> pd.Timestamp:
    if not date_str:
        raise InvalidInputError("Date string cannot be empty", field="start_date")

    for fmt in _FORMAT_PATTERNS:
        try:
            return pd.Timestamp(datetime.strptime(date_str, fmt))
        except ValueError:
            continue

    raise InvalidInputError(f"Unable to parse date string: '{date_str}'", field="start_date")


@error_handler
def monthly_dates(start_date: Union[str, datetime, date, pd.Timestamp], periods: int) -> List[pd.Timestamp]:
    """Return ``periods`` consecutive month-start dates beginning at ``start_date``."""
    start = parse_date(start_date, normalize_to_month_start=True)
    return [start + relativedelta(months=x) for x in range(periods)]
