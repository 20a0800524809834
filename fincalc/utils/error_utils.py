"""
Error handling utilities for FinCalc.

This module provides centralized error handling and logging for the
calculator engine. It includes the exception taxonomy shared by all
calculators and a decorator for consistent error reporting.

Taxonomy:
    FinancialCalculatorError: base class, raised for unexpected failures
    InvalidInputError: the calculator refuses to compute for these inputs
"""

import os
import sys
import logging
import traceback
from functools import wraps
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()

# Configure logging; no file handler on serverless (read-only filesystem)
_log_file = os.getenv("FINCALC_LOG_FILE", "fincalc.log")
_handlers = [logging.StreamHandler(sys.stdout)]
if _log_file and not os.getenv("VERCEL"):
    _handlers.append(logging.FileHandler(_log_file))

logging.basicConfig(
    level=os.getenv("FINCALC_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_handlers,
)

logger = logging.getLogger("fincalc")


class FinancialCalculatorError(Exception):
    """Base exception class for calculator errors"""

    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        self.timestamp = datetime.now()
        super().__init__(self.message)


class InvalidInputError(FinancialCalculatorError):
    """
    Raised when a calculator refuses to produce a result.

    Distinct from a zero-valued result: the caller should keep or clear its
    previous result rather than display anything computed from these inputs.
    """

    def __init__(self, message, field=None, details=None):
        self.field = field
        super().__init__(message, details)


def error_handler(func):
    """Decorator for handling errors and providing detailed information.

    Calculator errors pass through untouched; anything else is logged with
    its location and re-raised as FinancialCalculatorError.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FinancialCalculatorError as e:
            logger.debug(f"{func.__qualname__} refused input: {e.message}")
            raise
        except Exception as e:
            exc_type, exc_value, exc_tb = sys.exc_info()
            tb = traceback.extract_tb(exc_tb)

            # Get the most relevant parts of the traceback
            error_location = f"{tb[-1].filename}:{tb[-1].lineno}"
            error_function = tb[-1].name

            error_details = {
                "error_type": exc_type.__name__,
                "location": error_location,
                "function": error_function,
                "arguments": {"args": str(args), "kwargs": str(kwargs)},
                "traceback": traceback.format_exc(),
            }

            logger.error(f"Error in {error_location} - {error_function}: {str(e)}")
            logger.debug(f"Detailed error information: {error_details}")

            raise FinancialCalculatorError(
                f"Error in {error_function} at {error_location}: {str(e)}",
                error_details,
            ) from e

    return wrapper


def require_positive(value, field: str, allow_zero: bool = False):
    """Raise InvalidInputError unless ``value`` is positive (or zero, if allowed)."""
    if value is None:
        raise InvalidInputError(f"{field} is required", field=field)
    if allow_zero and value < 0:
        raise InvalidInputError(f"{field} must not be negative (got {value})", field=field)
    if not allow_zero and value <= 0:
        raise InvalidInputError(f"{field} must be greater than zero (got {value})", field=field)
    return value
