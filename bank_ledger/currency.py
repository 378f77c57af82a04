"""
Decimal Amount Handling

Parsing, validation and rounding of monetary amounts and interest rates.
NEVER uses float for monetary values. The ledger is single-currency, so an
amount is a plain Decimal with cent precision.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Union
import re

from .errors import InvalidAmount, InvalidAmountPrecision, InvalidInterestRate

# Set global decimal context for financial precision
getcontext().prec = 28

CENT = Decimal('0.01')
ZERO = Decimal('0.00')

# Plain positional notation only: no sign, no exponent, no grouping
_AMOUNT_LITERAL = re.compile(r'^\d+(?:\.(\d+))?$')

Numeric = Union[str, int, Decimal]


def decimal_from_string(value: Numeric) -> Decimal:
    """
    Convert user input to Decimal

    Raises:
        ValueError: If the value is empty or not a finite number
    """
    text = str(value).strip() if value is not None else ''
    if not text:
        raise ValueError("Value must be a non-empty string")

    try:
        result = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    if not result.is_finite():
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    return result


def parse_amount(value: Numeric, precision: int = 2) -> Decimal:
    """
    Parse a transaction amount

    The fractional digit count is checked on the literal text, not on the
    parsed number, so "100.10" passes and "100.123" fails.

    Args:
        value: Amount text such as "100", "100.5" or "100.25"
        precision: Maximum number of fractional digits

    Returns:
        Amount rounded to cent precision

    Raises:
        InvalidAmount: If the value is not a positive number or is too large
            to hold at cent precision
        InvalidAmountPrecision: If it carries too many fractional digits or
            is not written in plain decimal form ("1e2", ".5", "100.")
    """
    try:
        amount = decimal_from_string(value)
    except ValueError:
        raise InvalidAmount()

    if amount <= 0:
        raise InvalidAmount()

    message = f"Amount must have up to {precision} decimal places"
    match = _AMOUNT_LITERAL.match(str(value).strip())
    if not match:
        raise InvalidAmountPrecision(message)

    fraction = match.group(1)
    if fraction is not None and len(fraction) > precision:
        raise InvalidAmountPrecision(message)

    try:
        return round_to_cents(amount)
    except InvalidOperation:
        raise InvalidAmount("Amount is too large")


def parse_rate(value: Numeric) -> Decimal:
    """
    Parse an annual interest rate in percent

    Raises:
        InvalidInterestRate: Unless the value is a number strictly between 0 and 100
    """
    try:
        rate = decimal_from_string(value)
    except ValueError:
        raise InvalidInterestRate()

    if rate <= 0 or rate >= 100:
        raise InvalidInterestRate()
    return rate


def round_to_cents(value: Decimal) -> Decimal:
    """Round half-up to the cent"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Format for display with exactly two decimals"""
    return f"{round_to_cents(value):.2f}"
