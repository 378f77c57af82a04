"""
Ledger Error Kinds

Every validation failure raised by the ledger is a LedgerError. They derive
from ValueError so callers that only know about bad input can still catch them.
"""

from decimal import Decimal
from typing import Optional


class LedgerError(ValueError):
    """Base class for all ledger validation errors"""


class InvalidDateFormat(LedgerError):
    """Date input does not reduce to exactly 8 digits"""

    def __init__(self, message: str = "Date should be in YYYYMMdd format"):
        super().__init__(message)


class InvalidDate(LedgerError):
    """Date has the right shape but is not a real calendar day"""

    def __init__(self, message: str = "Invalid date"):
        super().__init__(message)


class InvalidTransactionType(LedgerError):
    def __init__(self, message: str = "Type should be D for deposit or W for withdrawal"):
        super().__init__(message)


class InvalidAmount(LedgerError):
    def __init__(self, message: str = "Amount must be greater than zero"):
        super().__init__(message)


class InvalidAmountPrecision(LedgerError):
    def __init__(self, message: str = "Amount must have up to 2 decimal places"):
        super().__init__(message)


class InsufficientBalance(LedgerError):
    """Withdrawal exceeds the account's current balance"""

    def __init__(self, balance: Decimal, message: Optional[str] = None):
        self.balance = balance
        if message is None:
            message = f"Insufficient balance for withdrawal: {balance:.2f}"
        super().__init__(message)


class InvalidInterestRate(LedgerError):
    def __init__(self, message: str = "Interest rate should be greater than 0 and less than 100"):
        super().__init__(message)
