"""
Bank Ledger

A single-currency ledger for named accounts with date-ranged interest rules
and month-end statements. All financial calculations use Decimal.
"""

from .errors import (
    LedgerError, InvalidDateFormat, InvalidDate, InvalidTransactionType,
    InvalidAmount, InvalidAmountPrecision, InsufficientBalance,
    InvalidInterestRate
)
from .transactions import Transaction, TransactionType
from .interest import InterestRule, AccrualInterval
from .accounts import Account
from .ledger import Ledger, Statement, StatementLine

__version__ = "1.0.0"
