"""
Account Module

An account is an append-only sequence of transactions for one identifier.
Balances are derived from the transactions on every query.
"""

from decimal import Decimal
from datetime import date
from typing import List, Optional, Tuple, Union

from .dates import is_in_month, resolve_as_of
from .transactions import Transaction


class Account:
    """
    Ledger account holding its transactions in insertion order

    Insertion order is not necessarily date order: back-dated entries are
    appended at the end. Callers sort before display.
    """

    def __init__(self, account_id: str):
        self.id = account_id
        self._transactions: List[Transaction] = []

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, transactions={len(self._transactions)})"

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of stored transactions in insertion order"""
        return tuple(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction. Validation is the Ledger's job."""
        self._transactions.append(transaction)

    def get_balance(self, as_of: Optional[Union[str, date]] = None) -> Decimal:
        """
        Balance including every transaction dated on or before as_of

        Args:
            as_of: Canonical date, date text or date object (defaults to today)

        Returns:
            Unrounded sum of signed amounts
        """
        cutoff = resolve_as_of(as_of)
        return sum(
            (txn.signed_amount for txn in self._transactions if txn.date <= cutoff),
            Decimal('0')
        )

    def get_transactions_for_month(self, year: int, month: int) -> List[Transaction]:
        """Transactions dated in the given month, in insertion order"""
        return [txn for txn in self._transactions if is_in_month(txn.date, year, month)]
