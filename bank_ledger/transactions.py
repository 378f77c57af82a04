"""
Transaction Records

Immutable ledger entries. Deposits and withdrawals are recorded by the
Ledger; interest entries are produced only when a statement is assembled.
"""

from decimal import Decimal
from dataclasses import dataclass
from enum import Enum


class TransactionType(Enum):
    """Types of ledger entries"""
    DEPOSIT = "D"
    WITHDRAWAL = "W"
    INTEREST = "I"


# Direction each entry type moves the balance
BALANCE_EFFECT = {
    TransactionType.DEPOSIT: 1,
    TransactionType.WITHDRAWAL: -1,
    TransactionType.INTEREST: 1,
}


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry owned by exactly one Account

    id is "YYYYMMDD-NN" for recorded entries and empty for synthetic
    interest entries. A synthetic interest entry may carry a zero amount
    when no interest accrued; every other entry must be positive.
    """
    date: str
    account: str
    type: TransactionType
    amount: Decimal
    id: str = ""

    def __post_init__(self):
        if not isinstance(self.type, TransactionType):
            object.__setattr__(self, 'type', TransactionType(str(self.type).upper()))

        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if self.amount < Decimal('0'):
            raise ValueError("Transaction amount must be positive")
        if self.amount == Decimal('0') and not self.is_interest:
            raise ValueError("Transaction amount must be positive")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance"""
        return self.amount * BALANCE_EFFECT.get(self.type, 0)

    @property
    def is_interest(self) -> bool:
        return self.type is TransactionType.INTEREST
