"""
Ledger Engine

Aggregate root owning all accounts, the interest rule book and the per-day
transaction sequence counter. Validates and records deposits and
withdrawals, versions interest rules by effective date, computes monthly
interest and assembles statements.
"""

from decimal import Decimal
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
import threading

from .accounts import Account
from .config import LedgerConfig, get_config
from .currency import format_amount, parse_amount, parse_rate
from .dates import (
    before_month, coerce_year_month, last_day_of_month, normalize_date,
    parse_date
)
from .errors import InsufficientBalance, InvalidTransactionType, LedgerError
from .interest import (
    AccrualInterval, InterestRule, accrue_month, find_applicable_rule,
    total_interest
)
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionType

# Types accepted from callers; interest entries are produced internally
_INPUT_TYPES = {
    TransactionType.DEPOSIT.value: TransactionType.DEPOSIT,
    TransactionType.WITHDRAWAL.value: TransactionType.WITHDRAWAL,
}


@dataclass(frozen=True)
class StatementLine:
    """Statement row with the balance after the transaction"""
    transaction: Transaction
    balance: Decimal


@dataclass
class Statement:
    """
    Month-end statement for one account

    transactions holds the month's deposits and withdrawals in stored order
    followed by one synthetic interest entry dated on the last day of the
    month.
    """
    account_id: str
    year: int
    month: int
    beginning_balance: Decimal
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def interest(self) -> Decimal:
        return sum(
            (txn.amount for txn in self.transactions if txn.is_interest),
            Decimal('0')
        )

    def lines(self) -> List[StatementLine]:
        """Transactions in date order with a running balance"""
        ordered = sorted(self.transactions, key=lambda txn: txn.date)
        running = self.beginning_balance
        result = []
        for txn in ordered:
            running += txn.signed_amount
            result.append(StatementLine(transaction=txn, balance=running))
        return result

    @property
    def closing_balance(self) -> Decimal:
        lines = self.lines()
        return lines[-1].balance if lines else self.beginning_balance


class Ledger:
    """
    Single-currency ledger of named accounts

    A failed add_transaction or add_interest_rule leaves the ledger exactly
    as it was. Public operations are serialised on one lock so an instance
    can be shared between threads.
    """

    def __init__(self, config: Optional[LedgerConfig] = None):
        self.config = config or get_config()
        self.accounts: Dict[str, Account] = {}
        self.interest_rules: List[InterestRule] = []
        self.transaction_counter: Dict[str, int] = {}
        self.logger = get_logger("bank_ledger.ledger")
        self._lock = threading.RLock()

    def get_account(self, account_id: str) -> Account:
        """Get an account, creating it on first reference"""
        with self._lock:
            account = self.accounts.get(account_id)
            if account is None:
                account = Account(account_id)
                self.accounts[account_id] = account
            return account

    def get_balance(self, account_id: str, as_of=None) -> Decimal:
        """Balance of an account as of a date (defaults to today)"""
        with self._lock:
            return self.get_account(account_id).get_balance(as_of)

    def add_transaction(
        self,
        date: str,
        account_id: str,
        transaction_type: str,
        amount: Union[str, Decimal]
    ) -> Transaction:
        """
        Validate and record a deposit or withdrawal

        Args:
            date: Transaction date; any text whose digits form YYYYMMDD
            account_id: Target account, created if unknown
            transaction_type: "D" or "W", case-insensitive
            amount: Positive amount with at most two decimals

        Returns:
            The recorded Transaction with its "YYYYMMDD-NN" id

        Raises:
            InvalidDateFormat, InvalidDate, InvalidTransactionType,
            InvalidAmount, InvalidAmountPrecision, InsufficientBalance
        """
        with self._lock:
            try:
                canonical_date = parse_date(date)
                txn_type = self._parse_transaction_type(transaction_type)
                value = parse_amount(amount, self.config.amount_precision)

                if txn_type is TransactionType.WITHDRAWAL:
                    # Balance as of today, even for back-dated withdrawals
                    existing = self.accounts.get(account_id)
                    balance = existing.get_balance() if existing else Decimal('0')
                    if value > balance:
                        raise InsufficientBalance(balance)
            except LedgerError as e:
                log_action(
                    self.logger, "warning", f"Transaction rejected: {e}",
                    action="add_transaction", resource=f"account:{account_id}",
                    extra={"date": date, "type": transaction_type, "amount": str(amount)}
                )
                raise

            account = self.get_account(account_id)
            transaction = Transaction(
                date=canonical_date,
                account=account_id,
                type=txn_type,
                amount=value,
                id=self._next_transaction_id(canonical_date)
            )
            account.add_transaction(transaction)

            log_action(
                self.logger, "info", f"Transaction recorded: {txn_type.name.lower()}",
                action="add_transaction", resource=f"transaction:{transaction.id}",
                extra={
                    "account": account_id,
                    "type": txn_type.value,
                    "amount": format_amount(value),
                    "date": canonical_date
                }
            )
            return transaction

    def add_interest_rule(self, date: str, rule_id: str, rate: Union[str, Decimal]) -> InterestRule:
        """
        Define an interest rule, replacing any rule on the same date

        Raises:
            InvalidDateFormat, InvalidDate, InvalidInterestRate
        """
        with self._lock:
            try:
                canonical_date = parse_date(date)
                value = parse_rate(rate)
            except LedgerError as e:
                log_action(
                    self.logger, "warning", f"Interest rule rejected: {e}",
                    action="add_interest_rule", resource=f"rule:{rule_id}",
                    extra={"date": date, "rate": str(rate)}
                )
                raise

            rule = InterestRule(date=canonical_date, id=rule_id, rate=value)

            replaced = [r for r in self.interest_rules if r.date == canonical_date]
            self.interest_rules = [r for r in self.interest_rules if r.date != canonical_date]
            self.interest_rules.append(rule)
            self.interest_rules.sort(key=lambda r: r.date)

            log_action(
                self.logger, "info", f"Interest rule defined: {rule_id}",
                action="add_interest_rule", resource=f"rule:{rule_id}",
                extra={
                    "date": canonical_date,
                    "rate": str(value),
                    "replaced": [r.id for r in replaced]
                }
            )
            return rule

    def get_interest_rules(self) -> List[InterestRule]:
        """Snapshot of the rules, ascending by effective date"""
        with self._lock:
            return list(self.interest_rules)

    def get_applicable_interest_rule(self, date: str) -> Optional[InterestRule]:
        """Rule with the latest effective date on or before date, if any"""
        with self._lock:
            return find_applicable_rule(self.interest_rules, normalize_date(date))

    def interest_breakdown(self, account_id: str, year, month) -> List[AccrualInterval]:
        """Accrual intervals behind a month's interest"""
        year, month = coerce_year_month(year, month)
        with self._lock:
            account = self.get_account(account_id)
            opening_balance = account.get_balance(before_month(year, month))
            rules = list(self.interest_rules)
            return accrue_month(
                opening_balance,
                account.get_transactions_for_month(year, month),
                year,
                month,
                lambda on_date: find_applicable_rule(rules, on_date)
            )

    def calculate_interest(self, account_id: str, year, month) -> Decimal:
        """
        Interest accrued on an account during a calendar month

        Returns:
            Interest rounded half-up to the cent; zero if no rule applied
        """
        intervals = self.interest_breakdown(account_id, year, month)
        return total_interest(intervals, self.config.day_count_basis)

    def generate_statement(self, account_id: str, year, month) -> Statement:
        """
        Assemble a month's statement with a synthetic interest entry

        Nothing is written to the account; repeated calls give the same
        result.
        """
        year, month = coerce_year_month(year, month)
        with self._lock:
            account = self.get_account(account_id)
            interest = self.calculate_interest(account_id, year, month)
            interest_transaction = Transaction(
                date=last_day_of_month(year, month),
                account=account_id,
                type=TransactionType.INTEREST,
                amount=interest
            )

            statement = Statement(
                account_id=account_id,
                year=year,
                month=month,
                beginning_balance=account.get_balance(before_month(year, month)),
                transactions=account.get_transactions_for_month(year, month) + [interest_transaction]
            )

        log_action(
            self.logger, "info", f"Statement generated for {account_id}",
            action="generate_statement", resource=f"account:{account_id}",
            extra={"period": f"{year:04d}{month:02d}", "interest": format_amount(interest)}
        )
        return statement

    def _parse_transaction_type(self, value: str) -> TransactionType:
        txn_type = _INPUT_TYPES.get(str(value or '').strip().upper())
        if txn_type is None:
            raise InvalidTransactionType()
        return txn_type

    def _next_transaction_id(self, canonical_date: str) -> str:
        """Issue the next "YYYYMMDD-NN" id for a day, across all accounts"""
        counter = self.transaction_counter.get(canonical_date, 0) + 1
        self.transaction_counter[canonical_date] = counter
        return f"{canonical_date}-{counter:02d}"
