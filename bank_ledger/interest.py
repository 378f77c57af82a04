"""
Interest Rules and Monthly Accrual

Interest rules are annual percentage rates effective from a date until a
later rule supersedes them. Monthly interest uses the end-of-day balance of
every day in the month, grouped into accrual intervals: maximal runs of days
over which the same rule applies. Each interval contributes its rate times
the sum of its daily balances; the month total is divided by the day-count
basis and rounded half-up to the cent.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .currency import round_to_cents
from .dates import day_in_month, days_in_month
from .transactions import Transaction, TransactionType

HUNDRED = Decimal('100')


@dataclass(frozen=True)
class InterestRule:
    """Annual interest rate (percent) effective from date"""
    date: str
    id: str
    rate: Decimal

    def __post_init__(self):
        if not isinstance(self.rate, Decimal):
            object.__setattr__(self, 'rate', Decimal(str(self.rate)))

        if self.rate <= Decimal('0') or self.rate >= HUNDRED:
            raise ValueError("Interest rate must be between 0 and 100 (exclusive)")


@dataclass
class AccrualInterval:
    """Run of consecutive days in a month sharing one interest rule"""
    rule: InterestRule
    first_day: int
    last_day: int
    balance_days: Decimal = Decimal('0')  # Sum of end-of-day balances

    @property
    def days(self) -> int:
        return self.last_day - self.first_day + 1

    @property
    def contribution(self) -> Decimal:
        """Annualised interest for the interval, before the day-count division"""
        return self.balance_days * self.rule.rate / HUNDRED


def find_applicable_rule(rules: List[InterestRule], on_date: str) -> Optional[InterestRule]:
    """
    Most recently effective rule on a date

    Args:
        rules: Rules sorted ascending by date
        on_date: Canonical date

    Returns:
        The rule with the greatest date not after on_date, or None
    """
    applicable = None
    for rule in rules:
        if rule.date > on_date:
            break
        applicable = rule
    return applicable


def accrue_month(
    opening_balance: Decimal,
    transactions: List[Transaction],
    year: int,
    month: int,
    rule_for: Callable[[str], Optional[InterestRule]]
) -> List[AccrualInterval]:
    """
    Walk the month day by day and group end-of-day balances by rule

    Args:
        opening_balance: Balance before any of the month's activity
        transactions: The month's transactions; interest entries are ignored
        year: Calendar year
        month: Calendar month (1-12)
        rule_for: Lookup of the applicable rule for a canonical date

    Returns:
        Accrual intervals in day order. Days before any rule applies are not
        covered by an interval.
    """
    movements: Dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL):
            movements[txn.date] = movements.get(txn.date, Decimal('0')) + txn.signed_amount

    intervals: List[AccrualInterval] = []
    balance = opening_balance
    current: Optional[AccrualInterval] = None

    for day in range(1, days_in_month(year, month) + 1):
        on_date = day_in_month(year, month, day)

        # The day's activity posts before the rate is evaluated
        balance += movements.get(on_date, Decimal('0'))

        rule = rule_for(on_date)
        if rule is None:
            continue

        if current is None or current.rule != rule:
            current = AccrualInterval(rule=rule, first_day=day, last_day=day)
            intervals.append(current)

        current.last_day = day
        current.balance_days += balance

    return intervals


def total_interest(intervals: List[AccrualInterval], day_count_basis: int = 365) -> Decimal:
    """Sum interval contributions, annualise and round to the cent"""
    annual = sum((interval.contribution for interval in intervals), Decimal('0'))
    return round_to_cents(annual / Decimal(day_count_basis))
