"""
Interactive Console

Text menu for recording transactions, defining interest rules and printing
statements. All ledger errors are reported and the user is returned to the
main menu.
"""

from typing import Callable, List, Optional, Sequence

from .config import LedgerConfig, get_config
from .currency import format_amount
from .dates import parse_year_month
from .errors import LedgerError
from .ledger import Ledger
from .logging_config import setup_logging


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render rows as "| a | b |" lines under a header line"""
    output = ['| ' + ' | '.join(headers) + ' |']
    for row in rows:
        output.append('| ' + ' | '.join(row) + ' |')
    return '\n'.join(output)


class LedgerConsole:
    """
    Menu-driven front end over a Ledger

    input_fn and output_fn default to the builtins and are replaced in tests.
    """

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        config: Optional[LedgerConfig] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.config = config or get_config()
        self.ledger = ledger or Ledger(self.config)
        self.input = input_fn
        self.output = output_fn

    def run(self) -> None:
        """Show the main menu until the user quits or input ends"""
        handlers = {
            'T': self.input_transactions,
            'I': self.define_interest_rules,
            'P': self.print_statement,
        }
        greeting = f"Welcome to {self.config.bank_name}! What would you like to do?"

        while True:
            self.output(greeting)
            self.output("[T] Input transactions")
            self.output("[I] Define interest rules")
            self.output("[P] Print statement")
            self.output("[Q] Quit")

            choice = self._prompt()
            if choice is None or choice.upper() == 'Q':
                self.quit()
                return

            handler = handlers.get(choice.upper())
            if handler is None:
                self.output("Invalid! Please try again.")
                continue

            handler()
            greeting = "Is there anything else you'd like to do?"

    def input_transactions(self) -> None:
        self.output("\nPlease enter transaction details in <Date> <Account> <Type> <Amount> format\n"
                    "(or enter blank to go back to main menu):")
        parts = self._read_parts(4)
        if not parts:
            return

        date, account_id, txn_type, amount = parts[:4]
        try:
            self.ledger.add_transaction(date, account_id, txn_type, amount)
        except LedgerError as e:
            self.output(f"Error: {e}")
            return

        account = self.ledger.get_account(account_id)
        rows = [
            [txn.date, txn.id.ljust(11), txn.type.value.ljust(4), format_amount(txn.amount).rjust(6)]
            for txn in sorted(account.transactions, key=lambda txn: txn.date)
        ]
        self.output(f"\nAccount: {account_id}")
        self.output(format_table(['Date', 'Txn Id', 'Type', 'Amount'], rows))

    def define_interest_rules(self) -> None:
        self.output("\nPlease enter interest rules details in <Date> <RuleId> <Rate in %> format\n"
                    "(or enter blank to go back to main menu):")
        parts = self._read_parts(3)
        if not parts:
            return

        date, rule_id, rate = parts[:3]
        try:
            self.ledger.add_interest_rule(date, rule_id, rate)
        except LedgerError as e:
            self.output(f"Error: {e}")
            return

        rows = [
            [rule.date, rule.id, format_amount(rule.rate).rjust(7)]
            for rule in self.ledger.get_interest_rules()
        ]
        self.output("\nInterest rules:")
        self.output(format_table(['Date', 'RuleId', 'Rate (%)'], rows))

    def print_statement(self) -> None:
        self.output("\nPlease enter account and month to generate the statement <Account> <Year><Month>\n"
                    "(or enter blank to go back to main menu):")
        parts = self._read_parts(2)
        if not parts:
            return

        account_id, period = parts[:2]
        try:
            year, month = parse_year_month(period)
            statement = self.ledger.generate_statement(account_id, year, month)
        except LedgerError as e:
            self.output(f"Error: {e}")
            return

        rows = [
            [
                line.transaction.date,
                line.transaction.id.ljust(11),
                line.transaction.type.value.ljust(4),
                format_amount(line.transaction.amount).rjust(6),
                format_amount(line.balance).rjust(7)
            ]
            for line in statement.lines()
        ]
        self.output(f"\nAccount: {account_id}")
        self.output(format_table(['Date', 'Txn Id', 'Type', 'Amount', 'Balance'], rows))

    def quit(self) -> None:
        self.output(f"\nThank you for banking with {self.config.bank_name}.\nHave a nice day!")

    def _prompt(self) -> Optional[str]:
        try:
            return self.input('> ').strip()
        except EOFError:
            return None

    def _read_parts(self, expected: int) -> List[str]:
        """Read one line of whitespace-separated fields; empty list means go back"""
        line = self._prompt()
        if not line:
            return []

        parts = line.split()
        if len(parts) < expected:
            self.output("Invalid input format. Please try again.")
            return []
        return parts


def main() -> None:
    """Console script entry point"""
    config = get_config()
    setup_logging(config.log_level, fmt=config.log_format, log_file=config.log_file)
    try:
        LedgerConsole(config=config).run()
    except KeyboardInterrupt:
        print()
