"""
Test suite for the interactive console

Drives the menu with scripted input and checks the rendered tables.
"""

from decimal import Decimal

from bank_ledger.console import LedgerConsole, format_table


def scripted(lines):
    """input() replacement that ends with EOF once the script runs out"""
    feed = iter(lines)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return fake_input


def run_console(ledger, config, lines):
    output = []
    console = LedgerConsole(ledger=ledger, config=config, input_fn=scripted(lines), output_fn=output.append)
    console.run()
    return "\n".join(output)


class TestFormatTable:

    def test_rows(self):
        table = format_table(["Date", "RuleId"], [["20230101", "RULE01"], ["20230520", "RULE02"]])

        assert table.splitlines() == [
            "| Date | RuleId |",
            "| 20230101 | RULE01 |",
            "| 20230520 | RULE02 |",
        ]

    def test_header_only(self):
        assert format_table(["A"], []) == "| A |"


class TestLedgerConsole:
    """Test menu flows"""

    def test_full_session(self, ledger, config):
        """Test rules, transactions and a statement through the menu"""
        text = run_console(ledger, config, [
            "I", "20230101 RULE01 1.95",
            "I", "20230520 RULE02 1.90",
            "I", "20230615 RULE03 2.20",
            "T", "20230505 AC001 D 100.00",
            "T", "20230601 AC001 D 150.00",
            "T", "20230626 AC001 W 20.00",
            "T", "20230626 AC001 W 100.00",
            "P", "AC001 202306",
            "Q",
        ])

        assert text.startswith("Welcome to AwesomeGIC Bank! What would you like to do?")
        assert "Is there anything else you'd like to do?" in text
        assert "| 20230615 | RULE03 |    2.20 |" in text
        assert "| 20230626 | 20230626-02 | W    | 100.00 |" in text
        assert "| Date | Txn Id | Type | Amount | Balance |" in text
        assert "| 20230601 | 20230601-01 | D    | 150.00 |  250.00 |" in text
        assert "| 20230630 | " + " " * 11 + " | I    |   0.39 |  130.39 |" in text
        assert text.endswith("Thank you for banking with AwesomeGIC Bank.\nHave a nice day!")
        assert ledger.get_balance("AC001") == Decimal('130.00')

    def test_errors_reported(self, ledger, config):
        """Test that ledger errors return the user to the menu"""
        text = run_console(ledger, config, [
            "T", "20230101 AC001 W 10",
            "T", "202301 AC001 D 10",
            "I", "20230101 RULE01 100",
            "P", "AC001 2023",
            "Q",
        ])

        assert "Error: Insufficient balance for withdrawal: 0.00" in text
        assert "Error: Date should be in YYYYMMdd format" in text
        assert "Error: Interest rate should be greater than 0 and less than 100" in text
        assert "Error: Statement period should be in YYYYMM format" in text
        assert ledger.accounts == {}

    def test_invalid_choice_and_short_input(self, ledger, config):
        text = run_console(ledger, config, ["X", "T", "20230101 AC001 D", "Q"])

        assert "Invalid! Please try again." in text
        assert "Invalid input format. Please try again." in text
        assert ledger.accounts == {}

    def test_blank_input_goes_back(self, ledger, config):
        text = run_console(ledger, config, ["T", "", "q"])

        assert text.count("[T] Input transactions") == 2
        assert "Have a nice day!" in text

    def test_end_of_input_quits(self, ledger, config):
        text = run_console(ledger, config, ["T"])

        assert text.endswith("Have a nice day!")

    def test_oversized_amount_reported(self, ledger, config):
        """Test that an amount too long for cent precision does not end the session"""
        text = run_console(ledger, config, ["T", "20230101 AC001 D " + "1" * 27, "Q"])

        assert "Error: Amount is too large" in text
        assert text.endswith("Have a nice day!")
        assert ledger.accounts == {}
