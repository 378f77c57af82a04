"""Shared fixtures for ledger tests"""

import pytest

from bank_ledger.config import LedgerConfig
from bank_ledger.ledger import Ledger


@pytest.fixture
def config():
    return LedgerConfig(_env_file=None)


@pytest.fixture
def ledger(config):
    return Ledger(config)


@pytest.fixture
def example_ledger(ledger):
    """Three rate changes and a month of activity on AC001"""
    ledger.add_interest_rule("20230101", "RULE01", "1.95")
    ledger.add_interest_rule("20230520", "RULE02", "1.90")
    ledger.add_interest_rule("20230615", "RULE03", "2.20")
    
    ledger.add_transaction("20230505", "AC001", "D", "100.00")
    ledger.add_transaction("20230601", "AC001", "D", "150.00")
    ledger.add_transaction("20230626", "AC001", "W", "20.00")
    ledger.add_transaction("20230626", "AC001", "W", "100.00")
    return ledger
