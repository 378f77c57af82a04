"""
Test suite for amount handling

Tests amount and rate parsing, precision checks and cent rounding.
"""

import pytest
from decimal import Decimal

from bank_ledger.currency import (
    decimal_from_string, parse_amount, parse_rate, round_to_cents, format_amount
)
from bank_ledger.errors import InvalidAmount, InvalidAmountPrecision, InvalidInterestRate


class TestParseAmount:
    """Test transaction amount parsing"""
    
    def test_valid_amounts(self):
        """Test accepted amount formats"""
        assert parse_amount("100") == Decimal('100.00')
        assert parse_amount("100.5") == Decimal('100.50')
        assert parse_amount("100.25") == Decimal('100.25')
        assert parse_amount(" 7.10 ") == Decimal('7.10')
    
    def test_non_positive_rejected(self):
        """Test zero and negative amounts"""
        with pytest.raises(InvalidAmount):
            parse_amount("0")
        with pytest.raises(InvalidAmount):
            parse_amount("0.00")
        with pytest.raises(InvalidAmount):
            parse_amount("-5")
    
    def test_non_numeric_rejected(self):
        """Test text that is not a plain number"""
        for value in ["abc", "", "NaN", "Infinity", "1,000"]:
            with pytest.raises(InvalidAmount):
                parse_amount(value)
    
    def test_precision_checked_on_literal(self):
        """Test that more than two fractional digits are rejected"""
        with pytest.raises(InvalidAmountPrecision, match="up to 2 decimal places"):
            parse_amount("100.123")
        with pytest.raises(InvalidAmountPrecision):
            parse_amount("100.100")
    
    def test_non_plain_notation_rejected(self):
        """Test positive numbers not written as plain decimals"""
        for value in ["1e2", ".5", "100.", "+5"]:
            with pytest.raises(InvalidAmountPrecision, match="up to 2 decimal places"):
                parse_amount(value)
    
    def test_amount_beyond_decimal_precision(self):
        """Test that an amount too long to round to cents is an InvalidAmount"""
        assert parse_amount("1" * 26) == Decimal("1" * 26 + ".00")
        
        with pytest.raises(InvalidAmount, match="too large"):
            parse_amount("1" * 27)
        with pytest.raises(InvalidAmount):
            parse_amount("9" * 40)
    
    def test_custom_precision(self):
        """Test a different precision limit"""
        assert parse_amount("1.5", precision=1) == Decimal('1.50')
        with pytest.raises(InvalidAmountPrecision, match="up to 1 decimal places"):
            parse_amount("1.55", precision=1)


class TestParseRate:
    """Test interest rate parsing"""
    
    def test_valid_rates(self):
        """Test rates strictly between 0 and 100"""
        assert parse_rate("1.95") == Decimal('1.95')
        assert parse_rate("0.01") == Decimal('0.01')
        assert parse_rate("99.99") == Decimal('99.99')
    
    def test_bounds_are_exclusive(self):
        """Test that 0 and 100 are rejected"""
        for value in ["0", "100", "-1", "150", "abc"]:
            with pytest.raises(InvalidInterestRate):
                parse_rate(value)


class TestRounding:
    """Test cent rounding and formatting"""
    
    def test_round_half_up(self):
        """Test that halves round away from zero"""
        assert round_to_cents(Decimal('0.025')) == Decimal('0.03')
        assert round_to_cents(Decimal('0.015')) == Decimal('0.02')
        assert round_to_cents(Decimal('0.3871')) == Decimal('0.39')
        assert round_to_cents(Decimal('0.0049')) == Decimal('0.00')
    
    def test_format_amount(self):
        """Test display formatting"""
        assert format_amount(Decimal('130')) == "130.00"
        assert format_amount(Decimal('0.39')) == "0.39"
    
    def test_decimal_from_string(self):
        """Test conversion errors"""
        assert decimal_from_string("12.5") == Decimal('12.5')
        with pytest.raises(ValueError, match="non-empty"):
            decimal_from_string("  ")
        with pytest.raises(ValueError, match="Cannot convert"):
            decimal_from_string("twelve")
