"""
Tests for splitledger value objects

Covers the shared amount/weight grammar, exact parsing, names and
expenses. Transaction behaviour lives in test_transaction.py.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from splitledger.models import (
    OTHERS,
    RESERVED_NAMES,
    SELF,
    Amount,
    Description,
    Expense,
    Name,
    Weight,
    format_fraction,
    fraction_to_text,
    is_valid_amount,
    is_valid_name,
    is_valid_weight,
    parse_fraction,
)


class TestGrammar:
    """Tests for the amount/weight text grammar."""

    def test_none_is_rejected(self):
        """Test that the predicates refuse None outright."""
        with pytest.raises(TypeError):
            is_valid_amount(None)
        with pytest.raises(TypeError):
            is_valid_weight(None)

    @pytest.mark.parametrize("text", ["", " ", "a", "1/", "/2", ".", "--1", "1..0", "1/2/3"])
    def test_invalid_amounts(self, text):
        """Test that malformed text is not an amount."""
        assert is_valid_amount(text) is False

    @pytest.mark.parametrize(
        "text",
        ["1/2", "-1/2", "1 / 2", "1.0/2.0", "100.99", "-5", "0", "010.00", ".0", "1 ", "1. 0"],
    )
    def test_valid_amounts(self, text):
        """Test accepted amount forms, including fractions and spacing."""
        assert is_valid_amount(text) is True

    def test_weights_reject_minus_sign(self):
        """Test that weights cannot be negative as text."""
        assert is_valid_weight("-1") is False
        assert is_valid_weight("-1/2") is False
        assert is_valid_weight("1/-2") is False

    @pytest.mark.parametrize(
        "text",
        ["100.99", "0", "0.0", "010", "010.00", ".0", "1 ", "1. 0", "1/2", "1 / 2", "1.0/2.0"],
    )
    def test_valid_weights(self, text):
        """Test accepted weight forms."""
        assert is_valid_weight(text) is True

    @pytest.mark.parametrize("text", ["1/2", "1 / 2", "1.0/2.0", "3/4"])
    def test_fraction_forms_agree(self, text):
        """Test that amount and weight agree on unsigned fraction forms."""
        assert is_valid_amount(text) == is_valid_weight(text)


class TestParsing:
    """Tests for exact parsing and rendering."""

    def test_parse_fraction_divides_after_parsing(self):
        assert parse_fraction("1.5/0.5") == Fraction(3)
        assert parse_fraction("1/3") == Fraction(1, 3)
        assert parse_fraction(" 1. 5 ") == Fraction(3, 2)
        assert parse_fraction("-1/2") == Fraction(-1, 2)

    def test_parse_fraction_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            parse_fraction("1/0")

    def test_fraction_to_text(self):
        assert fraction_to_text(Fraction(1, 2)) == "0.5"
        assert fraction_to_text(Fraction(-49, 4)) == "-12.25"
        assert fraction_to_text(Fraction(1, 20)) == "0.05"
        assert fraction_to_text(Fraction(5)) == "5"
        assert fraction_to_text(Fraction(0)) == "0"
        assert fraction_to_text(Fraction(1, 3)) == "1/3"

    @pytest.mark.parametrize("text", ["100.99", "010.00", ".5", "1/3", "-7/8", "2/6"])
    def test_text_round_trip(self, text):
        """Test that rendered text parses back to an equal amount."""
        amount = Amount(value=text)
        assert Amount(value=str(amount)) == amount

    def test_format_fraction_rounds_for_display(self):
        assert format_fraction(Fraction(1, 3)) == "0.33"
        assert format_fraction(Fraction(2, 3)) == "0.67"
        assert format_fraction(Fraction(-1, 3)) == "-0.33"
        assert format_fraction(Fraction(10)) == "10.00"
        assert format_fraction(Fraction(5, 2), 0) == "2"

    def test_format_fraction_beyond_decimal_precision(self):
        """Test that balances wider than 28 digits still format."""
        assert format_fraction(Fraction(2 * 10 ** 26)) == "200000000000000000000000000.00"
        assert format_fraction(Fraction(10 ** 30 + 1, 3)) == "3" * 30 + ".67"

    def test_format_fraction_rounds_half_even(self):
        assert format_fraction(Fraction(1, 200)) == "0.00"
        assert format_fraction(Fraction(3, 200)) == "0.02"
        assert format_fraction(Fraction(-3, 200)) == "-0.02"
        assert format_fraction(Fraction(7, 2), 0) == "4"


class TestAmount:
    """Tests for the Amount model."""

    def test_amount_from_text(self):
        assert Amount(value="21.50").value == Fraction(43, 2)

    def test_amount_from_fraction_bypasses_grammar(self):
        assert Amount(value=Fraction(1, 3)).value == Fraction(1, 3)

    def test_amount_allows_negative(self):
        assert Amount(value="-1/2").value == Fraction(-1, 2)

    def test_amount_rejects_none(self):
        with pytest.raises(ValueError):
            Amount(value=None)

    @pytest.mark.parametrize("value", ["", "abc", " ", "1/0", 1.5])
    def test_amount_rejects_invalid(self, value):
        """Test that bad text, zero denominators and floats are rejected."""
        with pytest.raises(ValueError):
            Amount(value=value)

    def test_amount_from_finite_decimal(self):
        assert Amount(value=Decimal("1.25")).value == Fraction(5, 4)

    @pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN", "sNaN"])
    def test_amount_rejects_non_finite_decimal(self, value):
        with pytest.raises(ValueError):
            Amount(value=Decimal(value))

    def test_amount_equality_and_hash(self):
        amount = Amount(value="21.50")
        assert amount == Amount(value="21.5")
        assert amount == Amount(value="43/2")
        assert hash(amount) == hash(Amount(value="43/2"))
        assert amount != Amount(value="10")
        assert amount != 21.5

    def test_amount_is_frozen(self):
        amount = Amount(value="1")
        with pytest.raises(ValueError):
            amount.value = Fraction(2)


class TestWeight:
    """Tests for the Weight model."""

    def test_weight_rejects_empty(self):
        with pytest.raises(ValueError):
            Weight(value="")

    def test_weight_rejects_negative_text(self):
        with pytest.raises(ValueError):
            Weight(value="-1")

    def test_weight_from_fraction_may_be_negative(self):
        """Test that derived weights skip the text grammar."""
        assert Weight(value=Fraction(-1)).value == Fraction(-1)

    def test_weight_zero_is_valid(self):
        assert Weight(value="0").value == 0

    def test_weight_equality(self):
        weight = Weight(value="21.50")
        assert weight == Weight(value="21.50")
        assert weight == weight
        assert weight != None  # noqa: E711
        assert weight != 5.0
        assert weight != Weight(value="10")
        assert hash(weight) == hash(Weight(value="21.50"))

    @pytest.mark.parametrize("value", ["Infinity", "NaN"])
    def test_weight_rejects_non_finite_decimal(self, value):
        with pytest.raises(ValueError):
            Weight(value=Decimal(value))


class TestName:
    """Tests for participant names and the reserved sentinels."""

    def test_name_creation_strips_whitespace(self):
        assert Name(full_name="  Alice  ").full_name == "Alice"

    @pytest.mark.parametrize("value", ["", " ", "Al!ce", "_bob"])
    def test_invalid_names(self, value):
        with pytest.raises(ValueError):
            Name(full_name=value)

    @pytest.mark.parametrize("value", ["Self", "self", "OTHERS", "others"])
    def test_reserved_spellings_rejected(self, value):
        """Test that a real person can never collide with a sentinel."""
        with pytest.raises(ValueError, match="reserved"):
            Name(full_name=value)

    def test_value_equality(self):
        assert Name(full_name="Alice") == Name(full_name="Alice")
        assert Name(full_name="Alice") != Name(full_name="alice")

    def test_reserved_names(self):
        assert RESERVED_NAMES == frozenset({SELF, OTHERS})
        assert SELF.is_reserved is True
        assert OTHERS.is_reserved is True
        assert Name(full_name="Alice").is_reserved is False
        assert str(SELF) == "Self"

    def test_is_valid_name(self):
        assert is_valid_name("Bob Smith") is True
        assert is_valid_name("OTHERS") is False
        assert is_valid_name("!") is False

    def test_is_valid_name_none(self):
        with pytest.raises(TypeError):
            is_valid_name(None)


class TestExpenseAndDescription:
    """Tests for Expense and Description."""

    def test_expense_equality(self):
        alice = Name(full_name="Alice")
        first = Expense(person_name=alice, weight=Weight(value="1"))
        same = Expense(person_name=alice, weight=Weight(value="1.0"))
        other = Expense(person_name=alice, weight=Weight(value="2"))
        assert first == same
        assert len({first, same, other}) == 2

    def test_description_rejects_blank(self):
        with pytest.raises(ValueError):
            Description(value="   ")

    def test_description_strips_whitespace(self):
        assert str(Description(value="  Dinner ")) == "Dinner"
