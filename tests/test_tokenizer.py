"""Tests for the tokenizer: literals, 'x' disambiguation and implicit multiplication."""

import pytest

from PatternTester.Tokenizer import Token, tokenize, x_is_operator


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _pairs(text):
    return [(token.kind, token.value) for token in tokenize(text)]


# ---------------------------------------------------------------------------
# Basic scanning
# ---------------------------------------------------------------------------

class TestScanning:
    def test_empty_and_blank_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_simple_sum(self):
        assert _pairs("3 + 4") == [("number", 3.0), ("op", "+"), ("number", 4.0)]

    def test_parentheses(self):
        assert _pairs("(a)") == [("paren", "("), ("ident", "a"), ("paren", ")")]

    def test_number_keeps_literal_text(self):
        token = tokenize("007")[0]
        assert token == Token("number", 7.0, "007")

    @pytest.mark.parametrize("text,value", [
        ("1.5", 1.5),
        (".5", 0.5),
        ("2.", 2.0),
        ("1.5e3", 1500.0),
        ("2E-2", 0.02),
        ("4e+1", 40.0),
    ])
    def test_number_grammar(self, text, value):
        assert _pairs(text) == [("number", value)]

    def test_identifier_run(self):
        assert _pairs("rate_2") == [("ident", "rate_2")]

    def test_times_sign_is_operator(self):
        assert _pairs("2 × 3") == [("number", 2.0), ("op", "×"), ("number", 3.0)]

    def test_unknown_character_becomes_operator(self):
        assert _pairs("a=b") == [("ident", "a"), ("op", "="), ("ident", "b")]
        assert _pairs("$") == [("op", "$")]

    @pytest.mark.parametrize("text", [".", "1e", "..."])
    def test_unparsable_number_degrades_to_identifier(self, text):
        assert _pairs(text) == [("ident", text)]


# ---------------------------------------------------------------------------
# Signs
# ---------------------------------------------------------------------------

class TestSigns:
    def test_leading_minus_is_an_operator(self):
        assert tokenize("-5") == [Token("op", "-", "-"), Token("number", 5.0, "5")]

    def test_minus_before_decimal_point(self):
        assert _pairs("-.") == [("op", "-"), ("ident", ".")]
        assert _pairs("-.5") == [("op", "-"), ("number", 0.5)]

    def test_sign_after_operator(self):
        assert _pairs("2*-3") == [("number", 2.0), ("op", "*"), ("op", "-"), ("number", 3.0)]

    def test_binary_minus_stays_operator(self):
        assert _pairs("3 -5") == [("number", 3.0), ("op", "-"), ("number", 5.0)]
        assert _pairs("x-1") == [("ident", "x"), ("op", "-"), ("number", 1.0)]

    def test_minus_before_paren_stays_operator(self):
        assert _pairs("-(1)") == [("op", "-"), ("paren", "("), ("number", 1.0), ("paren", ")")]


# ---------------------------------------------------------------------------
# 'x' disambiguation
# ---------------------------------------------------------------------------

class TestLetterX:
    def test_x_between_numbers_is_multiplication(self):
        assert _pairs("3x4") == [("number", 3.0), ("op", "x"), ("number", 4.0)]

    def test_x_between_identifiers_is_multiplication(self):
        assert _pairs("a x b") == [("ident", "a"), ("op", "x"), ("ident", "b")]

    def test_x_without_left_operand_is_identifier(self):
        assert _pairs("x+1") == [("ident", "x"), ("op", "+"), ("number", 1.0)]

    def test_number_then_x_reads_like_explicit_product(self):
        assert _pairs("2x+1") == _pairs("2*x+1")

    def test_x_starts_longer_identifier(self):
        assert _pairs("xy2") == [("ident", "xy2")]

    def test_x_inside_identifier(self):
        assert _pairs("max") == [("ident", "max")]

    @pytest.mark.parametrize("text,idx,expected", [
        ("3x4", 1, True),
        ("(1)x(2)", 3, True),
        ("a x _b", 2, True),
        ("2x", 1, False),
        ("x2", 0, False),
        ("2x+1", 1, False),
        ("+x(", 1, False),
    ])
    def test_x_is_operator(self, text, idx, expected):
        assert x_is_operator(text, idx) is expected


# ---------------------------------------------------------------------------
# Implicit multiplication
# ---------------------------------------------------------------------------

class TestImplicitMultiplication:
    def test_number_before_paren(self):
        assert _pairs("2(x+1)") == [
            ("number", 2.0), ("op", "*"), ("paren", "("), ("ident", "x"),
            ("op", "+"), ("number", 1.0), ("paren", ")"),
        ]

    def test_number_before_identifier(self):
        assert _pairs("2 y") == [("number", 2.0), ("op", "*"), ("ident", "y")]

    def test_closing_before_opening_paren(self):
        assert _pairs(")(") == [("paren", ")"), ("op", "*"), ("paren", "(")]

    def test_no_insertion_next_to_operators(self):
        assert _pairs("2*(3)") == [
            ("number", 2.0), ("op", "*"), ("paren", "("), ("number", 3.0), ("paren", ")"),
        ]

    def test_no_insertion_inside_empty_parens(self):
        assert _pairs("()") == [("paren", "("), ("paren", ")")]
