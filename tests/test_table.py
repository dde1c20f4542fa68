"""Tests for the Betacode code table and normalization helpers."""

import pytest

from greek_betacode._table import (
    ALPHABET,
    CODE_TABLE,
    VOWELS,
    combining_mark,
    compose,
    greek_letter,
    is_base,
)


# =============================================================================
# CODE_TABLE
# =============================================================================


class TestCodeTable:
    def test_read_only(self):
        with pytest.raises(TypeError):
            CODE_TABLE["a"] = "x"

    def test_both_cases(self):
        letters = [k for k in CODE_TABLE if k.isalpha()]
        assert len(letters) == 52
        assert sum(k.isupper() for k in letters) == 26

    def test_uppercase_entries(self):
        assert CODE_TABLE["A"] == "\u0391"
        assert CODE_TABLE["W"] == "\u03a9"
        assert CODE_TABLE["V"] == "\u03dc"

    def test_uppercase_sigma_entries(self):
        assert CODE_TABLE["S"] == CODE_TABLE["J"] == "\u03a3"

    def test_two_sigma_entries(self):
        assert CODE_TABLE["s"] == "σ"
        assert CODE_TABLE["j"] == "ς"

    def test_digamma(self):
        assert CODE_TABLE["v"] == "ϝ"

    def test_diacritic_markers(self):
        assert CODE_TABLE["/"] == "\u0301"
        assert CODE_TABLE["\\"] == "\u0300"
        assert CODE_TABLE["="] == "\u0342"
        assert CODE_TABLE[")"] == "\u0313"
        assert CODE_TABLE["("] == "\u0314"
        assert CODE_TABLE["|"] == "\u0345"
        assert CODE_TABLE["+"] == "\u0308"

    def test_vowels(self):
        assert VOWELS == frozenset("aehiouw")


# =============================================================================
# Lookups
# =============================================================================


class TestGreekLetter:
    def test_lowercase(self):
        assert greek_letter("q") == "θ"
        assert greek_letter("c") == "ξ"
        assert greek_letter("y") == "ψ"

    def test_uppercase(self):
        assert greek_letter("Q") == "Θ"
        assert greek_letter("W") == "Ω"

    def test_uppercase_sigma_has_no_final_form(self):
        assert greek_letter("S") == "Σ"
        assert greek_letter("J") == "Σ"

    def test_uppercase_digamma(self):
        assert greek_letter("V") == "Ϝ"

    def test_unknown(self):
        with pytest.raises(KeyError):
            greek_letter("/")


class TestIsBase:
    def test_ascii_letters(self):
        assert all(is_base(c) for c in "abcdefghijklmnopqrstuvwxyz")
        assert all(is_base(c) for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ")

    def test_non_letters(self):
        assert not is_base("/")
        assert not is_base("*")
        assert not is_base("1")

    def test_non_ascii_lookalike(self):
        # KELVIN SIGN lowercases to 'k'
        assert not is_base("\u212a")
        assert not is_base("α")

    def test_alphabet_contents(self):
        assert "*" in ALPHABET
        assert "+" in ALPHABET
        assert " " not in ALPHABET


# =============================================================================
# Normalization Helpers
# =============================================================================


class TestNormalization:
    def test_compose(self):
        assert compose("α\u0313\u0301") == "\u1f04"

    def test_combining_mark(self):
        assert combining_mark("|") == "\u0345"

    def test_combining_mark_unknown(self):
        with pytest.raises(KeyError):
            combining_mark("a")
