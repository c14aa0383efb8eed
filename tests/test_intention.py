"""Tests for the deterministic purchase-intention scorer."""

import pytest

from evpulse.core.intention import (
    derive_intention,
    derive_intention_score,
    intention_level_for_score,
    stable_hash,
    validate_intention_level,
    validate_intention_score,
)
from evpulse.core.models import IntentionLevel


class TestStableHash:
    """Test the rolling hash."""

    def test_known_values(self):
        assert stable_hash("") == 0
        assert stable_hash("a") == 97
        assert stable_hash("ab") == 97 * 31 + 98

    def test_wraps_to_signed_32_bit(self):
        value = stable_hash("motor listrik gesits sangat irit dan nyaman " * 20)
        assert -2 ** 31 <= value < 2 ** 31

    def test_deterministic(self):
        assert stable_hash("Viar Q1 mantap") == stable_hash("Viar Q1 mantap")


class TestDeriveIntention:
    """Test score and level derivation from text."""

    @pytest.mark.parametrize("text,score,level", [
        ("a", 97, IntentionLevel.HIGH),
        ("ab", 75, IntentionLevel.HIGH),
        ("7", 55, IntentionLevel.MEDIUM),
        ("2'", 74, IntentionLevel.MEDIUM),
        ("beli", 36, IntentionLevel.LOW),
        ("no", 82, IntentionLevel.HIGH),
    ])
    def test_known_texts(self, text, score, level):
        result = derive_intention(text)
        assert result.score == score
        assert result.level == level

    def test_case_and_whitespace_insensitive(self):
        assert derive_intention_score("  BELI ") == derive_intention_score("beli") == 36

    def test_empty_text_is_neutral_medium(self):
        for text in ("", "   ", None):
            result = derive_intention(text)
            assert result.score == 50
            assert result.level == IntentionLevel.MEDIUM

    def test_score_stays_in_range(self):
        many_positive = "beli buy purchase ingin want suka like bagus good excellent best puas"
        many_negative = "tidak never jangan buruk bad jelek poor mahal takut ragu kecewa batal"
        for text in (many_positive, many_negative):
            assert 0 <= derive_intention_score(text) <= 100

    def test_deterministic_across_calls(self):
        text = "Saya ingin beli Gesits bulan depan"
        assert derive_intention(text) == derive_intention(text)


class TestLevelThresholds:
    """Test the score to level table."""

    @pytest.mark.parametrize("score,level", [
        (0, IntentionLevel.LOW),
        (54, IntentionLevel.LOW),
        (55, IntentionLevel.MEDIUM),
        (74, IntentionLevel.MEDIUM),
        (75, IntentionLevel.HIGH),
        (100, IntentionLevel.HIGH),
        (150, IntentionLevel.HIGH),
        (-5, IntentionLevel.LOW),
    ])
    def test_thresholds(self, score, level):
        assert intention_level_for_score(score) == level


class TestValidation:
    """Test repair of uploaded intention values."""

    @pytest.mark.parametrize("value,expected", [
        (72, 72),
        (72.5, 73),
        ("80 pts", 80),
        (" 64", 64),
        ("-3", 0),
        ("150", 100),
        ("abc", 50),
        (None, 50),
        (True, 50),
        (float("nan"), 50),
        (float("inf"), 0),
        (10 ** 400, 0),
    ])
    def test_validate_score(self, value, expected):
        assert validate_intention_score(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("high", IntentionLevel.HIGH),
        ("Tinggi", IntentionLevel.HIGH),
        (" low ", IntentionLevel.LOW),
        ("rendah", IntentionLevel.LOW),
        ("sedang", IntentionLevel.MEDIUM),
        ("unknown", IntentionLevel.MEDIUM),
        (None, IntentionLevel.MEDIUM),
        (IntentionLevel.LOW, IntentionLevel.LOW),
    ])
    def test_validate_level(self, value, expected):
        assert validate_intention_level(value) == expected
