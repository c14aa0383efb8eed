"""Tests for emotion and brand classification."""

import pytest

from evpulse.core.classifier import (
    classify,
    classify_emotion,
    detect_brand,
    emotion_display_label,
    normalize_emotion_label,
)
from evpulse.core.models import Emotion


@pytest.mark.parametrize("text,emotion", [
    ("Motornya bagus sekali", Emotion.SATISFACTION),
    ("Saya percaya dengan kualitasnya", Emotion.TRUST),
    ("Saya takut baterainya meledak", Emotion.FEAR),
    ("Saya ragu soal jarak tempuhnya", Emotion.SKEPTICISM),
    ("Berapa harga motor listrik ini?", Emotion.INTEREST),
    ("", Emotion.INTEREST),
])
def test_classify_emotion(text, emotion):
    assert classify_emotion(text) == emotion


def test_emotion_priority():
    """Satisfaction beats fear when both appear."""
    assert classify_emotion("bagus tapi saya takut") == Emotion.SATISFACTION
    assert classify_emotion("PUAS") == Emotion.SATISFACTION


@pytest.mark.parametrize("text,brand", [
    ("Gesits G1 mantap", "Gesits"),
    ("Viar Q1 irit", "Viar"),
    ("polytron fox-r keren", "Polytron"),
    ("Fox-R saja", "Polytron"),
    ("United T1800 oke", "United"),
    ("Honda Beat", None),
    (None, None),
])
def test_detect_brand(text, brand):
    assert detect_brand(text) == brand


def test_classify_combines_emotion_and_brand():
    result = classify("Alva bagus")
    assert result.emotion == Emotion.SATISFACTION
    assert result.brand == "Alva"


def test_normalize_emotion_label():
    assert normalize_emotion_label("Minat") == Emotion.INTEREST
    assert normalize_emotion_label("fear") == Emotion.FEAR
    assert normalize_emotion_label(" kepuasan ") == Emotion.SATISFACTION
    assert normalize_emotion_label("joy") is None


def test_emotion_display_label():
    assert emotion_display_label(Emotion.TRUST, "id") == "Kepercayaan"
    assert emotion_display_label(Emotion.TRUST, "en") == "Trust"
